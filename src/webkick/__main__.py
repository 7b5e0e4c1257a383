from webkick.cli import app

app(prog_name="webkick")
