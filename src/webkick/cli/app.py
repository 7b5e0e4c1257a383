"""Typer CLI application for webkick."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import webkick
from webkick.cli._config import DEFAULT_VIEW, is_empty_directory, resolve_config
from webkick.cli._prompts import confirm_non_empty, prompt_css, prompt_view
from webkick.cli._renderer import scaffold_project
from webkick.cli._types import CssEngine, ViewEngine

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

E = TypeVar("E", bound=Enum)

_FILE_DESCRIPTIONS: dict[str, str] = {
    "package.json": "project manifest",
    "app.js": "application entry point",
    "bin/www": "server launcher",
    "config/index.js": "runtime settings",
}


def _print_engines() -> None:
    _console.print()
    for title, engines, default in (
        ("View engines", list(ViewEngine), DEFAULT_VIEW),
        ("CSS engines", list(CssEngine), None),
    ):
        _console.print(f"[bold cyan]◆[/]  {title}")
        _console.print("[dim]│[/]")
        for e in engines:
            marker = " [dim](default)[/]" if e is default else ""
            _console.print(f"[dim]│[/]  [bold cyan]{e.value:<10}[/] [bold]{e.label}[/]{marker}")
            _console.print(f"[dim]│[/]  {' ' * 10} [dim]{e.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_engines_callback(value: bool) -> None:
    if value:
        _print_engines()
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"webkick v{webkick.__version__}")
        raise Exit()


def _parse_engine(kind: type[E], raw: str | None, flag: str) -> E | None:
    """Validate a raw engine value, exiting with code 2 when it is unknown."""
    if raw is None:
        return None
    try:
        return kind(raw)
    except ValueError:
        valid = ", ".join(f"'{e.value}'" for e in kind)
        _console.print()
        _console.print(
            f"[bold red]Error:[/] [bold]{escape(repr(raw))}[/] is not a valid value for {flag}."
        )
        _console.print(f"[dim]Valid values:[/] {valid}")
        _console.print()
        raise Exit(code=2) from None


def _warn_renamed(engine: ViewEngine) -> None:
    _console.print(
        f"[yellow]warning:[/] option [bold]--{engine.value}[/] has been renamed to "
        f"[bold]--view={engine.value}[/]"
    )


@app.command()
def main(
    directory: Annotated[
        str, Argument(help="Destination directory for the new application")
    ] = ".",
    view_str: Annotated[
        str | None,
        Option(
            "--view",
            "-v",
            help=f"View engine (default: {DEFAULT_VIEW.value}). See --list-engines / -l.",
            show_default=False,
        ),
    ] = None,
    css_str: Annotated[
        str | None,
        Option(
            "--css",
            "-c",
            help="Stylesheet engine (default: plain css). See --list-engines / -l.",
            show_default=False,
        ),
    ] = None,
    git: Annotated[bool, Option("--git", help="Add a .gitignore file")] = False,
    force: Annotated[
        bool, Option("--force", "-f", help="Scaffold into a non-empty directory without asking")
    ] = False,
    interactive: Annotated[
        bool, Option("--interactive", "-i", help="Prompt for engines not given as options")
    ] = False,
    ejs: Annotated[bool, Option("--ejs", "-e", help="Deprecated, use --view=ejs")] = False,
    hbs: Annotated[bool, Option("--hbs", help="Deprecated, use --view=hbs")] = False,
    hogan: Annotated[bool, Option("--hogan", "-H", help="Deprecated, use --view=hogan")] = False,
    pug: Annotated[bool, Option("--pug", help="Deprecated, use --view=pug")] = False,
    nunjucks: Annotated[
        bool, Option("--nunjucks", help="Deprecated, use --view=nunjucks")
    ] = False,
    list_engines: Annotated[
        bool,
        Option(
            "--list-engines",
            "-l",
            help="List all available engines and exit.",
            callback=_list_engines_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new web application skeleton in DIRECTORY."""
    view = _parse_engine(ViewEngine, view_str, "--view")
    css = _parse_engine(CssEngine, css_str, "--css")

    legacy = {
        ViewEngine.EJS: ejs,
        ViewEngine.HBS: hbs,
        ViewEngine.HOGAN: hogan,
        ViewEngine.PUG: pug,
        ViewEngine.NUNJUCKS: nunjucks,
    }
    for engine, enabled in legacy.items():
        if enabled:
            _warn_renamed(engine)

    destination = Path(directory)
    try:
        if destination.exists() and not destination.is_dir():
            _console.print(f"[bold red]Error:[/] '{escape(directory)}' is not a directory.")
            raise Exit(code=1)
        populated = not is_empty_directory(destination)
    except OSError as err:
        _console.print(f"[bold red]Error:[/] {escape(str(err))}")
        raise Exit(code=1) from err

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  webkick v{webkick.__version__}")
    _console.print("[dim]│[/]")

    if populated and not force and not confirm_non_empty():
        _console.print("[bold red]●[/]  aborting")
        raise Exit(code=1)

    # Interactive prompts for missing options
    if interactive and view is None and not any(legacy.values()):
        view = prompt_view()
    if interactive and css_str is None:
        css = prompt_css()

    config = resolve_config(destination, view, css, legacy=legacy, git=git, force=force)

    # Render
    _console.print(
        f"[bold green]◇[/]  Creating {escape(config.app_name)} "
        f"([bold]{config.view.value}[/] views, "
        f"[bold]{config.css.value if config.css else 'plain'}[/] css)..."
    )

    try:
        created = scaffold_project(config)
    except OSError as err:
        _console.print(f"[bold red]Error:[/] {escape(str(err))}")
        raise Exit(code=1) from err

    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]({desc})[/]" if desc else ""
        _console.print(f"[dim]│[/]  [green]create[/] : {escape(name)}{desc_str}")

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done! Next steps:")
    if directory != ".":
        _console.print(f"[dim]│[/]  cd {escape(directory)}")
    _console.print("[dim]│[/]  npm install")
    _console.print(f"[dim]│[/]  DEBUG={escape(config.app_name)}:* npm start")
    _console.print()
