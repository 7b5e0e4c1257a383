"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

import importlib.resources as ilr
import re
from collections.abc import Mapping
from pathlib import Path

from webkick.cli._config import ScaffoldConfig
from webkick.cli._manifest import build_manifest, dump_manifest
from webkick.cli._types import CssEngine, ViewEngine

_SCAFFOLD_PKG = "webkick.cli"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# asset under scaffold/css -> file written to public/css
_STYLESHEETS: dict[CssEngine | None, tuple[str, str]] = {
    None: ("style.css", "style.css"),
    CssEngine.LESS: ("style.less", "style.less"),
    CssEngine.STYLUS: ("style.styl", "style.styl"),
    CssEngine.COMPASS: ("style.scss", "style.scss"),
    CssEngine.SASS: ("style.sass", "style.sass"),
}

_CSS_MIDDLEWARE: dict[CssEngine, str] = {
    CssEngine.LESS: "app.use(require('less-middleware')(path.join(__dirname, 'public')));\n",
    CssEngine.STYLUS: "app.use(require('stylus').middleware(path.join(__dirname, 'public')));\n",
    CssEngine.COMPASS: (
        "app.use(require('node-compass')({ mode: 'expanded', "
        "project: path.join(__dirname, 'public'), css: 'css', sass: 'css' }));\n"
    ),
    CssEngine.SASS: """\
app.use(require('node-sass-middleware')({
  src: path.join(__dirname, 'public'),
  dest: path.join(__dirname, 'public'),
  indentedSyntax: true,
  sourceMap: true,
}));
""",
}

_NUNJUCKS_SETUP = """\
const nunjucks = require('nunjucks');
nunjucks.configure(app.get('views'), { autoescape: true, express: app });
app.set('view engine', 'njk');"""

_SUPPORT_FILES: dict[str, str] = {
    "eslintrc.json": ".eslintrc.json",
    "editorconfig": ".editorconfig",
    "LICENSE": "LICENSE",
    "README.md": "README.md",
}


def render_template(text: str, values: Mapping[str, str]) -> str:
    """Substitute ``{identifier}`` tokens in *text*.

    Tokens without a matching key are replaced by the empty string.
    """
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), ""), text)


def _read(*parts: str) -> str:
    asset = ilr.files(_SCAFFOLD_PKG).joinpath("scaffold")
    for part in parts:
        asset = asset.joinpath(part)
    return asset.read_text(encoding="utf-8")


def _view_setup(view: ViewEngine) -> str:
    if view is ViewEngine.NUNJUCKS:
        return _NUNJUCKS_SETUP
    return f"app.set('view engine', '{view.extension}');"


def _entry_point_values(config: ScaffoldConfig) -> dict[str, str]:
    return {
        "name": config.app_name,
        "view": _view_setup(config.view),
        "css": _CSS_MIDDLEWARE[config.css] if config.css is not None else "",
    }


class _Writer:
    """Writes into the project directory and records what was created."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.created: list[str] = []

    def mkdir(self, rel: str) -> None:
        (self.root / rel).mkdir(parents=True, exist_ok=True)
        self.created.append(f"{rel}/")

    def write(self, rel: str, content: str, mode: int | None = None) -> None:
        target = self.root / rel
        target.write_text(content, encoding="utf-8")
        if mode is not None:
            target.chmod(mode)
        self.created.append(rel)


def _public_tree(w: _Writer, css: CssEngine | None) -> None:
    w.mkdir("public")
    w.mkdir("public/js")
    w.mkdir("public/images")
    w.mkdir("public/css")
    w.write("public/js/main.js", _read("js", "main.js"))
    asset, dest = _STYLESHEETS[css]
    w.write(f"public/css/{dest}", _read("css", asset))


def _routes_tree(w: _Writer) -> None:
    w.mkdir("routes")
    w.write("routes/index.js", _read("js", "routes", "index.js"))
    w.write("routes/users.js", _read("js", "routes", "users.js"))


def _views_tree(w: _Writer, view: ViewEngine) -> None:
    w.mkdir("views")
    for name in view.views:
        filename = f"{name}.{view.extension}"
        w.write(f"views/{filename}", _read("views", view.value, filename))


def _config_tree(w: _Writer) -> None:
    w.mkdir("config")
    w.write("config/index.js", _read("js", "config", "index.js"))


def scaffold_project(config: ScaffoldConfig) -> list[str]:
    """Write a new project into ``config.destination``.

    Directories are created when missing and files are overwritten. Any
    ``OSError`` propagates immediately and leaves whatever was written so far.
    Returns the created paths relative to the destination, in creation order.
    """
    config.destination.mkdir(parents=True, exist_ok=True)
    w = _Writer(config.destination)

    w.mkdir("bin")
    w.write("bin/www", _read("js", "www"), mode=0o755)

    _public_tree(w, config.css)
    _routes_tree(w)
    _views_tree(w, config.view)
    _config_tree(w)

    for asset, dest in _SUPPORT_FILES.items():
        w.write(dest, _read("project", asset))
    if config.git:
        w.write(".gitignore", _read("project", "gitignore"))

    w.write("app.js", render_template(_read("js", "app.js"), _entry_point_values(config)))
    w.write("package.json", dump_manifest(build_manifest(config)))

    return w.created
