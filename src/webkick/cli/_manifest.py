"""Generation of the project's package.json."""

from __future__ import annotations

import json
from typing import Any

from webkick.cli._config import DEFAULT_VIEW, ScaffoldConfig
from webkick.cli._types import CssEngine, ViewEngine

_BASE_DEPS: dict[str, str] = {
    "cookie-parser": "~1.4.6",
    "debug": "~2.6.9",
    "express": "~4.19.2",
    "http-errors": "~2.0.0",
    "morgan": "~1.10.0",
    DEFAULT_VIEW.value: "~1.11.0",
}

_DEV_DEPS: dict[str, str] = {
    "eslint": "^8.57.0",
    "nodemon": "^3.1.0",
}

# (package, version) added on top of the base set
_VIEW_DEPS: dict[ViewEngine, tuple[str, str]] = {
    ViewEngine.EJS: ("ejs", "~3.1.10"),
    ViewEngine.HBS: ("hbs", "~4.2.0"),
    ViewEngine.HOGAN: ("hjs", "~0.0.6"),
    ViewEngine.PUG: ("pug", "~3.0.3"),
    ViewEngine.NUNJUCKS: ("nunjucks", "~3.2.4"),
}

_CSS_DEPS: dict[CssEngine, tuple[str, str]] = {
    CssEngine.LESS: ("less-middleware", "~3.1.0"),
    CssEngine.STYLUS: ("stylus", "~0.63.0"),
    CssEngine.COMPASS: ("node-compass", "0.2.3"),
    CssEngine.SASS: ("node-sass-middleware", "~1.1.0"),
}


def runtime_dependencies(view: ViewEngine, css: CssEngine | None) -> dict[str, str]:
    """Runtime dependencies for an engine selection, sorted by package name."""
    deps = dict(_BASE_DEPS)
    if view is not DEFAULT_VIEW:
        name, version = _VIEW_DEPS[view]
        deps[name] = version
    if css is not None:
        name, version = _CSS_DEPS[css]
        deps[name] = version
    return dict(sorted(deps.items()))


def build_manifest(config: ScaffoldConfig) -> dict[str, Any]:
    return {
        "name": config.app_name,
        "version": "0.0.0",
        "private": True,
        "scripts": {
            "start": "node ./bin/www",
            "dev": "nodemon ./bin/www",
            "lint": "eslint .",
        },
        "dependencies": runtime_dependencies(config.view, config.css),
        "devDependencies": dict(sorted(_DEV_DEPS.items())),
    }


def dump_manifest(manifest: dict[str, Any]) -> str:
    """Serialize a manifest the way npm writes package.json."""
    return json.dumps(manifest, indent=2) + "\n"
