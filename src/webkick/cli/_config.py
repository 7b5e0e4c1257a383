"""Resolution of command-line flags into a scaffolding configuration."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from webkick.cli._types import CssEngine, ViewEngine

DEFAULT_VIEW = ViewEngine.JADE
FALLBACK_APP_NAME = "hello-world"

_DISALLOWED_RUN = re.compile(r"[^A-Za-z0-9.()!~*'-]+")
_EDGE_JUNK = re.compile(r"^[-_.]+|-+$")


@dataclass(frozen=True, kw_only=True)
class ScaffoldConfig:
    """
    Everything the scaffolder needs to generate a project.

    Attributes:
        destination: Directory the project is written into.
        app_name: Package name used in the manifest and the entry point.
        view: View engine whose templates and dependency are selected.
        css: Optional stylesheet preprocessor. ``None`` means plain CSS.
        git: Whether a ``.gitignore`` is added.
        force: Whether a non-empty destination is accepted without asking.
    """

    destination: Path
    app_name: str
    view: ViewEngine = DEFAULT_VIEW
    css: CssEngine | None = None
    git: bool = False
    force: bool = False

    def __post_init__(self) -> None:
        if not self.app_name:
            raise ValueError("app_name must not be empty.")


def create_app_name(path: str | Path) -> str:
    """Derive a package name from the last segment of the resolved *path*."""
    base = Path(path).resolve().name
    name = _EDGE_JUNK.sub("", _DISALLOWED_RUN.sub("-", base)).lower()
    return name or FALLBACK_APP_NAME


def resolve_view(view: ViewEngine | None, legacy: Mapping[ViewEngine, bool]) -> ViewEngine:
    """Pick the view engine: explicit ``--view``, then a legacy shortcut, then the default.

    Shortcuts are applied in mapping order, so the last enabled one wins.
    """
    if view is not None:
        return view
    chosen = DEFAULT_VIEW
    for engine, enabled in legacy.items():
        if enabled:
            chosen = engine
    return chosen


def is_empty_directory(path: Path) -> bool:
    """True when *path* does not exist or is a directory without entries."""
    if not path.exists():
        return True
    return next(path.iterdir(), None) is None


def resolve_config(
    destination: str | Path,
    view: ViewEngine | None = None,
    css: CssEngine | None = None,
    *,
    legacy: Mapping[ViewEngine, bool] | None = None,
    git: bool = False,
    force: bool = False,
) -> ScaffoldConfig:
    """Build the immutable configuration for a scaffolding run."""
    path = Path(destination)
    return ScaffoldConfig(
        destination=path,
        app_name=create_app_name(path),
        view=resolve_view(view, legacy or {}),
        css=css,
        git=git,
        force=force,
    )
