"""Shared fixtures for the webkick test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from webkick.cli._config import ScaffoldConfig
from webkick.cli._types import CssEngine, ViewEngine


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "my-app"


@pytest.fixture
def make_config(project_dir: Path) -> Callable[..., ScaffoldConfig]:
    """Factory for configs pointing at ``project_dir``."""

    def _make(
        view: ViewEngine = ViewEngine.JADE,
        css: CssEngine | None = None,
        git: bool = False,
    ) -> ScaffoldConfig:
        return ScaffoldConfig(
            destination=project_dir, app_name="my-app", view=view, css=css, git=git
        )

    return _make
