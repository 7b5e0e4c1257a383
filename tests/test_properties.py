"""Property-based tests using Hypothesis."""

from __future__ import annotations

import re

from hypothesis import given, settings, strategies as st

from webkick.cli._config import FALLBACK_APP_NAME, create_app_name
from webkick.cli._manifest import runtime_dependencies
from webkick.cli._renderer import render_template
from webkick.cli._types import CssEngine, ViewEngine

ALLOWED_NAME = re.compile(r"[a-z0-9.()!~*'-]+")
TOKEN = re.compile(r"\{\w+\}")

segment_chars = st.characters(exclude_categories=("Cs",), exclude_characters="/\\\x00")
braceless_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="{}"), max_size=40
)
KNOWN_KEYS = ["name", "view", "css"]


@given(segment=st.text(alphabet=segment_chars, max_size=60))
@settings(max_examples=200)
def test_app_name_is_sanitized(segment: str) -> None:
    """Derived names use only allowed characters and have clean edges."""
    name = create_app_name(f"/srv/{segment}")

    assert ALLOWED_NAME.fullmatch(name)
    assert not name.startswith(("-", "_", "."))
    assert not name.endswith("-")


@given(segment=st.text(alphabet="@# _-", min_size=1, max_size=20))
def test_app_name_falls_back_when_nothing_usable(segment: str) -> None:
    assert create_app_name(f"/srv/{segment}") == FALLBACK_APP_NAME


@given(text=braceless_text, values=st.dictionaries(st.sampled_from(KNOWN_KEYS), st.text()))
def test_render_is_identity_without_tokens(text: str, values: dict[str, str]) -> None:
    assert render_template(text, values) == text


@given(
    parts=st.lists(
        st.one_of(st.sampled_from([f"{{{k}}}" for k in KNOWN_KEYS]), braceless_text),
        max_size=10,
    ),
    values=st.fixed_dictionaries({k: braceless_text for k in KNOWN_KEYS}),
)
def test_render_leaves_no_recognized_tokens(parts: list[str], values: dict[str, str]) -> None:
    rendered = render_template("".join(parts), values)
    assert not TOKEN.search(rendered)


@given(view=st.sampled_from(list(ViewEngine)), css=st.sampled_from([None, *CssEngine]))
def test_dependencies_are_sorted_and_deterministic(
    view: ViewEngine, css: CssEngine | None
) -> None:
    first = runtime_dependencies(view, css)
    second = runtime_dependencies(view, css)

    assert list(first) == sorted(first)
    assert list(first.items()) == list(second.items())
