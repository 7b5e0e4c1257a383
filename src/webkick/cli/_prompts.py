"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from webkick.cli._types import CssEngine, ViewEngine

_console = Console()

T = TypeVar("T")


def _rewind(lines: int) -> None:
    """Erase the last *lines* lines so the answered prompt can be redrawn."""
    sys.stdout.write(f"\033[{lines}A\033[J")
    sys.stdout.flush()


def _ask(question: str) -> None:
    _console.print(f"[bold cyan]◆[/]  {question}")
    _console.print("[dim]│[/]")


def _answered(question: str, *lines: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    for line in lines:
        _console.print(f"[dim]│[/]  {line}")
    _console.print("[dim]│[/]")


def _choose(question: str, choices: Sequence[tuple[T, str]]) -> T:
    """Arrow-key menu over ``(value, label)`` pairs. Escape exits with code 1."""
    _ask(question)

    menu = TerminalMenu(
        [label for _, label in choices],
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    picked = menu.show()
    if picked is None:
        raise SystemExit(1)

    index = int(picked)
    _rewind(2)
    _answered(
        question,
        *(
            f"[bold green]●[/] {label}" if i == index else f"  [dim s]{label}[/]"
            for i, (_, label) in enumerate(choices)
        ),
    )
    return choices[index][0]


def _yes_no(question: str, default: bool) -> bool:
    """Single-line yes/no question. Empty input or closed stdin picks *default*."""
    _ask(question)

    _console.print("[dim]│[/]  ", end="")
    try:
        reply = input(" [Y/n] " if default else " [y/N] ").strip().lower()
    except EOFError:
        reply = ""
    answer = default if not reply else reply in ("y", "yes")

    _rewind(3)
    _answered(question, "Yes" if answer else "No")
    return answer


def prompt_view() -> ViewEngine:
    """Prompt user to choose a view engine."""
    return _choose("Select a view engine", [(e, e.label) for e in ViewEngine])


def prompt_css() -> CssEngine | None:
    """Prompt user to choose a stylesheet preprocessor, or plain CSS."""
    choices: list[tuple[CssEngine | None, str]] = [(None, "Plain CSS")]
    choices += [(e, e.label) for e in CssEngine]
    return _choose("Select a CSS engine", choices)


def confirm_non_empty() -> bool:
    """Ask whether to scaffold into a directory that already has files."""
    return _yes_no("Destination is not empty, continue?", default=False)
