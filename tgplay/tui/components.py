"""Reusable console output pieces used outside the live navigator."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from rich.console import Console


def render_result(console: Console, message: str, is_error: bool = False) -> None:
    """Print a one-line success/failure outcome."""
    if is_error:
        console.print(f"[bold red]✗ {escape(message)}[/bold red]")
    else:
        console.print(f"[bold green]✓ {escape(message)}[/bold green]")


def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print a failed operation as a red box: headline, then cause and fix rows."""
    details = Table.grid(padding=(0, 2))
    details.add_column(style=f"bold {theme.error}")
    details.add_column()
    details.add_row("cause", Text(cause))
    if action:
        details.add_row("fix", Text(action, style=Style(color=theme.footer, italic=True)))

    headline = Text(f"✗ {title}", style=Style(color=theme.error, bold=True))
    console.print(Panel.fit(Group(headline, Text(), details), border_style=theme.error, title="tgplay"))
    console.print()


def confirm_destructive_action(message: str, default: bool = False, theme: Theme = DEFAULT_THEME) -> bool:
    """Ask before doing something that cannot be undone.

    Returns False when the prompt is cancelled (ctrl+c).
    """
    answer = questionary.confirm(f"⚠  {message}", default=default, style=theme.prompt_style()).ask()
    return bool(answer)
