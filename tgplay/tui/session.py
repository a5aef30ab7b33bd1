"""Interactive session: read keys, apply transitions, redraw."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import readchar
from rich.live import Live

from .events import Key, KeyEvent, decode_key
from .render import render
from .state import NavigationState, Outcome, transition
from .theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


def run_session(
    state: NavigationState,
    console: Console,
    theme: Theme = DEFAULT_THEME,
    read_key: Callable[[], str] = readchar.readkey,
) -> Outcome:
    """Drive ``state`` with key presses until it produces an outcome.

    The frame is redrawn after every event. ``Live`` re-renders on its own
    refresh tick as well, which is what picks up terminal resizes.
    """
    with Live(render(state, theme), console=console, refresh_per_second=15, transient=True) as live:
        while not state.done:
            try:
                raw = read_key()
            except (KeyboardInterrupt, EOFError):
                event = KeyEvent(Key.INTERRUPT)
            else:
                event = decode_key(raw)
                if event is None:
                    logger.debug("ignored key %r", raw)
                    continue

            state = transition(state, event)
            live.update(render(state, theme), refresh=True)

    logger.debug("session outcome: %s", state.outcome)
    return state.outcome
