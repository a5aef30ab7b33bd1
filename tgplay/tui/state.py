"""Navigation state machine.

``NavigationState`` is immutable. ``transition`` takes a state and one input
event and returns the next state; the session loop renders whatever comes
back. A session ends once ``outcome`` is set, either to a ``Selection`` or to
``Signal.EXIT``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Mapping

from ..config import Configuration, Options
from ..frequency import FrequencyTable
from .events import Event, Key, KeyEvent
from .fuzzy import fuzzy_match
from .items import ListItem, first_selectable, last_selectable
from .pages import Page, PageSource, build_pages

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
SCROLL_OFFSET = 2


class NavigationError(Exception):
    """Raised when a session cannot be built from the given configuration."""


class Signal(Enum):
    EXIT = "EXIT_SIGNAL"


@dataclass(frozen=True)
class Selection:
    page: str
    label: str
    detail: str

    def __str__(self) -> str:
        return f"{self.page}|{self.label}|{self.detail}"


Outcome = Selection | Signal


@dataclass(frozen=True)
class NavigationState:
    pages: tuple[Page, ...]
    items: Mapping[Page, tuple[ListItem, ...]]
    page_index: int = 0
    cursor: int = 0
    viewport_start: int = 0
    capacity: int = DEFAULT_CAPACITY
    searching: bool = False
    query: str = ""
    filtered: tuple[ListItem, ...] = ()
    # (cursor, viewport_start) when search was entered
    saved_position: tuple[int, int] | None = None
    outcome: Outcome | None = field(default=None)

    @property
    def page(self) -> Page:
        return self.pages[self.page_index]

    @property
    def page_items(self) -> tuple[ListItem, ...]:
        return self.items[self.page]

    @property
    def active_items(self) -> tuple[ListItem, ...]:
        """Filtered list while a search query is typed, else the full page."""
        if self.searching and self.query:
            return self.filtered
        return self.page_items

    @property
    def visible_end(self) -> int:
        return min(self.viewport_start + self.capacity, len(self.active_items))

    @property
    def done(self) -> bool:
        return self.outcome is not None


def initial_state(
    config: Configuration,
    options: Options,
    frequency: FrequencyTable,
    *,
    capacity: int = DEFAULT_CAPACITY,
    start_page: str | None = None,
) -> NavigationState:
    """Build the state a session starts from.

    Raises:
        NavigationError: every config section is empty.
    """
    if config.is_empty():
        raise NavigationError("all pages are empty")
    if capacity < 1:
        raise NavigationError(f"viewport capacity must be positive, got {capacity}")

    items = build_pages(PageSource(config=config, options=options, frequency=frequency))
    pages = tuple(items)
    page_index = 0
    if start_page is not None:
        page_index = next((i for i, p in enumerate(pages) if p.name == start_page), 0)

    logger.debug("session pages: %s", [p.name for p in pages])
    state = NavigationState(pages=pages, items=items, page_index=page_index, capacity=capacity)
    return replace(state, cursor=first_selectable(state.page_items))


def transition(state: NavigationState, event: Event) -> NavigationState:
    """Apply one input event. Never raises; unknown or inapplicable input is ignored."""
    if state.done or not isinstance(event, KeyEvent):
        return state

    handler = _BROWSE.get(event.key) if not state.searching else _SEARCH.get(event.key)
    if handler is None:
        return state
    return handler(state, event)


# ---------------------------------------------------------------------------
# handlers
# ---------------------------------------------------------------------------

def _exit(state: NavigationState, event: KeyEvent) -> NavigationState:
    return replace(state, outcome=Signal.EXIT)


def _to_top(state: NavigationState) -> NavigationState:
    return replace(state, cursor=first_selectable(state.active_items), viewport_start=0)


def _enter_search(state: NavigationState, event: KeyEvent) -> NavigationState:
    entered = replace(
        state,
        searching=True,
        query="",
        filtered=(),
        saved_position=(state.cursor, state.viewport_start),
    )
    return _to_top(entered)


def _leave_search(state: NavigationState, event: KeyEvent) -> NavigationState:
    restore = state.saved_position if not state.query else None
    left = replace(state, searching=False, query="", filtered=(), saved_position=None)
    if restore is not None:
        cursor, viewport_start = restore
        return replace(left, cursor=cursor, viewport_start=viewport_start)
    return _to_top(left)


def _with_query(state: NavigationState, query: str) -> NavigationState:
    filtered = tuple(
        item
        for item in state.page_items
        if not item.is_divider and (fuzzy_match(item.label, query) or fuzzy_match(item.detail, query))
    )
    return _to_top(replace(state, query=query, filtered=filtered if query else ()))


def _type_char(state: NavigationState, event: KeyEvent) -> NavigationState:
    if len(event.char) != 1:
        return state
    return _with_query(state, state.query + event.char)


def _backspace(state: NavigationState, event: KeyEvent) -> NavigationState:
    if not state.query:
        return state
    return _with_query(state, state.query[:-1])


def _switch_page(state: NavigationState, step: int) -> NavigationState:
    page_index = (state.page_index + step) % len(state.pages)
    return _to_top(replace(state, page_index=page_index))


def _previous_page(state: NavigationState, event: KeyEvent) -> NavigationState:
    return _switch_page(state, -1)


def _next_page(state: NavigationState, event: KeyEvent) -> NavigationState:
    return _switch_page(state, 1)


def _keep_visible(state: NavigationState) -> NavigationState:
    if state.cursor < state.viewport_start:
        return replace(state, viewport_start=state.cursor)
    if state.cursor >= state.viewport_start + state.capacity:
        return replace(state, viewport_start=state.cursor - state.capacity + 1)
    return state


def _up(state: NavigationState, event: KeyEvent) -> NavigationState:
    items = state.active_items
    if not items:
        return state

    prev = next((i for i in range(state.cursor - 1, -1, -1) if not items[i].is_divider), None)
    if prev is None:
        wrapped = replace(
            state,
            cursor=last_selectable(items),
            viewport_start=max(0, len(items) - state.capacity),
        )
        return _keep_visible(wrapped)

    viewport_start = state.viewport_start
    if prev < viewport_start + SCROLL_OFFSET and viewport_start > 0:
        viewport_start -= 1
    return _keep_visible(replace(state, cursor=prev, viewport_start=viewport_start))


def _down(state: NavigationState, event: KeyEvent) -> NavigationState:
    items = state.active_items
    if not items:
        return state

    nxt = next((i for i in range(state.cursor + 1, len(items)) if not items[i].is_divider), None)
    if nxt is None:
        return _keep_visible(replace(state, cursor=first_selectable(items), viewport_start=0))

    viewport_start = state.viewport_start
    # Scroll once the cursor is within SCROLL_OFFSET rows of the bottom edge.
    if nxt > viewport_start + state.capacity - SCROLL_OFFSET:
        viewport_start = min(viewport_start + 1, max(0, len(items) - state.capacity))
    return _keep_visible(replace(state, cursor=nxt, viewport_start=viewport_start))


def _select(state: NavigationState, event: KeyEvent) -> NavigationState:
    items = state.active_items
    if not 0 <= state.cursor < len(items):
        return state
    item = items[state.cursor]
    if item.is_divider:
        return state
    return replace(state, outcome=Selection(page=state.page.name, label=item.label, detail=item.detail))


_Handler = Callable[[NavigationState, KeyEvent], NavigationState]

_BROWSE: dict[Key, _Handler] = {
    Key.INTERRUPT: _exit,
    Key.ESCAPE: _exit,
    Key.QUIT: _exit,
    Key.SEARCH: _enter_search,
    Key.LEFT: _previous_page,
    Key.RIGHT: _next_page,
    Key.UP: _up,
    Key.DOWN: _down,
    Key.ENTER: _select,
}

_SEARCH: dict[Key, _Handler] = {
    Key.INTERRUPT: _exit,
    Key.ESCAPE: _leave_search,
    Key.QUIT: _leave_search,
    Key.BACKSPACE: _backspace,
    Key.CHAR: _type_char,
    Key.UP: _up,
    Key.DOWN: _down,
    Key.ENTER: _select,
}
