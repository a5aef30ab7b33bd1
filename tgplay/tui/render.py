"""Frame rendering: navigation state in, rich renderable out."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.align import Align
from rich.console import Group
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .fuzzy import fuzzy_match, highlight
from .items import ListItem
from .pages import PageKind
from .theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult

    from .state import NavigationState

SEARCH_PLACEHOLDER = "(type to search...)"
MORE_ABOVE = "  ⬆ More items above..."
MORE_BELOW = "  ⬇ More items below..."
NO_MATCHES = "  No matches found"
NO_ITEMS = "  No items configured"

SEARCH_HINTS = "  type to search • ↑↓ navigate • enter select • esc cancel"
BROWSE_HINTS = "  / search • ↑↓ navigate • enter select • q/esc quit"
BROWSE_HINTS_PAGED = "  / search • ← → switch • ↑↓ navigate • enter select • q/esc quit"


class Frame:
    """One screen of the navigator.

    Laid out at render time against the console's current width, so a
    terminal resize changes the layout without touching navigation state.
    """

    def __init__(self, state: NavigationState, theme: Theme):
        self.state = state
        self.theme = theme

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = max(20, min(self.theme.box_width, options.max_width - 2))
        yield Group(*self.parts(width))

    def parts(self, width: int) -> list:
        state, theme = self.state, self.theme
        out: list = [Text(), tab_strip(state, theme), Text()]

        if state.searching:
            out.append(search_box(state, theme, width))
            out.append(Text())

        items = state.active_items
        muted = Style(color=theme.footer, italic=True)
        if not items:
            out.append(Text(NO_MATCHES if state.searching else NO_ITEMS, style=muted))
        else:
            end = state.visible_end
            if state.viewport_start > 0:
                out.append(Text(MORE_ABOVE, style=muted))
                out.append(Text())
            for i in range(state.viewport_start, end):
                item = items[i]
                if item.is_divider:
                    out.append(divider_row(item, theme, width))
                else:
                    out.append(item_box(state, item, i == state.cursor, theme, width))
            if end < len(items):
                out.append(Text())
                out.append(Text(MORE_BELOW, style=muted))

        out.append(Text())
        out.append(Text(footer_hints(state), style=muted))
        return out


def render(state: NavigationState, theme: Theme = DEFAULT_THEME) -> Frame:
    return Frame(state, theme)


def tab_strip(state: NavigationState, theme: Theme) -> Text:
    strip = Text()
    for page in state.pages:
        if page == state.page:
            strip.append(f"[ {page.title} ]", style=Style(color=theme.selected_title, bold=True))
        else:
            strip.append(f"  {page.title}  ", style=Style(color=theme.muted_title))
    return strip


def search_box(state: NavigationState, theme: Theme, width: int) -> Panel:
    text = f"🔍 Search: {state.query}" if state.query else f"🔍 Search: {SEARCH_PLACEHOLDER}"
    return Panel(
        Text(text, style=Style(color=theme.search_text)),
        box=box.ROUNDED,
        border_style=theme.search_box,
        padding=(0, 1),
        width=width,
    )


def divider_row(item: ListItem, theme: Theme, width: int) -> Align:
    label = Text(f"─── {item.detail} ───", style=Style(color=theme.divider, italic=True))
    return Align.center(label, width=width)


def item_box(
    state: NavigationState,
    item: ListItem,
    is_cursor: bool,
    theme: Theme,
    width: int,
) -> Panel | Padding:
    settings = state.page.kind is PageKind.SETTINGS
    if is_cursor:
        border = theme.settings_selected_title if settings else theme.selected_title
        title_color = border
        value_color = theme.settings_value if settings else theme.footer
    else:
        border = theme.settings_border if settings else theme.muted_border
        title_color = theme.settings_title if settings else theme.muted_title
        value_color = theme.settings_value if settings else theme.muted_title

    query = state.query if state.searching else ""
    # only the field that actually matched is highlighted
    title_query = query if fuzzy_match(item.label, query) else ""
    value_query = query if fuzzy_match(item.detail, query) else ""
    title = highlight(item.label, title_query, theme.highlight, base=Style(color=title_color, bold=True))
    value = highlight(item.detail, value_query, theme.highlight, base=Style(color=value_color, italic=True))

    panel = Panel(
        Text("\n").join([title, value]),
        box=box.ROUNDED,
        border_style=border,
        padding=(0, 1),
        width=width,
    )
    if is_cursor:
        # cursor row is indented
        return Padding(panel, (0, 0, 0, 2))
    return panel


def footer_hints(state: NavigationState) -> str:
    if state.searching:
        return SEARCH_HINTS
    if len(state.pages) > 1:
        return BROWSE_HINTS_PAGED
    return BROWSE_HINTS
