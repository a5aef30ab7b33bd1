"""Pages of the navigator and the lists they show."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config import Configuration, Options
from ..frequency import FrequencyTable
from .items import ListItem, section_items, settings_items


class PageKind(Enum):
    FREQUENT = "frequent"
    SECTION = "section"
    SETTINGS = "settings"


@dataclass(frozen=True)
class Page:
    """A tab of the navigator.

    ``name`` is the machine name returned with a selection (``goto``,
    ``commands``...); ``title`` is what the tab strip shows.
    """

    kind: PageKind
    name: str
    title: str


FREQUENT = Page(PageKind.FREQUENT, "frequent", "frequent ⭐")
SETTINGS = Page(PageKind.SETTINGS, "settings", "settings ⚙️")

SECTION_PAGES: dict[str, Page] = {
    "goto": Page(PageKind.SECTION, "goto", "goto ⚡️"),
    "commands": Page(PageKind.SECTION, "commands", "commands 🎮"),
    "notes": Page(PageKind.SECTION, "notes", "notes ✏️"),
}


@dataclass(frozen=True)
class PageSource:
    """Everything a page provider may read from."""

    config: Configuration
    options: Options
    frequency: FrequencyTable


def _frequent_items(page: Page, src: PageSource) -> list[ListItem]:
    if not src.options.frequent_goto or src.frequency.is_empty():
        return []
    # Counters for targets removed from the config are skipped.
    return [
        ListItem(label=key, detail=src.config.goto.values[key])
        for key in src.frequency.top_keys()
        if key in src.config.goto
    ]


def _section_items(page: Page, src: PageSource) -> list[ListItem]:
    return section_items(src.config.section(page.name))


def _settings_items(page: Page, src: PageSource) -> list[ListItem]:
    return settings_items(src.options)


ITEM_PROVIDERS: dict[PageKind, Callable[[Page, PageSource], list[ListItem]]] = {
    PageKind.FREQUENT: _frequent_items,
    PageKind.SECTION: _section_items,
    PageKind.SETTINGS: _settings_items,
}


def page_items(page: Page, src: PageSource) -> list[ListItem]:
    return ITEM_PROVIDERS[page.kind](page, src)


def build_pages(src: PageSource) -> dict[Page, tuple[ListItem, ...]]:
    """Available pages in display order, each with its item list.

    Frequent comes first when it has anything to show, then every non-empty
    config section, then settings, which is always present.
    """
    candidates = [FREQUENT, *(SECTION_PAGES[name] for name, _ in src.config.sections()), SETTINGS]
    pages: dict[Page, tuple[ListItem, ...]] = {}
    for page in candidates:
        items = tuple(page_items(page, src))
        if items or page.kind is PageKind.SETTINGS:
            pages[page] = items
    return pages
