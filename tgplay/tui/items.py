"""List entries shown on every page."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import Options
from ..ordered import OrderedSection

DIVIDER_PREFIX = "div"

SETTING_FREQUENT_GOTO = "frequent_goto"
SETTING_CLEAR_FREQUENCY = "clear_frequency"


@dataclass(frozen=True)
class ListItem:
    """One row: a label, its detail value, and whether it only groups rows."""

    label: str
    detail: str
    is_divider: bool = False


def is_divider_key(key: str) -> bool:
    return key.startswith(DIVIDER_PREFIX)


def section_items(section: OrderedSection) -> list[ListItem]:
    """Items for a config section, in file order.

    Keys starting with ``div`` become dividers whose value is the label shown.
    """
    return [
        ListItem(label=key, detail=value, is_divider=is_divider_key(key))
        for key, value in section.items()
    ]


def settings_items(options: Options) -> list[ListItem]:
    status = "enabled ✓" if options.frequent_goto else "disabled ✗"
    return [
        ListItem(label=SETTING_FREQUENT_GOTO, detail=status),
        ListItem(label=SETTING_CLEAR_FREQUENCY, detail="clear all frequency history"),
    ]


def first_selectable(items: list[ListItem] | tuple[ListItem, ...]) -> int:
    """Index of the first non-divider item.

    Lands on the last index when every item is a divider, and 0 for an empty
    list.
    """
    for i, item in enumerate(items):
        if not item.is_divider:
            return i
    return max(0, len(items) - 1)


def last_selectable(items: list[ListItem] | tuple[ListItem, ...]) -> int:
    for i in range(len(items) - 1, -1, -1):
        if not items[i].is_divider:
            return i
    return max(0, len(items) - 1)
