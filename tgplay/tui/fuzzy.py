"""Greedy subsequence matching and match highlighting."""
from __future__ import annotations

from rich.style import Style
from rich.text import Text


def match_positions(text: str, query: str) -> list[int]:
    """Indexes of ``text`` consumed by a greedy left-to-right scan for ``query``.

    Comparison is case-insensitive. The scan takes the first available
    character for each query character, so the result can be shorter than
    ``query`` when it does not match.
    """
    positions: list[int] = []
    if not query:
        return positions

    needle = [c.lower() for c in query]
    q = 0
    for i, ch in enumerate(text):
        if q == len(needle):
            break
        if ch.lower() == needle[q]:
            positions.append(i)
            q += 1
    return positions


def fuzzy_match(text: str, query: str) -> bool:
    """True when ``query`` is a case-insensitive subsequence of ``text``."""
    return len(match_positions(text, query)) == len(query)


def highlight(
    text: str,
    query: str,
    style: Style | str = "reverse",
    base: Style | str = "",
) -> Text:
    """Render ``text`` with the characters the matcher consumed styled.

    Uses the same scan as ``fuzzy_match`` so the emphasised characters are the
    ones that made the item match. Consumed characters are styled even for a
    partial match. ``base`` styles the whole text underneath.
    """
    out = Text(text, style=base)
    for i in match_positions(text, query):
        out.stylize(style, i, i + 1)
    return out
