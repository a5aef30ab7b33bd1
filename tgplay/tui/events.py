"""Input events consumed by the navigation state machine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import readchar


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    QUIT = "quit"
    INTERRUPT = "interrupt"
    BACKSPACE = "backspace"
    SEARCH = "search"
    CHAR = "char"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""


@dataclass(frozen=True)
class Resize:
    """Terminal width change.

    The interactive session never sends it: ``Live`` re-lays the frame out on
    its own refresh. It exists for callers that drive ``transition`` directly
    and leaves state unchanged.
    """

    width: int


Event = KeyEvent | Resize


_KEYMAP: dict[str, Key] = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.LEFT: Key.LEFT,
    readchar.key.RIGHT: Key.RIGHT,
    readchar.key.ENTER: Key.ENTER,
    readchar.key.CR: Key.ENTER,
    readchar.key.LF: Key.ENTER,
    readchar.key.ESC: Key.ESCAPE,
    readchar.key.BACKSPACE: Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    readchar.key.CTRL_C: Key.INTERRUPT,
    "q": Key.QUIT,
    "/": Key.SEARCH,
}


def _is_escape(raw: str) -> bool:
    # readchar returns a bare Esc together with the key pressed after it
    # ("\x1b\x1b", "\x1bq"). CSI/SS3 sequences ("\x1b[15~") are function keys.
    if not raw.startswith(readchar.key.ESC):
        return False
    return len(raw) <= 2 or raw[1] not in "[O"


def decode_key(raw: str) -> KeyEvent | None:
    """Map a raw ``readchar.readkey()`` value to an event.

    Single printable characters that are not bound to a key become ``CHAR``
    events. Any other escape-prefixed value that is not a known sequence is
    Esc. Anything else that is unknown (function keys, control characters)
    decodes to ``None``.
    """
    key = _KEYMAP.get(raw)
    if key is not None:
        return KeyEvent(key, raw if len(raw) == 1 and raw.isprintable() else "")
    if _is_escape(raw):
        return KeyEvent(Key.ESCAPE)
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent(Key.CHAR, raw)
    return None
