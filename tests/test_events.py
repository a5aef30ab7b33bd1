"""Unit tests for raw key decoding."""
from __future__ import annotations

import pytest
import readchar

from tgplay.tui.events import Key, KeyEvent, decode_key


@pytest.mark.parametrize(
    "raw,key",
    [
        (readchar.key.UP, Key.UP),
        (readchar.key.DOWN, Key.DOWN),
        (readchar.key.LEFT, Key.LEFT),
        (readchar.key.RIGHT, Key.RIGHT),
        (readchar.key.ENTER, Key.ENTER),
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
        (readchar.key.ESC, Key.ESCAPE),
        (readchar.key.BACKSPACE, Key.BACKSPACE),
        ("\x08", Key.BACKSPACE),
        (readchar.key.CTRL_C, Key.INTERRUPT),
    ],
)
def test_named_keys(raw, key):
    event = decode_key(raw)
    assert event is not None
    assert event.key is key


def test_bound_characters():
    assert decode_key("q") == KeyEvent(Key.QUIT, "q")
    assert decode_key("/") == KeyEvent(Key.SEARCH, "/")


@pytest.mark.parametrize("raw", ["a", "Z", "7", " ", "é", "-"])
def test_printable_characters_become_char_events(raw):
    assert decode_key(raw) == KeyEvent(Key.CHAR, raw)


@pytest.mark.parametrize("raw", ["\x1b[15~", "\x01", ""])
def test_unknown_input_is_dropped(raw):
    assert decode_key(raw) is None


@pytest.mark.parametrize("raw", ["\x1b\x1b", "\x1bq", "\x1bj", "\x1b["])
def test_escape_followed_by_another_key_is_escape(raw):
    """readchar hands back Esc together with whatever was pressed next."""
    assert decode_key(raw) == KeyEvent(Key.ESCAPE)


def test_escape_sequences_for_arrows_are_not_escape():
    assert decode_key("\x1b[A").key is Key.UP
    assert decode_key("\x1bOP") is None
