"""Session loop tests with scripted key presses."""
from __future__ import annotations

import io

import pytest
import readchar
from rich.console import Console

from tgplay.tui.session import run_session
from tgplay.tui.state import Selection, Signal, initial_state


def keys(*raw):
    """A read_key stand-in that replays ``raw`` and then fails loudly."""
    it = iter(raw)

    def read_key():
        try:
            value = next(it)
        except StopIteration:
            raise AssertionError("session asked for more keys than scripted")
        if isinstance(value, BaseException):
            raise value
        return value

    return read_key


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=80, force_terminal=False)


@pytest.fixture
def state(make_config, options, frequency):
    config = make_config(goto=[("home", "~"), ("src", "~/src")], notes=[("wifi", "pw")])
    return initial_state(config, options, frequency)


def test_select_after_moving(state, console):
    outcome = run_session(state, console, read_key=keys(readchar.key.DOWN, readchar.key.ENTER))
    assert outcome == Selection("goto", "src", "~/src")


def test_switch_page_and_select(state, console):
    outcome = run_session(state, console, read_key=keys(readchar.key.RIGHT, readchar.key.ENTER))
    assert outcome == Selection("notes", "wifi", "pw")


def test_search_and_select(state, console):
    outcome = run_session(state, console, read_key=keys("/", "s", "r", readchar.key.ENTER))
    assert outcome == Selection("goto", "src", "~/src")


def test_quit(state, console):
    assert run_session(state, console, read_key=keys("q")) is Signal.EXIT


def test_ctrl_c_raised_by_reader_exits(state, console):
    assert run_session(state, console, read_key=keys(KeyboardInterrupt())) is Signal.EXIT


def test_unknown_keys_are_skipped(state, console):
    outcome = run_session(state, console, read_key=keys("\x1b[15~", "\x01", readchar.key.ENTER))
    assert outcome == Selection("goto", "home", "~")


def test_escape_as_read_by_readchar_quits(state, console):
    assert run_session(state, console, read_key=keys("\x1b\x1b")) is Signal.EXIT


def test_escape_as_read_by_readchar_leaves_search(state, console):
    """Esc during a search returns to browsing instead of being swallowed."""
    outcome = run_session(state, console, read_key=keys("/", "a", "\x1bq", readchar.key.ENTER))
    assert outcome == Selection("goto", "home", "~")
