"""Load the configuration, run the navigator and act on what was selected."""
from __future__ import annotations

import logging
import os
import shlex
from typing import TYPE_CHECKING, Callable

import pyperclip
from rich.markup import escape

from .effects import ClearFrequency, apply_effects, effects_for
from .tui.components import confirm_destructive_action, render_error, render_result
from .tui.session import run_session
from .tui.state import DEFAULT_CAPACITY, Selection, Signal, initial_state
from .tui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from rich.console import Console

    from .config import Options
    from .frequency import FrequencyTable
    from .store import FileStore

logger = logging.getLogger(__name__)


class Runner:
    """One invocation of the navigator.

    Settings selections are applied, saved, and the navigator reopens on the
    settings page; any other selection ends the run.
    """

    def __init__(
        self,
        store: FileStore,
        console: Console,
        *,
        theme: Theme = DEFAULT_THEME,
        capacity: int = DEFAULT_CAPACITY,
        session: Callable = run_session,
        clipboard: Callable[[str], None] = pyperclip.copy,
        confirm: Callable[[str], bool] = confirm_destructive_action,
    ):
        self.store = store
        self.console = console
        self.theme = theme
        self.capacity = capacity
        self.session = session
        self.clipboard = clipboard
        self.confirm = confirm

    def run(self) -> int:
        """Returns the process exit code.

        Raises:
            ConfigError: a persisted file is malformed.
        """
        self.store.setup()
        config = self.store.load_config()
        if config.is_empty():
            render_error(
                self.console,
                "All pages are empty!",
                "No goTo targets, commands or notes are configured.",
                f"Please edit your config file: {self.store.config_path}",
                theme=self.theme,
            )
            return 1

        options = self.store.load_options()
        frequency = self.store.load_frequency()
        self.store.clear_command()

        start_page = None
        while True:
            state = initial_state(
                config, options, frequency, capacity=self.capacity, start_page=start_page
            )
            outcome = self.session(state, self.console, self.theme)
            if outcome is Signal.EXIT or outcome is None:
                self.console.print("\n[dim]Exiting...[/dim]")
                return 0

            logger.info("selected %s", outcome)
            self._record(outcome, options, frequency)
            if outcome.page == "settings":
                start_page = "settings"
                continue
            return self._act(outcome)

    def _record(self, selection: Selection, options: Options, frequency: FrequencyTable) -> None:
        effects = effects_for(selection, options)
        if any(isinstance(e, ClearFrequency) for e in effects):
            if not self.confirm("Clear all frequency history?"):
                return

        applied = apply_effects(effects, options, frequency)
        if applied.options_changed:
            self.store.save_options(options)
            logger.info("frequent_goTo set to %s", options.frequent_goto)
        if applied.frequency_changed:
            self.store.save_frequency(frequency)

    def _act(self, selection: Selection) -> int:
        if selection.page in ("goto", "frequent"):
            path = os.path.expanduser(selection.detail)
            self.store.write_command(f"cd {shlex.quote(path)}")
            self.console.print(f"[green]→ {escape(path)}[/green]")
            return 0

        if selection.page == "commands":
            # Running commands is left to the user's shell.
            self.console.print(f"[dim]{escape(selection.label)}:[/dim] {escape(selection.detail)}")
            return 0

        if selection.page == "notes":
            try:
                self.clipboard(selection.detail)
            except pyperclip.PyperclipException as e:
                logger.error("clipboard copy failed: %s", e)
                render_error(
                    self.console,
                    "Failed to copy to clipboard",
                    str(e),
                    "Install xclip, xsel or wl-clipboard",
                    theme=self.theme,
                )
                return 1
            render_result(self.console, f"Copied to clipboard: {selection.detail}")
            return 0

        logger.warning("unhandled page %r", selection.page)
        return 0
