"""Persistence signals derived from a selection.

The navigator never writes files itself. After a selection the runner asks
``effects_for`` what changed, applies it to the in-memory records and saves
whichever of them were touched.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import Options
from .frequency import FrequencyTable
from .tui.items import SETTING_CLEAR_FREQUENCY, SETTING_FREQUENT_GOTO
from .tui.state import Selection

GOTO_PAGES = ("goto", "frequent")


@dataclass(frozen=True)
class SetFrequentNavigation:
    enabled: bool


@dataclass(frozen=True)
class ClearFrequency:
    pass


@dataclass(frozen=True)
class IncrementFrequency:
    key: str


Effect = SetFrequentNavigation | ClearFrequency | IncrementFrequency


def effects_for(selection: Selection, options: Options) -> list[Effect]:
    if selection.page == "settings":
        if selection.label == SETTING_FREQUENT_GOTO:
            return [SetFrequentNavigation(enabled=not options.frequent_goto)]
        if selection.label == SETTING_CLEAR_FREQUENCY:
            return [ClearFrequency()]
        return []
    if selection.page in GOTO_PAGES and options.frequent_goto:
        return [IncrementFrequency(key=selection.label)]
    return []


@dataclass
class Applied:
    options_changed: bool = False
    frequency_changed: bool = False


def apply_effects(effects: list[Effect], options: Options, frequency: FrequencyTable) -> Applied:
    """Apply ``effects`` in place and report which records need saving."""
    applied = Applied()
    for effect in effects:
        if isinstance(effect, SetFrequentNavigation):
            options.frequent_goto = effect.enabled
            applied.options_changed = True
        elif isinstance(effect, ClearFrequency):
            frequency.clear()
            applied.frequency_changed = True
        elif isinstance(effect, IncrementFrequency):
            frequency.increment(effect.key)
            applied.frequency_changed = True
    return applied
