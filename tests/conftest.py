from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `tgplay/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from tgplay.config import Configuration, Options  # noqa: E402
from tgplay.frequency import FrequencyTable  # noqa: E402
from tgplay.ordered import OrderedSection  # noqa: E402


@pytest.fixture
def make_config():
    """Build a Configuration from plain ``{name: [(key, value), ...]}`` data."""

    def _make(goto=(), commands=(), notes=()) -> Configuration:
        return Configuration(
            goto=OrderedSection(list(goto)),
            commands=OrderedSection(list(commands)),
            notes=OrderedSection(list(notes)),
        )

    return _make


@pytest.fixture
def options() -> Options:
    return Options()


@pytest.fixture
def frequency() -> FrequencyTable:
    return FrequencyTable()
