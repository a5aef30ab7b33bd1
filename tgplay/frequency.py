"""Selection counters behind the "frequent" page."""
from __future__ import annotations

from pydantic import BaseModel, Field


class FrequencyTable(BaseModel):
    """How many times each goto target was selected.

    Counts only grow; ``clear`` is the one way to drop them.
    """

    frequencies: dict[str, int] = Field(default_factory=dict)

    def increment(self, key: str) -> None:
        self.frequencies[key] = self.frequencies.get(key, 0) + 1

    def top_keys(self) -> list[str]:
        """Keys by descending count.

        ``sorted`` is stable, so keys with equal counts keep the order they
        were first recorded in.
        """
        return sorted(self.frequencies, key=lambda k: self.frequencies[k], reverse=True)

    def is_empty(self) -> bool:
        return not self.frequencies

    def clear(self) -> None:
        self.frequencies.clear()
