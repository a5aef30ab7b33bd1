"""Key-ordered string mapping used for configuration sections."""
from __future__ import annotations

import json
from typing import Any, Iterator


class ParseError(ValueError):
    """Raised when a section cannot be read from its textual form."""


class OrderedSection:
    """String-to-string mapping that remembers the order keys appeared in.

    The order of ``keys`` is what the navigator shows, so it has to survive a
    load/save cycle exactly as the user wrote it in the config file.
    """

    def __init__(self, pairs: list[tuple[str, str]] | None = None):
        self.keys: list[str] = []
        self.values: dict[str, str] = {}
        for key, value in pairs or []:
            if key in self.values:
                raise ParseError(f"duplicate key {key!r}")
            self.keys.append(key)
            self.values[key] = value

    @classmethod
    def from_json(cls, text: str) -> OrderedSection:
        """Parse a JSON object of string values.

        Raises:
            ParseError: invalid JSON, non-object document, non-string value
                or duplicate key.
        """
        try:
            pairs = json.loads(text, object_pairs_hook=ordered_pairs)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON: {e}") from e
        return cls.from_object(pairs)

    @classmethod
    def from_object(cls, obj: Any) -> OrderedSection:
        """Build a section from already decoded data.

        Accepts a mapping or the pair list ``json.loads`` produces with
        ``object_pairs_hook=ordered_pairs``.
        """
        if isinstance(obj, dict):
            obj = PairList(obj.items())
        if not isinstance(obj, PairList):
            raise ParseError(f"expected an object, got {type(obj).__name__}")

        for key, value in obj:
            if not isinstance(value, str):
                raise ParseError(f"value for {key!r} must be a string, got {type(value).__name__}")
        return cls(obj)

    def to_object(self) -> dict[str, str]:
        return {key: self.values[key] for key in self.keys}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_object(), indent=indent, ensure_ascii=False)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.values.get(key, default)

    def items(self) -> list[tuple[str, str]]:
        return [(key, self.values[key]) for key in self.keys]

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSection):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"OrderedSection({self.items()!r})"


class PairList(list):
    """A decoded JSON object kept as its ordered list of pairs."""


def ordered_pairs(pairs: list[tuple[str, Any]]) -> PairList:
    return PairList(pairs)
