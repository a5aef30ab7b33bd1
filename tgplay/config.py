"""Configuration records: the three item sections and the user options."""
from __future__ import annotations

import json
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from .ordered import OrderedSection, PairList, ParseError, ordered_pairs

# JSON key -> page name, in display order.
SECTION_KEYS: dict[str, str] = {
    "goTo": "goto",
    "commands": "commands",
    "notes": "notes",
}


@dataclass
class Configuration:
    """Items shown by the navigator, one ordered section per page."""

    goto: OrderedSection = field(default_factory=OrderedSection)
    commands: OrderedSection = field(default_factory=OrderedSection)
    notes: OrderedSection = field(default_factory=OrderedSection)

    def sections(self) -> list[tuple[str, OrderedSection]]:
        """Sections as ``(page_name, section)`` in display order."""
        return [(name, getattr(self, name)) for name in SECTION_KEYS.values()]

    def section(self, name: str) -> OrderedSection:
        if name not in SECTION_KEYS.values():
            raise KeyError(name)
        return getattr(self, name)

    def is_empty(self) -> bool:
        return all(len(section) == 0 for _, section in self.sections())

    @classmethod
    def from_json(cls, text: str) -> Configuration:
        """Parse ``config.json``. Missing sections load as empty.

        Raises:
            ParseError: the document or one of its sections is malformed.
        """
        try:
            doc = json.loads(text, object_pairs_hook=ordered_pairs)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON: {e}") from e
        if not isinstance(doc, PairList):
            raise ParseError(f"expected an object, got {type(doc).__name__}")

        raw = dict(doc)
        kwargs = {}
        for json_key, name in SECTION_KEYS.items():
            if json_key not in raw:
                continue
            try:
                kwargs[name] = OrderedSection.from_object(raw[json_key])
            except ParseError as e:
                raise ParseError(f"section {json_key!r}: {e}") from e
        return cls(**kwargs)

    def to_json(self) -> str:
        doc = {
            json_key: getattr(self, name).to_object()
            for json_key, name in SECTION_KEYS.items()
        }
        return json.dumps(doc, indent=2, ensure_ascii=False)


def default_config() -> Configuration:
    """Starter configuration written on first run."""
    return Configuration(
        goto=OrderedSection([("home", "~")]),
        commands=OrderedSection([("example", "echo 'Add your commands in config.json'")]),
        notes=OrderedSection([("example", "Add your notes in config.json")]),
    )


class Options(BaseModel):
    """User toggles, changed from the settings page."""

    model_config = ConfigDict(populate_by_name=True)

    frequent_goto: bool = Field(default=True, alias="frequent_goTo")
