"""Colors used by the frame renderer."""
from __future__ import annotations

from dataclasses import dataclass

import questionary


@dataclass(frozen=True)
class Theme:
    """Palette handed to ``render``; nothing reads colors from module state."""

    selected_title: str = "#E3B5BF"      # orchid
    muted_title: str = "#6B6B6B"
    muted_border: str = "#3A3A3A"
    footer: str = "#E9F2D0"              # nyanza
    error: str = "#FF99B8"
    divider: str = "#6B6B6B"
    success: str = "#B4F8D5"             # aquamarine
    title: str = "#DAC3E9"               # thistle

    search_box: str = "#B4F8D5"
    search_text: str = "#DAC3E9"
    highlight_bg: str = "#FFD700"
    highlight_fg: str = "#1A1A1A"

    settings_title: str = "#9B8B9F"
    settings_selected_title: str = "#C5B0C9"
    settings_border: str = "#7A6B7E"
    settings_value: str = "#ADA0B0"

    box_width: int = 70

    @property
    def highlight(self) -> str:
        return f"{self.highlight_fg} on {self.highlight_bg}"

    def prompt_style(self) -> questionary.Style:
        """questionary style for the confirmation prompts the runner shows."""
        return questionary.Style([
            ("qmark", f"fg:{self.selected_title} bold"),
            ("question", "bold"),
            ("answer", f"fg:{self.success} bold"),
            ("highlighted", f"fg:{self.selected_title} bold"),
            ("pointer", f"fg:{self.selected_title} bold"),
            ("selected", f"fg:{self.title}"),
        ])


DEFAULT_THEME = Theme()
