"""Light and dark colors for the quiz window.

The dark theme is the terminal look of the browser view: black background,
white text, green for correct answers and red for mistakes or low time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """One color role with a value per theme."""

    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.dark if theme == Theme.DARK else self.light


class ColorPalette:
    """Color roles referenced by the stylesheets."""

    TEXT_PRIMARY = ThemeColors("#111111", "#FFFFFF")
    TEXT_SECONDARY = ThemeColors("#5F6368", "#6B7280")
    TEXT_DISABLED = ThemeColors("#A8A8A8", "#4B5563")

    BACKGROUND_PRIMARY = ThemeColors("#FAFAFA", "#000000")
    BACKGROUND_SECONDARY = ThemeColors("#EFEFEF", "#111827")

    # Option feedback
    SUCCESS = ThemeColors("#15803D", "#22C55E")
    SUCCESS_BG = ThemeColors("#E3F5E8", "#0B2A15")
    ERROR = ThemeColors("#B91C1C", "#EF4444")
    ERROR_BG = ThemeColors("#FCE8E8", "#2A0B0B")

    BORDER_PRIMARY = ThemeColors("#C8C8C8", "#374151")
    BORDER_MUTED = ThemeColors("#E4E4E4", "#1F2937")
    BORDER_FOCUS = ThemeColors("#111111", "#FFFFFF")

    BUTTON_PRIMARY_BG = ThemeColors("#111111", "#FFFFFF")
    BUTTON_PRIMARY_TEXT = ThemeColors("#FFFFFF", "#000000")
    BUTTON_HOVER_BG = ThemeColors("#E4E4E4", "#111827")
