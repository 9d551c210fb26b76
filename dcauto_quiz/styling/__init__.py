"""Styling module for DCAUTO Quiz."""

from .color_palette import ColorPalette, Theme
from .styles import OptionState, Styles, option_state_for

__all__ = ["ColorPalette", "OptionState", "Styles", "Theme", "option_state_for"]
