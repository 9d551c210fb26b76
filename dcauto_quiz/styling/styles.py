"""Centralized styles and font definitions for the application."""

from enum import Enum, auto

from .color_palette import ColorPalette, Theme


class OptionState(Enum):
    """Visual state of an answer option button."""

    IDLE = auto()
    CORRECT = auto()
    WRONG = auto()
    DIMMED = auto()


def option_state_for(option: str, correct_answer: str, selected_option: str | None, answered: bool) -> OptionState:
    """Pick how an option is drawn once the card may have been answered."""
    if not answered:
        return OptionState.IDLE
    if option == correct_answer:
        return OptionState.CORRECT
    if option == selected_option:
        return OptionState.WRONG
    return OptionState.DIMMED


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Cascadia Mono', 'Consolas', monospace;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_FOCUS.get(theme)};
            }}
            QComboBox, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                padding: 6px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_muted_label_style(theme: Theme = Theme.DARK, font_size: int = 10) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-size: {font_size}pt;"

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.DARK, font_size: int = 12) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)}; font-weight: bold;"
            f" font-size: {font_size}pt; padding: 12px; border: none; }}"
        )

    @staticmethod
    def get_exit_button_style(theme: Theme = Theme.DARK) -> str:
        return (
            f"QPushButton {{ color: {ColorPalette.ERROR.get(theme)};"
            f" border: 1px solid {ColorPalette.ERROR.get(theme)}; font-size: 9pt; padding: 2px 8px; }}"
        )

    @staticmethod
    def get_timer_style(low_time: bool, theme: Theme = Theme.DARK) -> str:
        color = ColorPalette.ERROR.get(theme) if low_time else ColorPalette.TEXT_PRIMARY.get(theme)
        return f"font-size: 24pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_option_style(state: OptionState, theme: Theme = Theme.DARK, font_size: int = 12) -> str:
        base = f"text-align: left; padding: 12px; font-size: {font_size}pt;"
        if state == OptionState.CORRECT:
            extra = (
                f" color: {ColorPalette.SUCCESS.get(theme)}; font-weight: bold;"
                f" border: 1px solid {ColorPalette.SUCCESS.get(theme)};"
                f" background-color: {ColorPalette.SUCCESS_BG.get(theme)};"
            )
        elif state == OptionState.WRONG:
            extra = (
                f" color: {ColorPalette.ERROR.get(theme)}; text-decoration: line-through;"
                f" border: 1px solid {ColorPalette.ERROR.get(theme)};"
                f" background-color: {ColorPalette.ERROR_BG.get(theme)};"
            )
        elif state == OptionState.DIMMED:
            extra = (
                f" color: {ColorPalette.TEXT_DISABLED.get(theme)};"
                f" border: 1px solid {ColorPalette.BORDER_MUTED.get(theme)};"
            )
        else:
            extra = f" border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
        return f"QPushButton {{ {base}{extra} }}"

    @staticmethod
    def get_accuracy_style(passed: bool, theme: Theme = Theme.DARK) -> str:
        color = ColorPalette.SUCCESS.get(theme) if passed else ColorPalette.TEXT_PRIMARY.get(theme)
        return f"font-size: 20pt; font-weight: bold; color: {color};"
