"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_exit_quiz,
    show_info,
    show_warning,
)
from .question_renderer import render_card_prompt
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_exit_quiz",
    "show_info",
    "show_warning",
    "render_card_prompt",
]
