"""Card rendering utilities for displaying quiz prompts."""

from __future__ import annotations

from dcauto_quiz.core.markdown_renderer import renderer
from dcauto_quiz.core.models import Question
from dcauto_quiz.styling.color_palette import ColorPalette, Theme


def render_card_prompt(question: Question, font_size: int = 14, theme: Theme = Theme.DARK) -> str:
    """Render a card's prompt as a standalone HTML page.

    Args:
        question: Card whose prompt (markdown) is shown
        font_size: Font size in points for the prompt text
        theme: Theme used to pick the text color

    Returns:
        HTML string ready for display in QWebEngineView
    """
    return renderer.render_full_document(
        question.prompt,
        title=question.id,
        font_size=font_size,
        text_color=ColorPalette.TEXT_PRIMARY.get(theme),
    )
