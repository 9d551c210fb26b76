"""Component for answering cards during the Playing phase."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from dcauto_quiz.constants.ui_constants import (
    PLAY_CARD_TEMPLATE,
    PLAY_FINISH_BUTTON,
    PLAY_NEXT_BUTTON,
    PLAY_PAUSE_BUTTON,
    PLAY_RESUME_BUTTON,
    PLAY_SELECT_HINT,
)
from dcauto_quiz.core.session_controller import SessionSnapshot
from dcauto_quiz.styling.color_palette import ColorPalette, Theme
from dcauto_quiz.styling.styles import Styles, option_state_for
from dcauto_quiz.ui.question_renderer import render_card_prompt


class PlayPanel(QWidget):
    """UI component showing the current card and its options."""

    def __init__(
        self,
        on_answer: Callable[[str], None],
        on_next: Callable[[], None],
        on_toggle_timer: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self.on_next = on_next
        self.on_toggle_timer = on_toggle_timer

        self._theme = Theme.DARK
        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        # (card id, position, options) of what is on screen, to avoid reloading the web view.
        self._rendered_key: tuple[str, int, tuple[str, ...]] | None = None
        self._option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        stats_row = QHBoxLayout()
        self.card_label = QLabel("", self)
        self.correct_label = QLabel("Correct: 0", self)
        self.wrong_label = QLabel("Wrong: 0", self)
        stats_row.addWidget(self.card_label)
        stats_row.addStretch()
        stats_row.addWidget(self.correct_label)
        stats_row.addStretch()
        stats_row.addWidget(self.wrong_label)
        layout.addLayout(stats_row)

        self.domain_label = QLabel("", self)
        layout.addWidget(self.domain_label)

        self.prompt_view = QWebEngineView(self)
        self.prompt_view.setMinimumHeight(140)
        layout.addWidget(self.prompt_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        footer_row = QHBoxLayout()
        self.pause_button = QPushButton(PLAY_PAUSE_BUTTON, self)
        self.pause_button.clicked.connect(self.on_toggle_timer)
        footer_row.addWidget(self.pause_button)

        self.hint_label = QLabel(PLAY_SELECT_HINT, self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        footer_row.addWidget(self.hint_label, stretch=1)

        self.next_button = QPushButton(PLAY_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self.on_next)
        self.next_button.setVisible(False)
        footer_row.addWidget(self.next_button, stretch=1)
        layout.addLayout(footer_row)

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        card = snapshot.current_card
        if card is None:
            return

        self.card_label.setText(
            PLAY_CARD_TEMPLATE.format(position=snapshot.card_number, total=snapshot.deck_length)
        )
        self.correct_label.setText(f"Correct: {snapshot.stats.correct}")
        self.wrong_label.setText(f"Wrong: {snapshot.stats.wrong}")
        self.domain_label.setText(card.domain_code)

        key = (card.id, snapshot.card_number, snapshot.current_options)
        if key != self._rendered_key:
            self._rendered_key = key
            self.prompt_view.setHtml(render_card_prompt(card, self._game_font_size, self._theme))
            self._rebuild_option_buttons(snapshot.current_options)

        for button, option in zip(self._option_buttons, snapshot.current_options):
            state = option_state_for(option, card.correct_answer, snapshot.selected_option, snapshot.answered)
            button.setStyleSheet(Styles.get_option_style(state, self._theme, self._game_font_size))
            button.setEnabled(not snapshot.answered)

        self.hint_label.setVisible(not snapshot.answered)
        self.next_button.setVisible(snapshot.answered)
        self.next_button.setText(PLAY_FINISH_BUTTON if snapshot.is_last_card else PLAY_NEXT_BUTTON)
        self.pause_button.setText(PLAY_PAUSE_BUTTON if snapshot.timer_running else PLAY_RESUME_BUTTON)

    def _rebuild_option_buttons(self, options: tuple[str, ...]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self._option_buttons = []
        for idx, option in enumerate(options):
            letter = chr(ord("A") + idx)
            button = QPushButton(f"{letter}.  {option}", self)
            button.clicked.connect(lambda _checked=False, value=option: self.on_answer(value))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def reset_state(self) -> None:
        self._rendered_key = None

    def apply_theme(self, theme: Theme, ui_font_size: int, game_font_size: int) -> None:
        self._theme = theme
        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._rendered_key = None

        muted = Styles.get_muted_label_style(theme, ui_font_size)
        self.card_label.setStyleSheet(muted)
        self.domain_label.setStyleSheet(muted)
        self.hint_label.setStyleSheet(muted)
        self.correct_label.setStyleSheet(f"color: {ColorPalette.SUCCESS.get(theme)}; font-size: {ui_font_size}pt;")
        self.wrong_label.setStyleSheet(f"color: {ColorPalette.ERROR.get(theme)}; font-size: {ui_font_size}pt;")
        self.next_button.setStyleSheet(Styles.get_primary_button_style(theme, ui_font_size + 2))
        self.pause_button.setStyleSheet(f"font-size: {ui_font_size}pt;")
        self.prompt_view.page().setBackgroundColor(QColor(ColorPalette.BACKGROUND_SECONDARY.get(theme)))
