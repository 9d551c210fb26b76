"""Component for the end-of-quiz summary."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from dcauto_quiz.constants.ui_constants import SUMMARY_NEW_QUIZ_BUTTON, SUMMARY_TITLE
from dcauto_quiz.core.services.stats import StatsSnapshot
from dcauto_quiz.styling.color_palette import ColorPalette, Theme
from dcauto_quiz.styling.styles import Styles


class SummaryPanel(QWidget):
    """UI component showing accuracy and totals after a quiz ends."""

    def __init__(self, on_new_quiz: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_new_quiz = on_new_quiz
        self._theme = Theme.DARK
        self._font_size: int = 12
        self._shown: StatsSnapshot | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignTop)
        self.setLayout(layout)
        layout.addSpacing(32)

        self.group = QGroupBox(SUMMARY_TITLE, self)
        grid = QGridLayout()
        self.group.setLayout(grid)

        self.accuracy_value = QLabel("0%", self)
        self.total_value = QLabel("0", self)
        self.correct_value = QLabel("0", self)
        self.mistakes_value = QLabel("0", self)
        rows = (
            ("Accuracy", self.accuracy_value),
            ("Total Questions", self.total_value),
            ("Correct", self.correct_value),
            ("Mistakes (Re-queued)", self.mistakes_value),
        )
        self._caption_labels: list[QLabel] = []
        for row, (caption, value_label) in enumerate(rows):
            caption_label = QLabel(caption, self)
            self._caption_labels.append(caption_label)
            value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            grid.addWidget(caption_label, row, 0)
            grid.addWidget(value_label, row, 1)
        layout.addWidget(self.group)

        layout.addSpacing(16)
        self.new_quiz_button = QPushButton(SUMMARY_NEW_QUIZ_BUTTON, self)
        self.new_quiz_button.clicked.connect(self.on_new_quiz)
        layout.addWidget(self.new_quiz_button)

    def show_stats(self, stats: StatsSnapshot) -> None:
        if stats == self._shown:
            return
        self._shown = stats
        self.accuracy_value.setText(f"{stats.accuracy}%")
        self.accuracy_value.setStyleSheet(Styles.get_accuracy_style(stats.passed(), self._theme))
        self.total_value.setText(str(stats.total_answered))
        self.correct_value.setText(str(stats.correct))
        self.mistakes_value.setText(str(stats.wrong))

    def apply_theme(self, theme: Theme, font_size: int) -> None:
        self._theme = theme
        self._font_size = font_size
        self._shown = None
        for caption_label in self._caption_labels:
            caption_label.setStyleSheet(Styles.get_muted_label_style(theme, font_size))
        self.correct_value.setStyleSheet(f"color: {ColorPalette.SUCCESS.get(theme)}; font-size: {font_size}pt;")
        self.mistakes_value.setStyleSheet(f"color: {ColorPalette.ERROR.get(theme)}; font-size: {font_size}pt;")
        self.total_value.setStyleSheet(f"font-size: {font_size}pt;")
        self.group.setStyleSheet(f"QGroupBox {{ font-size: {font_size + 4}pt; font-weight: bold; }}")
        self.new_quiz_button.setStyleSheet(f"font-size: {font_size}pt; padding: 10px;")
