"""Component for choosing a domain and starting a quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from dcauto_quiz.constants.ui_constants import (
    SETUP_ALL_DOMAINS_LABEL,
    SETUP_DOMAIN_LABEL,
    SETUP_FOOTER,
    SETUP_START_BUTTON,
)
from dcauto_quiz.core.models import ALL_DOMAINS, DOMAINS, Domain, DomainFilter
from dcauto_quiz.core.question_bank import QuestionBank
from dcauto_quiz.styling.color_palette import Theme
from dcauto_quiz.styling.styles import Styles


class SetupPanel(QWidget):
    """UI component for the Setup phase."""

    def __init__(
        self,
        question_bank: QuestionBank,
        on_start: Callable[[DomainFilter], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.question_bank = question_bank
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignTop)
        self.setLayout(layout)
        layout.addSpacing(48)

        self.domain_label = QLabel(SETUP_DOMAIN_LABEL, self)
        layout.addWidget(self.domain_label)

        self.domain_combo = QComboBox(self)
        total = len(self.question_bank)
        self.domain_combo.addItem(f"{SETUP_ALL_DOMAINS_LABEL} [{total}]", ALL_DOMAINS)
        counts = self.question_bank.count_by_domain()
        for domain in DOMAINS:
            self.domain_combo.addItem(f"{domain.value} [{counts[domain]}]", domain.value)
        layout.addWidget(self.domain_combo)

        layout.addSpacing(24)
        self.start_button = QPushButton(SETUP_START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)

        self.footer_label = QLabel(SETUP_FOOTER, self)
        self.footer_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.footer_label)

    def _handle_start_click(self) -> None:
        self.on_start(self.selected_filter())

    def selected_filter(self) -> DomainFilter:
        data = self.domain_combo.currentData()
        if data == ALL_DOMAINS:
            return ALL_DOMAINS
        return Domain(data)

    def apply_theme(self, theme: Theme, font_size: int) -> None:
        self.start_button.setStyleSheet(Styles.get_primary_button_style(theme, font_size + 2))
        self.domain_label.setStyleSheet(Styles.get_muted_label_style(theme, font_size))
        self.footer_label.setStyleSheet(Styles.get_muted_label_style(theme, max(8, font_size - 2)))
        self.domain_combo.setStyleSheet(f"font-size: {font_size}pt;")
