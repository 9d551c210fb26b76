"""Display preferences for the quiz window."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from dcauto_quiz.styling.color_palette import Theme

UI_FONT_RANGE = (8, 24)
CARD_FONT_RANGE = (10, 32)


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Font sizes and theme applied to every panel."""

    ui_font_size: int = 10
    card_font_size: int = 14
    theme: Theme = Theme.DARK


def _point_spinbox(value: int, bounds: tuple[int, int]) -> QSpinBox:
    spinbox = QSpinBox()
    spinbox.setRange(*bounds)
    spinbox.setValue(value)
    spinbox.setSuffix(" pt")
    return spinbox


class SettingsDialog(QDialog):
    """Modal editor for :class:`DisplaySettings`."""

    def __init__(self, settings: DisplaySettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)

        self.ui_font_spinbox = _point_spinbox(settings.ui_font_size, UI_FONT_RANGE)
        self.card_font_spinbox = _point_spinbox(settings.card_font_size, CARD_FONT_RANGE)
        self.card_font_spinbox.setToolTip("Applies to the question prompt and the answer options")
        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(settings.theme == Theme.DARK)

        form = QFormLayout()
        form.addRow("Header and stats font:", self.ui_font_spinbox)
        form.addRow("Card font:", self.card_font_spinbox)
        form.addRow("", self.dark_theme_checkbox)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)  # type: ignore[arg-type]
        buttons.rejected.connect(self.reject)  # type: ignore[arg-type]

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(buttons)

    def selected_settings(self) -> DisplaySettings:
        return DisplaySettings(
            ui_font_size=self.ui_font_spinbox.value(),
            card_font_size=self.card_font_spinbox.value(),
            theme=Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT,
        )
