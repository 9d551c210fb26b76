"""Message boxes used by the quiz window."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from dcauto_quiz.constants.ui_constants import EXIT_CONFIRM_MESSAGE, EXIT_CONFIRM_TITLE


def _build_message_box(
    parent: QWidget,
    icon: QMessageBox.Icon,
    title: str,
    message: str,
    font_point_size: int | None,
) -> QMessageBox:
    box = QMessageBox(parent)
    box.setIcon(icon)
    box.setWindowTitle(title)
    box.setText(message)
    if font_point_size:
        # Stylesheet wins over setFont for the label and buttons inside QMessageBox.
        box.setStyleSheet(
            f"QLabel {{ font-size: {font_point_size}pt; }}\n"
            f"QPushButton {{ font-size: {font_point_size}pt; }}"
        )
    return box


def confirm_exit_quiz(parent: QWidget, font_point_size: int | None = None) -> bool:
    """Ask before abandoning a running quiz. Returns True when the user agrees."""
    box = _build_message_box(
        parent, QMessageBox.Question, EXIT_CONFIRM_TITLE, EXIT_CONFIRM_MESSAGE, font_point_size
    )
    box.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
    box.setDefaultButton(QMessageBox.No)
    return box.exec() == QMessageBox.Yes


def show_info(parent: QWidget, title: str, message: str, font_point_size: int | None = None) -> None:
    box = _build_message_box(parent, QMessageBox.Information, title, message, font_point_size)
    box.setStandardButtons(QMessageBox.Ok)
    box.exec()


def show_warning(parent: QWidget, title: str, message: str, font_point_size: int | None = None) -> None:
    """Non-fatal problem the user can fix, e.g. picking a domain with no cards."""
    box = _build_message_box(parent, QMessageBox.Warning, title, message, font_point_size)
    box.setStandardButtons(QMessageBox.Ok)
    box.exec()
