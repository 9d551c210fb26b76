"""Qt main window switching between the Setup, Playing and Summary views."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from dcauto_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_SUBTITLE,
    APP_VERSION,
    HELP_TEXT,
)
from dcauto_quiz.constants.quiz_constants import LOW_TIME_WARNING_SECONDS
from dcauto_quiz.constants.ui_constants import (
    EMPTY_POOL_MESSAGE,
    EMPTY_POOL_TITLE,
    PLAY_EXIT_BUTTON,
    STATE_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from dcauto_quiz.core.errors import ContractViolationError, EmptyPoolError
from dcauto_quiz.core.models import DomainFilter, SessionPhase
from dcauto_quiz.core.session_controller import QuizSessionController
from dcauto_quiz.core.time_format import format_clock
from dcauto_quiz.styling.styles import Styles
from dcauto_quiz.ui.components.play_panel import PlayPanel
from dcauto_quiz.ui.components.setup_panel import SetupPanel
from dcauto_quiz.ui.components.summary_panel import SummaryPanel
from dcauto_quiz.ui.dialog_helpers import confirm_exit_quiz, show_info, show_warning
from dcauto_quiz.ui.settings_dialog import DisplaySettings, SettingsDialog

logger = logging.getLogger(__name__)


class QuizMainWindow(QMainWindow):
    """Main Qt window rendering the session controller's state."""

    def __init__(self, controller: QuizSessionController, server_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(760, 720)

        self.controller = controller
        self.server_url = server_url

        self._settings = DisplaySettings()
        self._last_phase: SessionPhase | None = None

        self._build_ui()
        self._apply_styles()
        self._configure_refresh_timer()
        self._refresh_state()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.setup_panel = SetupPanel(
            self.controller.get_question_bank(),
            on_start=self._handle_start,
            parent=self,
        )
        self.play_panel = PlayPanel(
            on_answer=self._handle_answer,
            on_next=self._handle_next,
            on_toggle_timer=self._handle_toggle_timer,
            parent=self,
        )
        self.summary_panel = SummaryPanel(on_new_quiz=self._handle_new_quiz, parent=self)

        self.mode_stack.addWidget(self.setup_panel)
        self.mode_stack.addWidget(self.play_panel)
        self.mode_stack.addWidget(self.summary_panel)
        root_layout.addWidget(self.mode_stack, stretch=1)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        title_column = QVBoxLayout()
        title_row = QHBoxLayout()
        self.title_label = QLabel(APP_NAME, self)
        title_row.addWidget(self.title_label)
        self.exit_button = QPushButton(PLAY_EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self._handle_exit)
        self.exit_button.setVisible(False)
        title_row.addWidget(self.exit_button)
        title_row.addStretch()
        title_column.addLayout(title_row)
        self.subtitle_label = QLabel(APP_SUBTITLE, self)
        title_column.addWidget(self.subtitle_label)
        header_row.addLayout(title_column, stretch=1)

        button_column = QHBoxLayout()
        self.about_button = QPushButton("About", self)
        self.about_button.clicked.connect(self._handle_about)
        button_column.addWidget(self.about_button)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_column.addWidget(self.help_button)
        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_column.addWidget(self.settings_button)
        header_row.addLayout(button_column)

        self.timer_label = QLabel(format_clock(self.controller.get_timer_seconds_remaining()), self)
        header_row.addWidget(self.timer_label)

        layout.addLayout(header_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATE_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        snapshot = self.controller.get_snapshot()

        remaining = snapshot.timer_seconds_remaining
        self.timer_label.setText(format_clock(remaining))
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(remaining < LOW_TIME_WARNING_SECONDS, self._settings.theme)
        )

        if snapshot.phase != self._last_phase:
            self._set_phase(snapshot.phase)

        if snapshot.phase == SessionPhase.PLAYING:
            self.play_panel.show_snapshot(snapshot)
        elif snapshot.phase == SessionPhase.SUMMARY:
            self.summary_panel.show_stats(snapshot.stats)

    def _set_phase(self, phase: SessionPhase) -> None:
        self._last_phase = phase
        playing = phase == SessionPhase.PLAYING
        self.exit_button.setVisible(playing)
        self.settings_button.setEnabled(not playing)

        index_map = {
            SessionPhase.SETUP: 0,
            SessionPhase.PLAYING: 1,
            SessionPhase.SUMMARY: 2,
        }
        if phase != SessionPhase.PLAYING:
            self.play_panel.reset_state()
        self.mode_stack.setCurrentIndex(index_map[phase])

    def _handle_start(self, domain_filter: DomainFilter) -> None:
        try:
            self.controller.start_game(domain_filter)
        except EmptyPoolError:
            show_warning(self, EMPTY_POOL_TITLE, EMPTY_POOL_MESSAGE, self._settings.ui_font_size)
            return
        except ContractViolationError as exc:
            # Already started from the browser view.
            logger.debug("Start ignored: %s", exc)
        self._refresh_state()

    def _run_playing_action(self, action: Callable[[], object]) -> None:
        # The timer may end the session between a click and its handler.
        try:
            action()
        except ContractViolationError as exc:
            logger.debug("Ignored UI action after session ended: %s", exc)
        self._refresh_state()

    def _handle_answer(self, option: str) -> None:
        self._run_playing_action(lambda: self.controller.submit_answer(option))

    def _handle_next(self) -> None:
        self._run_playing_action(self.controller.advance)

    def _handle_toggle_timer(self) -> None:
        if self.controller.is_timer_running():
            self._run_playing_action(self.controller.stop_timer)
        else:
            self._run_playing_action(self.controller.start_timer)

    def _handle_exit(self) -> None:
        if not confirm_exit_quiz(self, self._settings.ui_font_size):
            return
        self.controller.exit()
        self._refresh_state()

    def _handle_new_quiz(self) -> None:
        if self.controller.get_phase() == SessionPhase.SUMMARY:
            self.controller.reset_to_setup()
        self._refresh_state()

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        if self.server_url:
            details += f"\n\nBrowser view: {self.server_url}"
        show_info(self, f"About {APP_NAME}", details, self._settings.ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, self._settings.ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self._settings, self)
        if dialog.exec():
            self._settings = dialog.selected_settings()
            self._apply_styles()
            self._refresh_state()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._settings.theme))

        ui_style = f"font-size: {self._settings.ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        self.subtitle_label.setStyleSheet(Styles.get_muted_label_style(self._settings.theme, max(8, self._settings.ui_font_size - 2)))
        self.exit_button.setStyleSheet(Styles.get_exit_button_style(self._settings.theme))

        self.setup_panel.apply_theme(self._settings.theme, self._settings.ui_font_size)
        self.play_panel.apply_theme(self._settings.theme, self._settings.ui_font_size, self._settings.card_font_size)
        self.summary_panel.apply_theme(self._settings.theme, self._settings.ui_font_size + 2)
