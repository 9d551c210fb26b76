"""Application entry point for DCAUTO Quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from dcauto_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from dcauto_quiz.core.question_importer import load_question_bank
from dcauto_quiz.core.services.session_timer import ThreadingTicker
from dcauto_quiz.core.session_controller import QuizSessionController
from dcauto_quiz.server.api_server import start_api_server
from dcauto_quiz.ui.quiz_main_window import QuizMainWindow
from dcauto_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the question bank, start the API server and the Qt UI."""
    logger = configure_logging()
    logger.info("Starting DCAUTO Quiz…")

    bank = load_question_bank()
    logger.info("Loaded %d questions", len(bank))

    controller = QuizSessionController(bank, ticker=ThreadingTicker())
    start_api_server(controller=controller, host=DEFAULT_HOST, port=DEFAULT_PORT)
    server_url = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}/"
    logger.info("Browser view available at %s", server_url)

    app = QApplication(sys.argv)
    window = QuizMainWindow(controller=controller, server_url=server_url)
    window.show()
    exit_code = app.exec()
    controller.exit()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
