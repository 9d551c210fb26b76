import logging

from dcauto_quiz.utils.logging_config import configure_logging


def test_configure_logging_returns_package_logger():
    assert configure_logging().name == "dcauto_quiz"


def test_access_log_is_quieted_below_warning():
    configure_logging(logging.INFO)
    assert logging.getLogger("uvicorn.access").level == logging.WARNING

    configure_logging(logging.ERROR)
    assert logging.getLogger("uvicorn.access").level == logging.ERROR
