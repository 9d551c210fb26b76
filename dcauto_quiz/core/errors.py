"""Exceptions raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz core errors."""


class ContractViolationError(QuizError, RuntimeError):
    """Raised when an operation is called in a state that should be unreachable."""


class DeckExhaustedError(ContractViolationError, IndexError):
    """Raised when the current card is requested past the end of the deck."""


class EmptyPoolError(QuizError):
    """Raised when a domain filter selects no questions at game start."""

    def __init__(self, domain_filter: object) -> None:
        super().__init__(f"No questions available for domain filter {domain_filter!s}.")
        self.domain_filter = domain_filter


class QuestionImportError(QuizError):
    """Raised when a question bank file cannot be parsed."""
