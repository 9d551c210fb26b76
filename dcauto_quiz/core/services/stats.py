"""Service for tallying answers and deriving session statistics."""

from __future__ import annotations

from dataclasses import dataclass

from dcauto_quiz.constants.quiz_constants import PASSING_ACCURACY_PERCENT


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    """Immutable snapshot returned to consumers."""

    correct: int = 0
    wrong: int = 0
    requeued: int = 0
    total_answered: int = 0

    @property
    def accuracy(self) -> int:
        return percentage(self.correct, self.total_answered)

    def passed(self, threshold: int = PASSING_ACCURACY_PERCENT) -> bool:
        return self.total_answered > 0 and self.accuracy >= threshold

    def to_dict(self) -> dict[str, int]:
        return {
            "correct": self.correct,
            "wrong": self.wrong,
            "requeued": self.requeued,
            "total_answered": self.total_answered,
            "accuracy": self.accuracy,
        }


@dataclass(slots=True)
class QuizStats:
    """Mutable tallies for the active session."""

    correct: int = 0
    wrong: int = 0
    requeued: int = 0
    total_answered: int = 0

    def record_answer(self, is_correct: bool) -> None:
        """Count one answer. A wrong answer always implies one re-queue."""
        self.total_answered += 1
        if is_correct:
            self.correct += 1
        else:
            self.wrong += 1
            self.requeued += 1

    def clear(self) -> None:
        self.correct = 0
        self.wrong = 0
        self.requeued = 0
        self.total_answered = 0

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            correct=self.correct,
            wrong=self.wrong,
            requeued=self.requeued,
            total_answered=self.total_answered,
        )
