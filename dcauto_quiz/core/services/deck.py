"""Append-only card queue for one quiz session."""

from __future__ import annotations

import random
from typing import Iterator, Sequence

from dcauto_quiz.core.errors import ContractViolationError, DeckExhaustedError
from dcauto_quiz.core.models import DomainFilter, Question
from dcauto_quiz.core.question_bank import QuestionBank
from dcauto_quiz.core.shuffler import shuffle


class Deck:
    """Ordered workload of questions with a forward-only read cursor.

    Entries are references into the question bank. Missed questions are
    appended to the tail; nothing is ever removed, the cursor just moves past.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        self._entries: list[Question] = list(questions)
        self._known_ids: set[str] = {question.id for question in self._entries}
        self._cursor: int = 0

    @classmethod
    def from_bank(
        cls,
        bank: QuestionBank,
        domain_filter: DomainFilter | None,
        rng: random.Random | None = None,
    ) -> Deck:
        return cls(shuffle(bank.filter_by_domain(domain_filter), rng))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._entries))

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def position(self) -> int:
        """1-based number of the current card."""
        return self._cursor + 1

    def current(self) -> Question:
        if self._cursor >= len(self._entries):
            raise DeckExhaustedError(
                f"Deck cursor {self._cursor} is past the last card ({len(self._entries)} total)."
            )
        return self._entries[self._cursor]

    def requeue(self, question: Question) -> None:
        """Append a missed question so it comes back at the end of the deck."""
        if question.id not in self._known_ids:
            raise ContractViolationError(f"Question {question.id!r} does not belong to this deck.")
        self._entries.append(question)

    def has_next(self) -> bool:
        return self._cursor + 1 < len(self._entries)

    def is_last(self) -> bool:
        return not self.has_next()

    def advance(self) -> bool:
        """Move to the next card. Returns False when already on the last card."""
        if not self.has_next():
            return False
        self._cursor += 1
        return True
