"""Read-only question bank that feeds quiz sessions."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from dcauto_quiz.core.models import (
    ALL_DOMAINS,
    DOMAINS,
    Domain,
    DomainFilter,
    Question,
    normalize_domain_filter,
)


class QuestionBank:
    """Immutable, validated collection of questions."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(self._validate(list(questions)))

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def get_questions(self) -> tuple[Question, ...]:
        """Return every question in source order."""
        return self._questions

    def get_question(self, question_id: str) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise KeyError(f"Unknown question id {question_id!r}")

    def filter_by_domain(self, domain_filter: DomainFilter | None) -> list[Question]:
        """Return the questions matching a domain, or all of them for ``ALL_DOMAINS``."""
        selected = normalize_domain_filter(domain_filter)
        if selected == ALL_DOMAINS:
            return list(self._questions)
        return [question for question in self._questions if question.domain == selected]

    def count_by_domain(self) -> dict[Domain, int]:
        counts = Counter(question.domain for question in self._questions)
        return {domain: counts.get(domain, 0) for domain in DOMAINS}

    def domains_present(self) -> list[Domain]:
        return [domain for domain, count in self.count_by_domain().items() if count]

    @staticmethod
    def _validate(questions: list[Question]) -> list[Question]:
        seen: set[str] = set()
        for question in questions:
            if not question.id.strip():
                raise ValueError("Question id must not be empty.")
            if question.id in seen:
                raise ValueError(f"Duplicate question id {question.id!r}.")
            if not question.prompt.strip():
                raise ValueError(f"Question {question.id!r} has no prompt.")
            if not question.correct_answer.strip():
                raise ValueError(f"Question {question.id!r} has no answer.")
            seen.add(question.id)
        return questions
