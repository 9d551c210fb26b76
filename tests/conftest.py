from __future__ import annotations

import random

import pytest

from dcauto_quiz.core.models import Domain, Question
from dcauto_quiz.core.services.session_timer import ManualTicker
from dcauto_quiz.core.session_controller import QuizSessionController


def make_question(question_id: str, domain: Domain = Domain.NPF, answer: str | None = None) -> Question:
    return Question(
        id=question_id,
        domain=domain,
        prompt=f"Prompt for {question_id}?",
        correct_answer=answer if answer is not None else f"answer-{question_id}",
    )


@pytest.fixture
def universe() -> list[Question]:
    """Five questions per domain, every answer unique."""
    questions = []
    for domain in (Domain.NPF, Domain.ACI, Domain.NXOS, Domain.UCS):
        for idx in range(5):
            questions.append(make_question(f"{domain.name.lower()}-{idx}", domain))
    return questions


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def make_controller(rng, ticker):
    def factory(questions, **kwargs) -> QuizSessionController:
        return QuizSessionController(questions, rng=rng, ticker=ticker, **kwargs)

    return factory


def answer_current(controller: QuizSessionController, correct: bool) -> str:
    """Submit the right or a wrong option for the current card and return it."""
    card = controller.get_current_card()
    assert card is not None
    options = controller.get_current_options()
    if correct:
        choice = card.correct_answer
    else:
        choice = next(option for option in options if option != card.correct_answer)
    assert controller.submit_answer(choice)
    return choice
