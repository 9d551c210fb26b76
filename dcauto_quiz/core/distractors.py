"""Builds multiple-choice option sets from the answers of other questions."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

from dcauto_quiz.constants.quiz_constants import DISTRACTOR_COUNT
from dcauto_quiz.core.models import Question
from dcauto_quiz.core.shuffler import shuffle

logger = logging.getLogger(__name__)


def generate_options(
    target: Question,
    universe: Sequence[Question],
    rng: random.Random | None = None,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[str]:
    """Return the correct answer mixed with up to ``distractor_count`` wrong answers.

    Distractors come from the same domain as ``target`` when that domain has
    enough other questions, otherwise from the whole universe. Answer texts are
    de-duplicated so the returned options are always distinct. When the
    universe is too small the list is shorter than ``distractor_count + 1``.
    """
    others = [question for question in universe if question.id != target.id]
    same_domain = [question for question in others if question.domain == target.domain]
    restricted = len(same_domain) >= distractor_count
    pool = same_domain if restricted else others

    answers = _unique_answers(pool, exclude=target.correct_answer)
    if restricted and len(answers) < distractor_count:
        # Duplicate answer texts inside the domain; widen to the other domains.
        extra = _unique_answers(others, exclude=target.correct_answer)
        picked = shuffle(answers, rng)
        topped_up = shuffle([text for text in extra if text not in answers], rng)
        distractors = (picked + topped_up)[:distractor_count]
    else:
        distractors = shuffle(answers, rng)[:distractor_count]

    if len(distractors) < distractor_count:
        logger.debug(
            "Only %d distractor(s) available for question %s", len(distractors), target.id
        )
    return shuffle([*distractors, target.correct_answer], rng)


def _unique_answers(questions: Iterable[Question], exclude: str) -> list[str]:
    seen: dict[str, None] = {}
    for question in questions:
        if question.correct_answer != exclude:
            seen.setdefault(question.correct_answer, None)
    return list(seen)
