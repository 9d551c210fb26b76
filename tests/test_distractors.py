import random

import pytest

from conftest import make_question
from dcauto_quiz.core.distractors import generate_options
from dcauto_quiz.core.models import Domain


def test_every_question_gets_four_distinct_options_with_the_answer(universe):
    rng = random.Random(5)
    for question in universe:
        options = generate_options(question, universe, rng)
        assert len(options) == 4
        assert len(set(options)) == 4
        assert question.correct_answer in options


def test_distractors_come_from_same_domain_when_available(universe):
    rng = random.Random(11)
    domain_answers = {q.correct_answer for q in universe if q.domain == Domain.ACI}
    target = next(q for q in universe if q.domain == Domain.ACI)
    for _ in range(25):
        options = generate_options(target, universe, rng)
        assert set(options) <= domain_answers


def test_falls_back_to_other_domains_when_domain_is_small():
    target = make_question("t", Domain.UCS)
    universe = [
        target,
        make_question("u1", Domain.UCS),
        make_question("n1", Domain.NPF),
        make_question("n2", Domain.NPF),
        make_question("a1", Domain.ACI),
    ]
    options = generate_options(target, universe, random.Random(3))
    assert len(options) == 4
    assert target.correct_answer in options
    assert "answer-u1" in options or len({"answer-n1", "answer-n2", "answer-a1"} & set(options)) == 3


def test_duplicate_answer_texts_never_produce_duplicate_options():
    target = make_question("t", Domain.NPF, answer="YANG")
    universe = [
        target,
        make_question("d1", Domain.NPF, answer="JSON"),
        make_question("d2", Domain.NPF, answer="JSON"),
        make_question("d3", Domain.NPF, answer="YANG"),
        make_question("d4", Domain.NPF, answer="XML"),
        make_question("x1", Domain.ACI, answer="APIC"),
        make_question("x2", Domain.ACI, answer="EPG"),
    ]
    for seed in range(20):
        options = generate_options(target, universe, random.Random(seed))
        assert len(options) == len(set(options)) == 4
        assert options.count("YANG") == 1


def test_tops_up_from_other_domains_when_domain_answers_collide():
    target = make_question("t", Domain.NXOS, answer="NX-API")
    universe = [
        target,
        make_question("s1", Domain.NXOS, answer="POAP"),
        make_question("s2", Domain.NXOS, answer="POAP"),
        make_question("s3", Domain.NXOS, answer="POAP"),
        make_question("o1", Domain.UCS, answer="ucsmsdk"),
        make_question("o2", Domain.UCS, answer="Intersight"),
    ]
    options = generate_options(target, universe, random.Random(8))
    assert len(options) == 4
    assert "POAP" in options
    assert {"NX-API", "ucsmsdk", "Intersight"} <= set(options)


@pytest.mark.parametrize("size, expected", [(1, 1), (2, 2), (3, 3)])
def test_tiny_universe_returns_short_option_list(size, expected):
    universe = [make_question(f"q{idx}") for idx in range(size)]
    options = generate_options(universe[0], universe, random.Random(1))
    assert len(options) == expected
    assert universe[0].correct_answer in options


def test_does_not_mutate_universe(universe):
    snapshot = list(universe)
    generate_options(universe[0], universe, random.Random(2))
    assert universe == snapshot
