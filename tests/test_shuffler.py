import random
from collections import Counter

from dcauto_quiz.core.shuffler import shuffle


def test_shuffle_returns_permutation_and_leaves_input_untouched():
    original = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    snapshot = list(original)
    result = shuffle(original, random.Random(7))
    assert original == snapshot
    assert result is not original
    assert len(result) == len(original)
    assert Counter(result) == Counter(original)


def test_shuffle_handles_empty_and_single_element():
    assert shuffle([]) == []
    assert shuffle(["only"]) == ["only"]


def test_shuffle_accepts_tuples_and_returns_list():
    result = shuffle(("a", "b", "c"), random.Random(0))
    assert isinstance(result, list)
    assert sorted(result) == ["a", "b", "c"]


def test_shuffle_is_deterministic_for_a_seed():
    items = list(range(20))
    assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))


def test_shuffle_reaches_every_ordering_of_three_items():
    rng = random.Random(99)
    seen = {tuple(shuffle([1, 2, 3], rng)) for _ in range(300)}
    assert len(seen) == 6
