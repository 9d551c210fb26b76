"""Uniform random permutation helper."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def shuffle(sequence: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``sequence`` using a Fisher-Yates pass.

    The input is never mutated. ``rng`` defaults to the module-level random
    source; pass a seeded ``random.Random`` for reproducible order.
    """
    source = rng if rng is not None else random
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = source.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
