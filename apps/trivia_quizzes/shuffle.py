# apps/trivia_quizzes/shuffle.py
from __future__ import annotations

import random

__all__ = ["shuffled_order", "make_rng"]


def shuffled_order(n: int, rng: random.Random | None = None) -> list[int]:
    """
    Uniform random permutation of 0..n-1 (Fisher-Yates).
    Position i only ever swaps with a slot in 0..i, so every
    permutation comes out with the same probability.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    rng = rng or random
    order = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        order[i], order[j] = order[j], order[i]
    return order


def make_rng(seed: int | None) -> random.Random | None:
    """Seeded generator for reproducible games; None keeps the module RNG."""
    if seed is None:
        return None
    return random.Random(seed)
