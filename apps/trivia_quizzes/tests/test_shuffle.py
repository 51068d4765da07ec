import random
from collections import Counter

import pytest

from apps.trivia_quizzes.shuffle import make_rng, shuffled_order


@pytest.mark.parametrize("n", [0, 1, 2, 7, 50])
def test_shuffled_order_is_permutation(n):
    order = shuffled_order(n)
    assert len(order) == n
    assert sorted(order) == list(range(n))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        shuffled_order(-1)


def test_same_seed_same_order():
    assert shuffled_order(20, make_rng(42)) == shuffled_order(20, make_rng(42))


def test_make_rng_without_seed():
    assert make_rng(None) is None


def test_all_permutations_about_equally_likely():
    rng = random.Random(1234)
    counts = Counter(tuple(shuffled_order(3, rng)) for _ in range(6000))
    assert len(counts) == 6
    # expected 1000 each; std dev is about 29
    assert all(850 < c < 1150 for c in counts.values())
