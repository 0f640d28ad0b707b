"""Tests for the Fisher–Yates shuffle."""

import random
from collections import Counter

from src.related_products.shuffle import fisher_yates_shuffle


class _FixedRandom:
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class TestFisherYatesShuffle:
    def test_returns_permutation(self):
        items = list(range(10))
        shuffled = fisher_yates_shuffle(items, random.Random(5))
        assert sorted(shuffled) == items

    def test_input_not_modified(self):
        items = ["a", "b", "c", "d"]
        fisher_yates_shuffle(items, random.Random(5))
        assert items == ["a", "b", "c", "d"]

    def test_accepts_tuples(self):
        assert sorted(fisher_yates_shuffle(("x", "y", "z"))) == ["x", "y", "z"]

    def test_empty_and_single(self):
        assert fisher_yates_shuffle([]) == []
        assert fisher_yates_shuffle(["only"]) == ["only"]

    def test_same_seed_same_order(self):
        items = list(range(20))
        assert fisher_yates_shuffle(items, random.Random(42)) == fisher_yates_shuffle(
            items, random.Random(42)
        )

    def test_swaps_follow_random_source(self):
        # random() == 0 always swaps position i with position 0
        assert fisher_yates_shuffle(["a", "b", "c", "d"], _FixedRandom(0.0)) == ["b", "c", "d", "a"]
        # random() just below 1 always picks j == i, leaving the order intact
        assert fisher_yates_shuffle(["a", "b", "c", "d"], _FixedRandom(0.999)) == ["a", "b", "c", "d"]

    def test_roughly_uniform(self):
        rng = random.Random(2024)
        firsts = Counter(fisher_yates_shuffle("abc", rng)[0] for _ in range(3000))
        assert set(firsts) == {"a", "b", "c"}
        for count in firsts.values():
            assert 850 < count < 1150
