"""Tests for crossover and mutation operators."""

import random

import numpy as np
import pytest

from tour_evolution.core.errors import InvalidPermutationError
from tour_evolution.core.tour import Tour, is_valid_permutation, length_of
from tour_evolution.solvers.genetic.operators import (
    PREFIX_CROSSOVER,
    SEGMENT_CROSSOVER,
    Breeder,
    per_position_mutation,
    prefix_crossover,
    segment_crossover,
    swap_mutation,
)


def _random_perm(n, rng):
    perm = list(range(n))
    rng.shuffle(perm)
    return perm


def test_prefix_crossover_example():
    p1 = [0, 1, 2, 3, 4, 5]
    p2 = [5, 4, 3, 2, 1, 0]
    assert prefix_crossover(p1, p2, 2) == [0, 1, 2, 5, 4, 3]
    assert prefix_crossover(p2, p1, 2) == [5, 4, 3, 0, 1, 2]


def test_prefix_crossover_full_cut_copies_parent():
    p1 = [3, 1, 0, 2]
    assert prefix_crossover(p1, [0, 1, 2, 3], 3) == p1


def test_segment_crossover_example():
    p1 = [0, 1, 2, 3, 4, 5, 6]
    p2 = [6, 5, 4, 3, 2, 1, 0]
    assert segment_crossover(p1, p2, (2, 4)) == [6, 5, 2, 3, 4, 1, 0]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 17, 40])
@pytest.mark.parametrize("seed", range(4))
def test_prefix_crossover_valid_for_every_cut(n, seed):
    """Every cut of every random parent pair yields a permutation."""
    rng = random.Random(seed * 1000 + n)
    p1, p2 = _random_perm(n, rng), _random_perm(n, rng)
    for cut in range(n):
        child = prefix_crossover(p1, p2, cut)
        assert is_valid_permutation(child, n)
        assert child[: cut + 1] == p1[: cut + 1]


@pytest.mark.parametrize("n", [1, 2, 3, 6, 11])
@pytest.mark.parametrize("seed", range(4))
def test_segment_crossover_valid_for_every_segment(n, seed):
    rng = random.Random(seed * 1000 + n)
    p1, p2 = _random_perm(n, rng), _random_perm(n, rng)
    for start in range(n):
        for end in range(start, n):
            child = segment_crossover(p1, p2, (start, end))
            assert is_valid_permutation(child, n)
            assert child[start : end + 1] == p1[start : end + 1]


@pytest.mark.parametrize("crossover", [PREFIX_CROSSOVER, SEGMENT_CROSSOVER])
def test_random_cuts_on_large_parents(crossover):
    """Randomized n and cut boundaries always give valid children."""
    rng = random.Random(42)
    for _ in range(200):
        n = rng.randint(1, 300)
        p1, p2 = _random_perm(n, rng), _random_perm(n, rng)
        c1, c2 = crossover.children(p1, p2, rng)
        assert is_valid_permutation(c1, n)
        assert is_valid_permutation(c2, n)


def test_children_share_the_cut():
    """Both children of a pairing use the same cut with roles swapped."""
    p1 = [0, 1, 2, 3, 4, 5, 6, 7]
    p2 = [7, 6, 5, 4, 3, 2, 1, 0]
    rng = random.Random(9)
    c1, c2 = PREFIX_CROSSOVER.children(p1, p2, rng)
    cut = random.Random(9).randrange(8)
    assert c1 == prefix_crossover(p1, p2, cut)
    assert c2 == prefix_crossover(p2, p1, cut)


def test_swap_mutation_changes_at_most_two_positions():
    rng = random.Random(3)
    g = list(range(20))
    for _ in range(100):
        m = swap_mutation(g, rng)
        assert is_valid_permutation(m, 20)
        assert sum(a != b for a, b in zip(g, m)) in (0, 2)


def test_swap_mutation_does_not_modify_input():
    g = [0, 1, 2, 3]
    swap_mutation(g, random.Random(0))
    assert g == [0, 1, 2, 3]


def test_per_position_mutation_rate_zero_is_identity():
    g = list(range(30))
    assert per_position_mutation(g, random.Random(0), rate=0.0) == g


def test_per_position_mutation_rate_one_stays_valid():
    rng = random.Random(1)
    for _ in range(20):
        m = per_position_mutation(list(range(30)), rng, rate=1.0)
        assert is_valid_permutation(m, 30)


class _ScriptedRng:
    """Random source that mutates one chosen position and returns a fixed draw."""

    def __init__(self, mutate_at, draw):
        self.mutate_at = mutate_at
        self.draw = draw
        self.calls = 0

    def random(self):
        hit = self.calls == self.mutate_at
        self.calls += 1
        return 0.0 if hit else 1.0

    def randrange(self, stop):
        assert 0 <= self.draw < stop
        return self.draw


@pytest.mark.parametrize("n", [2, 3, 6])
def test_per_position_mutation_swaps_with_another_position(n):
    """A mutated position is always exchanged with a different position."""
    g = list(range(n))
    for i in range(n):
        for draw in range(n - 1):
            m = per_position_mutation(g, _ScriptedRng(i, draw), rate=0.5)
            assert m != g
            assert sum(a != b for a, b in zip(g, m)) == 2
            assert m[i] != g[i]


def test_per_position_mutation_single_city_is_unchanged():
    assert per_position_mutation([0], random.Random(0), rate=1.0) == [0]


@pytest.mark.parametrize("crossover", [PREFIX_CROSSOVER, SEGMENT_CROSSOVER])
def test_crossover_accepts_numpy_parents(crossover):
    """numpy permutations as parents give children that pass the permutation check."""
    rng = random.Random(0)
    np_rng = np.random.default_rng(0)
    for n in (1, 6, 25):
        c1, c2 = crossover.children(np.arange(n), np_rng.permutation(n), rng)
        assert is_valid_permutation(c1, n)
        assert is_valid_permutation(c2, n)


def test_breeder_children_are_valid_with_fresh_lengths(circle):
    """Offspring are valid permutations whose cached length matches their order."""
    rng = random.Random(7)
    breeder = Breeder(circle, PREFIX_CROSSOVER, swap_mutation, rng, check_invariants=True)
    p1 = Tour.random(circle, rng)
    p2 = Tour.random(circle, rng)
    for _ in range(50):
        for child in (*breeder.breed_pair(p1, p2), breeder.breed_one(p1, p2)):
            assert is_valid_permutation(child.order, len(circle))
            assert child.length == length_of(child.order, circle)
    assert breeder.offspring_count == 150


def test_breeder_invariant_check_catches_broken_operator(circle):
    """The invariant check trips on an operator that drops cities."""

    def lossy(genotype, rng):
        return list(genotype)[:-1]

    rng = random.Random(0)
    breeder = Breeder(circle, PREFIX_CROSSOVER, lossy, rng, check_invariants=True)
    p = Tour.random(circle, rng)
    with pytest.raises(InvalidPermutationError):
        breeder.breed_one(p, p)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
