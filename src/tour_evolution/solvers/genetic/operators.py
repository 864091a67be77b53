"""
Genetic algorithm operators for permutation-based representation.

Provides crossover and mutation operators for evolving tour permutations,
and the Breeder that turns two parent tours into offspring tours. Every
operator returns a valid permutation by construction.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ...core.cities import CityTable
from ...core.tour import Tour, ensure_valid_permutation

Genotype = List[int]


def prefix_crossover(p1: Sequence[int], p2: Sequence[int], cut: int) -> Genotype:
    """
    Single-cut order-preserving crossover.

    The child keeps p1[0..cut] verbatim, then takes the cities of p2 that
    are not yet present, in the order they appear in p2.

    Args:
        p1: First parent (donates the prefix)
        p2: Second parent (donates the order of the rest)
        cut: Last index of the copied prefix, in [0, n)

    Returns:
        Offspring genotype
    """
    child = list(p1[: cut + 1])
    present = set(child)
    child.extend(c for c in p2 if c not in present)
    return child


def segment_crossover(
    p1: Sequence[int], p2: Sequence[int], cut: Tuple[int, int]
) -> Genotype:
    """
    Order crossover (OX) for permutations.

    The child keeps p1[start..end] in place; the remaining positions are
    filled left to right with the cities of p2 not in that segment, in
    p2's order.

    Args:
        p1: First parent
        p2: Second parent
        cut: (start, end) with start <= end, both inclusive

    Returns:
        Offspring genotype
    """
    start, end = cut
    n = len(p1)
    segment = p1[start : end + 1]
    present = set(segment)
    remaining = iter([c for c in p2 if c not in present])

    child: Genotype = []
    for i in range(n):
        if start <= i <= end:
            child.append(p1[i])
        else:
            child.append(next(remaining))
    return child


def random_prefix_cut(n: int, rng: random.Random) -> int:
    return rng.randrange(n)


def random_segment_cut(n: int, rng: random.Random) -> Tuple[int, int]:
    a, b = rng.randrange(n), rng.randrange(n)
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class Crossover:
    """
    A crossover scheme: how to draw a cut and how to combine two parents.

    Both children of a pairing share the same cut, with parent roles
    swapped.
    """

    name: str
    draw_cut: Callable[[int, random.Random], object]
    combine: Callable[[Sequence[int], Sequence[int], object], Genotype]

    def children(
        self, p1: Sequence[int], p2: Sequence[int], rng: random.Random
    ) -> Tuple[Genotype, Genotype]:
        cut = self.draw_cut(len(p1), rng)
        return self.combine(p1, p2, cut), self.combine(p2, p1, cut)

    def child(self, p1: Sequence[int], p2: Sequence[int], rng: random.Random) -> Genotype:
        return self.combine(p1, p2, self.draw_cut(len(p1), rng))


PREFIX_CROSSOVER = Crossover("prefix", random_prefix_cut, prefix_crossover)
SEGMENT_CROSSOVER = Crossover("segment", random_segment_cut, segment_crossover)


def swap_mutation(genotype: Sequence[int], rng: random.Random) -> Genotype:
    """
    Swap mutation: exchange two random positions, unconditionally.

    The two positions are drawn independently and may coincide, in which
    case the genotype is returned unchanged.
    """
    g = list(genotype)
    if not g:
        return g
    i = rng.randrange(len(g))
    j = rng.randrange(len(g))
    g[i], g[j] = g[j], g[i]
    return g


def per_position_mutation(
    genotype: Sequence[int], rng: random.Random, rate: float
) -> Genotype:
    """
    Per-position mutation.

    Each position is, with probability rate, swapped with one other
    position drawn uniformly from the remaining n - 1.

    Args:
        genotype: Input genotype
        rng: Random source
        rate: Per-position mutation probability

    Returns:
        Possibly mutated genotype
    """
    g = list(genotype)
    n = len(g)
    if n < 2:
        return g
    for i in range(n):
        if rng.random() < rate:
            j = rng.randrange(n - 1)
            if j >= i:
                j += 1
            g[i], g[j] = g[j], g[i]
    return g


Mutation = Callable[[Sequence[int], random.Random], Genotype]


class Breeder:
    """
    Produces offspring tours from parent tours.

    Applies crossover, then mutation, then computes the child's length.

    Attributes:
        cities: City table used to evaluate offspring
        crossover: Crossover scheme
        mutation: Mutation operator
        rng: Shared random source of the run
        check_invariants: Validate every offspring permutation
    """

    def __init__(
        self,
        cities: CityTable,
        crossover: Crossover,
        mutation: Mutation,
        rng: random.Random,
        *,
        check_invariants: bool = False,
    ):
        self.cities = cities
        self.crossover = crossover
        self.mutation = mutation
        self.rng = rng
        self.check_invariants = check_invariants
        self.offspring_count = 0

    def _finish(self, genotype: Genotype) -> Tour:
        g = self.mutation(genotype, self.rng)
        if self.check_invariants:
            ensure_valid_permutation(g, len(self.cities))
        self.offspring_count += 1
        return Tour.from_order(g, self.cities)

    def breed_pair(self, p1: Tour, p2: Tour) -> Tuple[Tour, Tour]:
        """Two children sharing one crossover cut."""
        c1, c2 = self.crossover.children(p1.order, p2.order, self.rng)
        return self._finish(c1), self._finish(c2)

    def breed_one(self, p1: Tour, p2: Tour) -> Tour:
        """A single child with p1 as the preserved-block donor."""
        return self._finish(self.crossover.child(p1.order, p2.order, self.rng))
