"""
Tour representation.

A tour is a permutation of city ids interpreted as a closed cycle. Its
length is cached at construction and a Tour is never modified afterwards,
so the cached length always matches the order.
"""

import numbers
import random
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..distance.matrix import closed_tour_length
from .cities import CityTable
from .errors import InvalidPermutationError


def length_of(order: Sequence[int], cities: CityTable) -> float:
    """
    Closed-cycle length of a visiting order.

    Includes the closing edge from the last city back to the first.
    """
    return closed_tour_length(order, cities.distances)


def is_valid_permutation(order: Sequence[int], n: int) -> bool:
    """Check that order holds each of 0..n-1 exactly once."""
    if len(order) != n:
        return False
    seen = set()
    for c in order:
        if not isinstance(c, numbers.Integral) or isinstance(c, bool):
            return False
        if c < 0 or c >= n or c in seen:
            return False
        seen.add(c)
    return True


def ensure_valid_permutation(order: Sequence[int], n: int) -> None:
    """Raise InvalidPermutationError unless order is a permutation of 0..n-1."""
    if not is_valid_permutation(order, n):
        raise InvalidPermutationError(
            f"order of length {len(order)} is not a permutation of 0..{n - 1}"
        )


@dataclass(frozen=True)
class Tour:
    """
    A candidate solution.

    Attributes:
        order: Visiting order, a permutation of city ids
        length: Cached closed-cycle length of order
    """

    order: Tuple[int, ...]
    length: float

    @classmethod
    def from_order(cls, order: Sequence[int], cities: CityTable) -> "Tour":
        """Create a tour and compute its length."""
        order = tuple(int(c) for c in order)
        return cls(order=order, length=length_of(order, cities))

    @classmethod
    def random(cls, cities: CityTable, rng: random.Random) -> "Tour":
        """Uniformly shuffled permutation of 0..n-1."""
        order = list(range(len(cities)))
        rng.shuffle(order)
        return cls.from_order(order, cities)

    def __len__(self) -> int:
        return len(self.order)

    def __repr__(self) -> str:
        return f"Tour(n={len(self.order)}, length={self.length:.2f})"
