"""
Fixed-size population of tours.
"""

from typing import Iterable, Iterator, List, Tuple

from .errors import EmptyPopulationError
from .tour import Tour


class Population:
    """
    An unordered collection of exactly `size` tours.

    Populations are not modified once built; a new generation is always a
    new Population object.

    Attributes:
        size: Number of members
    """

    def __init__(self, members: Iterable[Tour], size: int | None = None):
        self._members: Tuple[Tour, ...] = tuple(members)
        if size is None:
            size = len(self._members)
        if size < 1:
            raise EmptyPopulationError("population size must be at least 1")
        if len(self._members) != size:
            raise ValueError(
                f"population expects {size} members, got {len(self._members)}"
            )
        self.size = size

    @property
    def members(self) -> Tuple[Tour, ...]:
        return self._members

    def fittest(self) -> Tour:
        """Member with minimum length; the first one seen wins ties."""
        return min(self._members, key=lambda t: t.length)

    def ranked(self) -> List[Tour]:
        """Members sorted by ascending length (stable)."""
        return sorted(self._members, key=lambda t: t.length)

    def insert(self, tour: Tour) -> "Population":
        """
        Return a population in which tour replaces the longest member.

        The size is unchanged. Among equally long members the last one
        seen is replaced.
        """
        members = list(self._members)
        worst = max(range(len(members)), key=lambda i: (members[i].length, i))
        members[worst] = tour
        return Population(members, self.size)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Tour]:
        return iter(self._members)

    def __repr__(self) -> str:
        best = self.fittest().length
        return f"Population(size={self.size}, best={best:.2f})"
