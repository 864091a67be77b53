"""
Selection and replacement policies.

A policy turns generation g into generation g+1 using a Breeder. Two
interchangeable policies are provided:

- RankPairSelection: drains a min-heap of the population two tours at a
  time; each pair survives unchanged together with its two children.
- TournamentSelection: keeps the best tour and fills the rest with
  children of binary-tournament winners.
"""

import heapq
import random
from abc import ABC, abstractmethod
from typing import List, Tuple

from ...core.population import Population
from ...core.tour import Tour
from .operators import Breeder


class SelectionPolicy(ABC):
    """Strategy producing the next generation from the current one."""

    name = "base"

    @abstractmethod
    def next_generation(
        self, population: Population, breeder: Breeder, rng: random.Random
    ) -> Population:
        """
        Build the full next generation.

        Args:
            population: Current generation (not modified)
            breeder: Crossover and mutation pipeline
            rng: Random source of the run

        Returns:
            New population of the same size
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RankPairSelection(SelectionPolicy):
    """
    Rank-pair selection with parent carry-over.

    The two shortest remaining tours are popped as a parent pair; both
    parents and both children enter the next generation. Pairing stops
    as soon as the next generation has at least `size` entrants, and the
    longest extras are dropped.
    """

    name = "rank-pair"

    def next_generation(
        self, population: Population, breeder: Breeder, rng: random.Random
    ) -> Population:
        size = population.size
        # Arrival index breaks length ties first-seen-first
        heap: List[Tuple[float, int, Tour]] = [
            (t.length, i, t) for i, t in enumerate(population)
        ]
        heapq.heapify(heap)

        entrants: List[Tour] = []
        while len(entrants) < size:
            _, _, parent1 = heapq.heappop(heap)
            if heap:
                _, _, parent2 = heapq.heappop(heap)
            else:
                parent2 = parent1
            child1, child2 = breeder.breed_pair(parent1, parent2)
            entrants.extend((parent1, parent2, child1, child2))

        if len(entrants) > size:
            entrants = heapq.nsmallest(size, entrants, key=lambda t: t.length)
        return Population(entrants, size)


class TournamentSelection(SelectionPolicy):
    """
    Binary tournament selection with single elitism.

    Attributes:
        tournament_size: Members drawn per tournament (with replacement)
    """

    name = "tournament"

    def __init__(self, tournament_size: int = 2):
        if tournament_size < 1:
            raise ValueError("tournament_size must be at least 1")
        self.tournament_size = tournament_size

    def select(self, population: Population, rng: random.Random) -> Tour:
        """Draw members uniformly with replacement; the shortest wins, first drawn on ties."""
        members = population.members
        contenders = [rng.choice(members) for _ in range(self.tournament_size)]
        return min(contenders, key=lambda t: t.length)

    def next_generation(
        self, population: Population, breeder: Breeder, rng: random.Random
    ) -> Population:
        nxt = [population.fittest()]
        for _ in range(population.size - 1):
            p1 = self.select(population, rng)
            p2 = self.select(population, rng)
            nxt.append(breeder.breed_one(p1, p2))
        return Population(nxt, population.size)

    def __repr__(self) -> str:
        return f"TournamentSelection(tournament_size={self.tournament_size})"
