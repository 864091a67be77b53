"""
Run parameters for the evolution engine.

Defaults reproduce the classic setup: 250 tours, 2000 generations,
rank-pair selection, single-cut crossover and one swap per child.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from .core.errors import EmptyPopulationError

DEFAULT_CHECKPOINTS: Tuple[int, ...] = (10, 40, 80, 100)


class SelectionKind(Enum):
    """Parent selection and replacement policy."""

    RANK_PAIR = "rank-pair"
    TOURNAMENT = "tournament"


class CrossoverKind(Enum):
    """Which contiguous block of parent A the child keeps."""

    PREFIX = "prefix"  # [0..k]
    SEGMENT = "segment"  # [start..end]


class MutationKind(Enum):
    """Mutation applied to every child after crossover."""

    SWAP = "swap"
    PER_POSITION = "per-position"


@dataclass(frozen=True)
class RunParameters:
    """
    Configuration of one evolution run.

    Attributes:
        population_size: Number of tours per generation
        generations: Number of generations to evolve
        mutation_rate: Per-position probability (per-position mutation only)
        checkpoints: Generations at which progress is reported; the final
            generation is always reported as well
        selection: Selection policy
        crossover: Crossover scheme
        mutation: Mutation policy
        seed: Random seed; None draws fresh entropy
        check_invariants: Validate every offspring permutation
    """

    population_size: int = 250
    generations: int = 2000
    mutation_rate: float = 0.01
    checkpoints: Tuple[int, ...] = field(default=DEFAULT_CHECKPOINTS)
    selection: SelectionKind = SelectionKind.RANK_PAIR
    crossover: CrossoverKind = CrossoverKind.PREFIX
    mutation: MutationKind = MutationKind.SWAP
    seed: int | None = None
    check_invariants: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings for the policy fields
        object.__setattr__(self, "selection", SelectionKind(self.selection))
        object.__setattr__(self, "crossover", CrossoverKind(self.crossover))
        object.__setattr__(self, "mutation", MutationKind(self.mutation))
        object.__setattr__(self, "checkpoints", tuple(sorted(set(self.checkpoints))))

    def validate(self) -> None:
        """Validate parameter ranges."""
        if self.population_size < 1:
            raise EmptyPopulationError("population_size must be at least 1")
        if self.generations < 0:
            raise ValueError("generations must be non-negative")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be in [0, 1]")
        if any(c < 0 for c in self.checkpoints):
            raise ValueError("checkpoints must be non-negative")

    def reporting_generations(self) -> frozenset:
        """Checkpoint generations within the budget, plus the final one."""
        return frozenset(
            [c for c in self.checkpoints if c <= self.generations] + [self.generations]
        )

    def with_overrides(self, **changes) -> "RunParameters":
        return replace(self, **changes)

