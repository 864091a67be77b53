"""Genetic algorithm for closed tours."""

from .operators import (
    Breeder,
    Crossover,
    PREFIX_CROSSOVER,
    SEGMENT_CROSSOVER,
    prefix_crossover,
    segment_crossover,
    swap_mutation,
    per_position_mutation,
)
from .selection import SelectionPolicy, RankPairSelection, TournamentSelection
from .engine import EvolutionEngine, EngineState, RunResult, evolve

__all__ = [
    "Breeder",
    "Crossover",
    "PREFIX_CROSSOVER",
    "SEGMENT_CROSSOVER",
    "prefix_crossover",
    "segment_crossover",
    "swap_mutation",
    "per_position_mutation",
    "SelectionPolicy",
    "RankPairSelection",
    "TournamentSelection",
    "EvolutionEngine",
    "EngineState",
    "RunResult",
    "evolve",
]
