"""
Tour Evolution

A genetic algorithm that approximates a minimum-length closed tour over a
set of labeled 2-D points (the Traveling Salesman Problem).

Tour lengths always include the closing edge from the last city back to
the first.
"""

from .core.errors import (
    TourEvolutionError,
    InputFormatError,
    InvalidPermutationError,
    EmptyPopulationError,
)
from .core.cities import City, CityTable, parse_cities, load_cities, load_city_files, random_cities
from .core.tour import Tour, length_of, is_valid_permutation
from .core.population import Population
from .config import RunParameters, SelectionKind, CrossoverKind, MutationKind
from .reporting import LoggingReporter, RecordingReporter
from .solvers.genetic import EvolutionEngine, EngineState, RunResult, evolve

__version__ = "1.0.0"

__all__ = [
    "TourEvolutionError",
    "InputFormatError",
    "InvalidPermutationError",
    "EmptyPopulationError",
    "City",
    "CityTable",
    "parse_cities",
    "load_cities",
    "load_city_files",
    "random_cities",
    "Tour",
    "length_of",
    "is_valid_permutation",
    "Population",
    "RunParameters",
    "SelectionKind",
    "CrossoverKind",
    "MutationKind",
    "LoggingReporter",
    "RecordingReporter",
    "EvolutionEngine",
    "EngineState",
    "RunResult",
    "evolve",
]
