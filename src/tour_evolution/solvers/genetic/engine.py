"""
Evolution engine.

Drives a run through Initializing -> Evolving -> Done. Each generation is
built completely by the selection policy before it replaces the current
one, so no partially built generation is ever visible.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Tuple

from ...config import CrossoverKind, MutationKind, RunParameters, SelectionKind
from ...core.cities import CityTable
from ...core.population import Population
from ...core.tour import Tour, ensure_valid_permutation
from ...reporting import Reporter
from .operators import (
    PREFIX_CROSSOVER,
    SEGMENT_CROSSOVER,
    Breeder,
    Crossover,
    Mutation,
    per_position_mutation,
    swap_mutation,
)
from .selection import RankPairSelection, SelectionPolicy, TournamentSelection

logger = logging.getLogger(__name__)

StopCheck = Callable[[int, Population], bool]


class EngineState(Enum):
    """Lifecycle of an evolution run."""

    INITIALIZING = "initializing"
    EVOLVING = "evolving"
    DONE = "done"


@dataclass
class RunResult:
    """
    Outcome of an evolution run.

    Attributes:
        best: Fittest tour of the last generation
        route: City names of best in visiting order, cycle-closed
        generations_run: Number of completed generations
        history: (generation, best length) at each reported checkpoint
        stopped_early: True if the stop check ended the run
    """

    best: Tour
    route: List[str]
    generations_run: int
    history: List[Tuple[int, float]] = field(default_factory=list)
    stopped_early: bool = False

    @property
    def length(self) -> float:
        return self.best.length


def build_selection(params: RunParameters) -> SelectionPolicy:
    if params.selection is SelectionKind.TOURNAMENT:
        return TournamentSelection()
    return RankPairSelection()


def build_crossover(params: RunParameters) -> Crossover:
    if params.crossover is CrossoverKind.SEGMENT:
        return SEGMENT_CROSSOVER
    return PREFIX_CROSSOVER


def build_mutation(params: RunParameters) -> Mutation:
    if params.mutation is MutationKind.PER_POSITION:
        return partial(per_position_mutation, rate=params.mutation_rate)
    return swap_mutation


class EvolutionEngine:
    """
    Genetic search for a short closed tour.

    The engine owns the city table, the parameters, the random source
    and the current population; nothing is shared between engines.

    Attributes:
        cities: City table of the instance
        params: Run parameters
        state: Current lifecycle state
        generation: Number of completed generations
        population: Current generation (None until initialized)
    """

    def __init__(
        self,
        cities: CityTable,
        params: Optional[RunParameters] = None,
        *,
        reporter: Optional[Reporter] = None,
        should_stop: Optional[StopCheck] = None,
        selection: Optional[SelectionPolicy] = None,
    ):
        """
        Initialize the engine.

        Args:
            cities: City table of the instance
            params: Run parameters (defaults if None)
            reporter: Receives checkpoint and final reports
            should_stop: Called at each generation boundary with the
                generation number and population; True ends the run
            selection: Overrides the policy named in params
        """
        params = params if params is not None else RunParameters()
        params.validate()

        self.cities = cities
        self.params = params
        self.reporter = reporter
        self.should_stop = should_stop
        self.rng = random.Random(params.seed)
        self.selection = selection if selection is not None else build_selection(params)
        self.breeder = Breeder(
            cities,
            build_crossover(params),
            build_mutation(params),
            self.rng,
            check_invariants=params.check_invariants,
        )

        self.state = EngineState.INITIALIZING
        self.generation = 0
        self.population: Optional[Population] = None
        self.history: List[Tuple[int, float]] = []

    def initialize(self) -> Population:
        """Build the initial population of random tours."""
        if self.state is not EngineState.INITIALIZING:
            raise RuntimeError(f"cannot initialize an engine in state {self.state.value}")

        n = len(self.cities)
        tours = []
        for _ in range(self.params.population_size):
            tour = Tour.random(self.cities, self.rng)
            ensure_valid_permutation(tour.order, n)
            tours.append(tour)

        self.population = Population(tours, self.params.population_size)
        self.state = EngineState.EVOLVING
        logger.info(
            "Initialized %d tours over %d cities (selection=%s, crossover=%s, mutation=%s)",
            self.params.population_size,
            n,
            self.selection.name,
            self.breeder.crossover.name,
            self.params.mutation.value,
        )
        return self.population

    def step(self) -> Population:
        """Run one full generation and commit it."""
        if self.state is not EngineState.EVOLVING:
            raise RuntimeError(f"cannot step an engine in state {self.state.value}")

        nxt = self.selection.next_generation(self.population, self.breeder, self.rng)
        self.population = nxt
        self.generation += 1
        logger.debug("Generation %d: best %.4f", self.generation, nxt.fittest().length)
        return nxt

    def fittest(self) -> Tour:
        if self.population is None:
            raise RuntimeError("engine has not been initialized")
        return self.population.fittest()

    def _checkpoint(self) -> None:
        best = self.fittest()
        self.history.append((self.generation, best.length))
        if self.reporter is not None:
            self.reporter.checkpoint(self.generation, best)

    def run(self) -> RunResult:
        """
        Evolve for the configured number of generations.

        Returns:
            RunResult with the fittest tour of the last generation
        """
        if self.state is EngineState.DONE:
            raise RuntimeError("engine has already finished")
        if self.state is EngineState.INITIALIZING:
            self.initialize()

        report_at = self.params.reporting_generations()
        stopped_early = False

        while self.generation < self.params.generations:
            if self.should_stop is not None and self.should_stop(
                self.generation, self.population
            ):
                stopped_early = True
                logger.info("Stopped early after %d generations", self.generation)
                break
            self.step()
            if self.generation in report_at:
                self._checkpoint()

        return self._finish(stopped_early)

    def _finish(self, stopped_early: bool) -> RunResult:
        best = self.fittest()
        route = self.cities.names_of(best.order)
        self.state = EngineState.DONE
        if self.reporter is not None:
            self.reporter.final(best, route)
        return RunResult(
            best=best,
            route=route,
            generations_run=self.generation,
            history=list(self.history),
            stopped_early=stopped_early,
        )


def evolve(
    cities: CityTable,
    params: Optional[RunParameters] = None,
    *,
    reporter: Optional[Reporter] = None,
    should_stop: Optional[StopCheck] = None,
) -> RunResult:
    """Run an EvolutionEngine to completion."""
    engine = EvolutionEngine(cities, params, reporter=reporter, should_stop=should_stop)
    return engine.run()
