"""Tests for the evolution engine and run parameters."""

import pytest

from tour_evolution.config import (
    CrossoverKind,
    MutationKind,
    RunParameters,
    SelectionKind,
)
from tour_evolution.core.errors import EmptyPopulationError
from tour_evolution.core.tour import is_valid_permutation, length_of
from tour_evolution.reporting import LoggingReporter, RecordingReporter
from tour_evolution.solvers.genetic.engine import EngineState, EvolutionEngine, evolve
from tour_evolution.solvers.genetic.selection import TournamentSelection

ALL_POLICIES = [
    (selection, crossover, mutation)
    for selection in SelectionKind
    for crossover in CrossoverKind
    for mutation in MutationKind
]


@pytest.mark.parametrize("selection, crossover, mutation", ALL_POLICIES)
def test_square_converges_to_perimeter(square, selection, crossover, mutation):
    """Any policy combination finds the 40-long perimeter of the square."""
    params = RunParameters(
        population_size=20,
        generations=60,
        mutation_rate=0.2,
        selection=selection,
        crossover=crossover,
        mutation=mutation,
        seed=1,
    )
    result = evolve(square, params)
    assert result.length == 40.0
    assert result.route[0] == result.route[-1]
    assert len(result.route) == 5


def test_zero_generations_reports_initial_fittest(square):
    """With a budget of 0 the initial fittest is returned unchanged."""
    reporter = RecordingReporter()
    engine = EvolutionEngine(
        square, RunParameters(population_size=4, generations=0, seed=3), reporter=reporter
    )
    initial = engine.initialize()
    best = initial.fittest()

    result = engine.run()

    assert result.best is best
    assert result.generations_run == 0
    assert engine.breeder.offspring_count == 0
    assert reporter.checkpoints == []
    assert reporter.final_length == best.length
    assert reporter.final_route == square.names_of(best.order)


@pytest.mark.parametrize("selection, crossover, mutation", ALL_POLICIES)
def test_invariants_hold_through_a_run(circle, selection, crossover, mutation):
    """No operator ever emits an invalid permutation or a stale length."""
    params = RunParameters(
        population_size=15,
        generations=25,
        mutation_rate=0.3,
        selection=selection,
        crossover=crossover,
        mutation=mutation,
        seed=4,
        check_invariants=True,
    )
    engine = EvolutionEngine(circle, params)
    engine.run()
    assert len(engine.population) == 15
    for tour in engine.population:
        assert is_valid_permutation(tour.order, len(circle))
        assert tour.length == length_of(tour.order, circle)


def test_checkpoints_are_reported(circle):
    reporter = RecordingReporter()
    params = RunParameters(population_size=10, generations=100, seed=2)
    result = evolve(circle, params, reporter=reporter)
    assert [g for g, _ in reporter.checkpoints] == [10, 40, 80, 100]
    assert result.history == reporter.checkpoints


def test_final_generation_always_reported(circle):
    reporter = RecordingReporter()
    params = RunParameters(population_size=6, generations=25, checkpoints=(5, 50), seed=2)
    evolve(circle, params, reporter=reporter)
    assert [g for g, _ in reporter.checkpoints] == [5, 25]


@pytest.mark.parametrize("selection", list(SelectionKind))
def test_best_length_never_increases(circle, selection):
    """Both policies keep the best tour, so checkpoint lengths are non-increasing."""
    params = RunParameters(
        population_size=12,
        generations=60,
        checkpoints=tuple(range(1, 61)),
        selection=selection,
        seed=6,
    )
    result = evolve(circle, params)
    lengths = [length for _, length in result.history]
    assert all(b <= a for a, b in zip(lengths, lengths[1:]))


def test_same_seed_same_result(circle):
    params = RunParameters(population_size=10, generations=30, seed=123)
    a = evolve(circle, params)
    b = evolve(circle, params)
    assert a.best.order == b.best.order
    assert a.history == b.history


def test_early_stop_is_checked_between_generations(circle):
    seen = []

    def stop(generation, population):
        seen.append((generation, len(population)))
        return generation >= 3

    params = RunParameters(population_size=8, generations=50, seed=0)
    engine = EvolutionEngine(circle, params, should_stop=stop)
    result = engine.run()

    assert result.stopped_early
    assert result.generations_run == 3
    assert seen == [(0, 8), (1, 8), (2, 8), (3, 8)]
    assert engine.state is EngineState.DONE


def test_state_machine(square):
    engine = EvolutionEngine(square, RunParameters(population_size=4, generations=2, seed=0))
    assert engine.state is EngineState.INITIALIZING
    with pytest.raises(RuntimeError):
        engine.step()
    engine.initialize()
    assert engine.state is EngineState.EVOLVING
    engine.run()
    assert engine.state is EngineState.DONE
    assert engine.generation == 2
    with pytest.raises(RuntimeError):
        engine.run()


def test_selection_override(circle):
    policy = TournamentSelection(tournament_size=3)
    engine = EvolutionEngine(
        circle, RunParameters(population_size=6, generations=3, seed=0), selection=policy
    )
    assert engine.selection is policy
    engine.run()


def test_logging_reporter(square, caplog):
    caplog.set_level("INFO", logger="tour_evolution")
    params = RunParameters(population_size=4, generations=10, seed=0)
    evolve(square, params, reporter=LoggingReporter(square, show_route=True))
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Generation 10: best total distance") for m in messages)
    assert any(m.startswith("Best path:") for m in messages)
    assert any(m.startswith("Total distance:") for m in messages)


def test_zero_population_rejected(square):
    with pytest.raises(EmptyPopulationError):
        EvolutionEngine(square, RunParameters(population_size=0))


@pytest.mark.parametrize(
    "overrides",
    [
        {"generations": -1},
        {"mutation_rate": 1.5},
        {"mutation_rate": -0.1},
        {"checkpoints": (-5,)},
    ],
)
def test_invalid_parameters_rejected(overrides):
    with pytest.raises(ValueError):
        RunParameters(**overrides).validate()


def test_policy_names_accept_strings():
    params = RunParameters(selection="tournament", crossover="segment", mutation="per-position")
    assert params.selection is SelectionKind.TOURNAMENT
    assert params.crossover is CrossoverKind.SEGMENT
    assert params.mutation is MutationKind.PER_POSITION
    with pytest.raises(ValueError):
        RunParameters(selection="roulette")


def test_reporting_generations_within_budget():
    params = RunParameters(generations=50)
    assert params.reporting_generations() == frozenset({10, 40, 50})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
