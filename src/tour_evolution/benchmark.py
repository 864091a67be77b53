"""
Benchmarking of selection policies.

Runs the engine with each policy over several seeds and aggregates the
best tour lengths.
"""

import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

import numpy as np

from .config import RunParameters, SelectionKind
from .core.cities import CityTable
from .solvers.genetic.engine import evolve


@dataclass
class BenchmarkResult:
    """
    Result of a single run.

    Attributes:
        selection: Selection policy used
        seed: Random seed used
        length: Best tour length found
        elapsed: Wall-clock time of the run in seconds
    """

    selection: SelectionKind
    seed: int | None
    length: float
    elapsed: float


@dataclass
class PolicySummary:
    """
    Aggregated results for one policy across seeds.

    Attributes:
        selection: Selection policy
        n_runs: Number of seeds run
        mean: Mean best length
        std: Standard deviation of best length
        best: Shortest length over all seeds
        time_mean: Mean run time in seconds
    """

    selection: SelectionKind
    n_runs: int
    mean: float
    std: float
    best: float
    time_mean: float


def run_single(cities: CityTable, params: RunParameters) -> BenchmarkResult:
    t0 = time.perf_counter()
    result = evolve(cities, params)
    elapsed = time.perf_counter() - t0
    return BenchmarkResult(
        selection=params.selection,
        seed=params.seed,
        length=result.length,
        elapsed=elapsed,
    )


def summarize(results: Sequence[BenchmarkResult]) -> PolicySummary:
    """Aggregate runs of a single policy."""
    lengths = np.array([r.length for r in results])
    times = np.array([r.elapsed for r in results])
    return PolicySummary(
        selection=results[0].selection,
        n_runs=len(results),
        mean=float(np.mean(lengths)),
        std=float(np.std(lengths)),
        best=float(np.min(lengths)),
        time_mean=float(np.mean(times)),
    )


def compare_policies(
    cities: CityTable,
    base_params: RunParameters,
    seeds: Iterable[int],
    selections: Sequence[SelectionKind] = tuple(SelectionKind),
) -> Dict[SelectionKind, PolicySummary]:
    """
    Run every selection policy on the same instance and seeds.

    Args:
        cities: City table
        base_params: Parameters shared by all runs
        seeds: Random seeds, one run per seed and policy
        selections: Policies to compare

    Returns:
        Summary per policy
    """
    seeds = list(seeds)
    if not seeds:
        raise ValueError("at least one seed is required")

    summaries: Dict[SelectionKind, PolicySummary] = {}
    for selection in selections:
        results: List[BenchmarkResult] = [
            run_single(cities, base_params.with_overrides(selection=selection, seed=seed))
            for seed in seeds
        ]
        summaries[selection] = summarize(results)
    return summaries
