#!/usr/bin/env python3
"""
Compare rank-pair and tournament selection on random instances.

Usage:
    python -m experiments.run_selection_comparison --seeds 5
    python -m experiments.run_selection_comparison --hard --crossover segment
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tour_evolution import CrossoverKind, RunParameters, random_cities
from tour_evolution.benchmark import compare_policies

from experiments.configs import BASE_CONFIGS, HARD_CONFIGS


def main():
    parser = argparse.ArgumentParser(description="Compare selection policies")
    parser.add_argument("--seeds", type=int, default=5, help="Seeds per configuration")
    parser.add_argument("--hard", action="store_true", help="Include large instances")
    parser.add_argument(
        "--crossover",
        choices=[k.value for k in CrossoverKind],
        default=CrossoverKind.PREFIX.value,
    )
    args = parser.parse_args()

    configs = list(BASE_CONFIGS) + (list(HARD_CONFIGS) if args.hard else [])

    print("=" * 72)
    print("SELECTION POLICY COMPARISON")
    print("=" * 72)
    for num_cities, population_size, generations in configs:
        cities = random_cities(num_cities, seed=0)
        params = RunParameters(
            population_size=population_size,
            generations=generations,
            crossover=args.crossover,
            checkpoints=(),
        )
        summaries = compare_policies(cities, params, range(args.seeds))
        for selection, s in summaries.items():
            print(
                f"n={num_cities:<4} pop={population_size:<4} gens={generations:<5} "
                f"{selection.value:<11} mean={s.mean:8.2f}±{s.std:<6.2f} "
                f"best={s.best:8.2f} t={s.time_mean:.2f}s"
            )
    print("=" * 72)


if __name__ == "__main__":
    main()
