"""
Command-line entry point.

Usage:
    tour-evolution --cities 30 --generations 500 --seed 7
    tour-evolution --input data/capitals --selection tournament --plot best.png
    tour-evolution --xy cities_xy.csv --names cities_name.csv -v
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import (
    DEFAULT_CHECKPOINTS,
    CrossoverKind,
    MutationKind,
    RunParameters,
    SelectionKind,
)
from .core.cities import CityTable, load_cities, load_city_files, random_cities
from .core.errors import EmptyPopulationError, InputFormatError
from .reporting import LoggingReporter, format_route
from .solvers.genetic.engine import EvolutionEngine

EXIT_PLOT_ERROR = 1
EXIT_INPUT_ERROR = 2


def _parse_checkpoints(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"checkpoints must be comma-separated integers, got {text!r}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tour-evolution",
        description="Approximate a shortest closed tour with a genetic algorithm",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--cities", "-n",
        type=int,
        help="Generate this many random cities",
    )
    source.add_argument(
        "--input", "-i",
        help="Load PREFIX_xy.csv and PREFIX_name.csv",
    )
    source.add_argument(
        "--xy",
        help="Coordinates file (requires --names)",
    )
    parser.add_argument("--names", help="Names file for --xy")
    parser.add_argument(
        "--population", "-p",
        type=int,
        default=250,
        help="Population size (default: 250)",
    )
    parser.add_argument(
        "--generations", "-g",
        type=int,
        default=2000,
        help="Number of generations (default: 2000)",
    )
    parser.add_argument(
        "--mutation-rate",
        type=float,
        default=0.01,
        help="Per-position mutation probability (default: 0.01)",
    )
    parser.add_argument(
        "--selection",
        choices=[k.value for k in SelectionKind],
        default=SelectionKind.RANK_PAIR.value,
    )
    parser.add_argument(
        "--crossover",
        choices=[k.value for k in CrossoverKind],
        default=CrossoverKind.PREFIX.value,
    )
    parser.add_argument(
        "--mutation",
        choices=[k.value for k in MutationKind],
        default=MutationKind.SWAP.value,
    )
    parser.add_argument(
        "--checkpoints",
        type=_parse_checkpoints,
        default=list(DEFAULT_CHECKPOINTS),
        help="Comma-separated generations to report (default: 10,40,80,100)",
    )
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    parser.add_argument("--show-route", action="store_true", help="Print routes at checkpoints")
    parser.add_argument("--plot", help="Save an image of the best tour to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def _load(args: argparse.Namespace) -> CityTable:
    if args.cities is not None:
        return random_cities(args.cities, seed=args.seed)
    if args.input is not None:
        return load_city_files(args.input)
    return load_cities(args.xy, args.names)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.xy is not None and args.names is None:
        parser.error("--xy requires --names")
    if args.names is not None and args.xy is None:
        parser.error("--names is only valid together with --xy")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = RunParameters(
            population_size=args.population,
            generations=args.generations,
            mutation_rate=args.mutation_rate,
            checkpoints=tuple(args.checkpoints),
            selection=args.selection,
            crossover=args.crossover,
            mutation=args.mutation,
            seed=args.seed,
        )
        params.validate()
        cities = _load(args)
    except (InputFormatError, EmptyPopulationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print("=" * 60)
    print("TOUR EVOLUTION")
    print("=" * 60)
    print(f"  Cities:      {len(cities)}")
    print(f"  Population:  {params.population_size}")
    print(f"  Generations: {params.generations}")
    print(f"  Selection:   {params.selection.value}")
    print(f"  Crossover:   {params.crossover.value}")
    print(f"  Mutation:    {params.mutation.value}")
    print(f"  Seed:        {params.seed}")

    engine = EvolutionEngine(
        cities, params, reporter=LoggingReporter(cities, show_route=args.show_route)
    )
    t0 = time.perf_counter()
    result = engine.run()
    elapsed = time.perf_counter() - t0

    print("\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"  Best path:      {format_route(result.route)}")
    print(f"  Total distance: {result.length:.2f}")
    print(f"  Solve time:     {elapsed:.2f}s")
    print("=" * 60)

    if args.plot:
        from .render import save_tour_plot

        try:
            save_tour_plot(cities, result.best.order, args.plot)
        except OSError as exc:
            print(f"Error: cannot save plot to {args.plot}: {exc}", file=sys.stderr)
            return EXIT_PLOT_ERROR
        print(f"Saved plot to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
