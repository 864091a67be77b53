"""
Progress reporting collaborators for the evolution engine.
"""

import logging
from typing import List, Protocol, Tuple

from .core.cities import CityTable
from .core.tour import Tour

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives checkpoint and final results from the engine."""

    def checkpoint(self, generation: int, best: Tour) -> None:
        ...

    def final(self, best: Tour, route: List[str]) -> None:
        ...


def format_route(route: List[str]) -> str:
    """Join cycle-closed city names in visiting order."""
    return " -> ".join(route)


class LoggingReporter:
    """
    Reports progress through the standard logging module.

    Attributes:
        cities: City table used to name the checkpoint tours
        show_route: Include the full visiting order at checkpoints
    """

    def __init__(self, cities: CityTable, *, show_route: bool = False):
        self.cities = cities
        self.show_route = show_route

    def checkpoint(self, generation: int, best: Tour) -> None:
        logger.info("Generation %d: best total distance %.2f", generation, best.length)
        if self.show_route:
            logger.info("  Route: %s", format_route(self.cities.names_of(best.order)))

    def final(self, best: Tour, route: List[str]) -> None:
        logger.info("Best path: %s", format_route(route))
        logger.info("Total distance: %.2f", best.length)


class RecordingReporter:
    """Keeps every report in memory."""

    def __init__(self):
        self.checkpoints: List[Tuple[int, float]] = []
        self.final_route: List[str] | None = None
        self.final_length: float | None = None

    def checkpoint(self, generation: int, best: Tour) -> None:
        self.checkpoints.append((generation, best.length))

    def final(self, best: Tour, route: List[str]) -> None:
        self.final_route = list(route)
        self.final_length = best.length
