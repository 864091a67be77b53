"""
Instance configurations for experiments.

Defines standard configurations for comparing selection policies.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class InstanceConfig:
    """
    Configuration for a random instance and its run budget.

    Attributes:
        num_cities: Number of cities
        population_size: Tours per generation
        generations: Number of generations
    """

    num_cities: int
    population_size: int
    generations: int

    def __iter__(self):
        """Allow unpacking as tuple."""
        return iter((self.num_cities, self.population_size, self.generations))


BASE_CONFIGS: List[InstanceConfig] = [
    InstanceConfig(10, 50, 200),
    InstanceConfig(25, 100, 500),
    InstanceConfig(50, 250, 1000),
]

HARD_CONFIGS: List[InstanceConfig] = [
    InstanceConfig(100, 250, 2000),
    InstanceConfig(200, 250, 2000),
]

