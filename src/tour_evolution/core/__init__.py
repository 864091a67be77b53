"""Core components: City, CityTable, Tour, Population, errors."""

from .errors import (
    TourEvolutionError,
    InputFormatError,
    EmptyPopulationError,
    InvalidPermutationError,
)
from .cities import City, CityTable, parse_cities, load_cities, load_city_files, random_cities
from .tour import Tour, length_of, is_valid_permutation, ensure_valid_permutation
from .population import Population

__all__ = [
    "TourEvolutionError",
    "InputFormatError",
    "EmptyPopulationError",
    "InvalidPermutationError",
    "City",
    "CityTable",
    "parse_cities",
    "load_cities",
    "load_city_files",
    "random_cities",
    "Tour",
    "length_of",
    "is_valid_permutation",
    "ensure_valid_permutation",
    "Population",
]
