"""Shared fixtures for the tour evolution tests."""

import math
import os
import sys

os.environ.setdefault("MPLBACKEND", "Agg")
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from tour_evolution.core.cities import City, CityTable


@pytest.fixture
def square():
    """Four cities on the corners of a 10x10 square; the best cycle is 40."""
    corners = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    return CityTable(
        [City(id=i, name=name, x=x, y=y) for i, (name, (x, y)) in enumerate(zip("ABCD", corners))]
    )


@pytest.fixture
def circle():
    """Twelve cities evenly spaced on a circle of radius 5."""
    n = 12
    return CityTable(
        [
            City(
                id=i,
                name=f"C{i}",
                x=5.0 * math.cos(2 * math.pi * i / n),
                y=5.0 * math.sin(2 * math.pi * i / n),
            )
            for i in range(n)
        ]
    )
