"""
City table for the tour evolution problem.

Cities are read from two parallel sources: one coordinate pair per row
and one display name per row, matched by position.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple

import networkx as nx
import numpy as np

from ..distance.matrix import build_distance_matrix
from .errors import EmptyPopulationError, InputFormatError


@dataclass(frozen=True)
class City:
    """
    A labeled point.

    Attributes:
        id: Index of the city in its table (0..N-1)
        name: Display name
        x: X coordinate
        y: Y coordinate
    """

    id: int
    name: str
    x: float
    y: float


class CityTable:
    """
    Immutable lookup of city coordinates and names.

    The pairwise distance matrix is computed once at construction.
    """

    def __init__(self, cities: Sequence[City]):
        if not cities:
            raise EmptyPopulationError("city table must contain at least one city")
        for i, city in enumerate(cities):
            if city.id != i:
                raise ValueError(f"city at position {i} has id {city.id}")

        self._cities: Tuple[City, ...] = tuple(cities)
        coords = np.array([(c.x, c.y) for c in self._cities], dtype=np.float64)
        self._dist = build_distance_matrix(coords)
        self._dist.setflags(write=False)

    @property
    def distances(self) -> np.ndarray:
        """Read-only pairwise distance matrix."""
        return self._dist

    @property
    def names(self) -> List[str]:
        return [c.name for c in self._cities]

    def distance(self, u: int, v: int) -> float:
        """Euclidean distance between cities u and v."""
        return float(self._dist[u, v])

    def names_of(self, order: Sequence[int]) -> List[str]:
        """
        City names in visiting order, cycle-closed.

        The first name is repeated at the end to show the return leg.
        """
        names = [self._cities[i].name for i in order]
        if names:
            names.append(names[0])
        return names

    def graph(self) -> nx.Graph:
        """Graph with one node per city, carrying 'pos' and 'name' attributes."""
        G = nx.Graph()
        for c in self._cities:
            G.add_node(c.id, pos=(c.x, c.y), name=c.name)
        return G

    def __len__(self) -> int:
        return len(self._cities)

    def __getitem__(self, index: int) -> City:
        return self._cities[index]

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __repr__(self) -> str:
        return f"CityTable(n={len(self._cities)})"


def _strip_trailing_blank(
    coordinate_lines: Iterable[str], name_lines: Iterable[str]
) -> Tuple[List[str], List[str]]:
    coord_rows = [line.rstrip("\r\n") for line in coordinate_lines]
    name_rows = [line.rstrip("\r\n") for line in name_lines]

    # Blank rows past the end of the other source are padding
    for rows, other in ((coord_rows, name_rows), (name_rows, coord_rows)):
        while len(rows) > len(other) and not rows[-1].strip():
            rows.pop()

    # A trailing row is dropped only when it is blank in both sources
    while (
        coord_rows
        and name_rows
        and not coord_rows[-1].strip()
        and not name_rows[-1].strip()
    ):
        coord_rows.pop()
        name_rows.pop()
    return coord_rows, name_rows


def _parse_coordinate(text: str, source: str, row: int) -> float:
    try:
        value = float(text)
    except ValueError:
        raise InputFormatError(
            f"unparsable coordinate {text!r}", source=source, row=row
        ) from None
    if not math.isfinite(value):
        raise InputFormatError(
            f"non-finite coordinate {text!r}", source=source, row=row
        )
    return value


def parse_cities(
    coordinate_lines: Iterable[str],
    name_lines: Iterable[str],
    *,
    coordinates_source: str = "coordinates",
    names_source: str = "names",
) -> CityTable:
    """
    Build a city table from parallel coordinate and name rows.

    Trailing rows blank in both sources are ignored; any other malformed
    row aborts the whole load.

    Args:
        coordinate_lines: Rows of the form "x,y"
        name_lines: Rows holding one display name each
        coordinates_source: Label used in error messages
        names_source: Label used in error messages

    Returns:
        The loaded CityTable

    Raises:
        InputFormatError: On mismatched counts or malformed rows
        EmptyPopulationError: If there are no rows at all
    """
    coord_rows, name_rows = _strip_trailing_blank(coordinate_lines, name_lines)

    if len(coord_rows) != len(name_rows):
        raise InputFormatError(
            f"{len(coord_rows)} coordinate rows but {len(name_rows)} name rows",
            source=f"{coordinates_source}/{names_source}",
        )
    if not coord_rows:
        raise EmptyPopulationError("no cities to load")

    cities: List[City] = []
    for i, (coord_row, name_row) in enumerate(zip(coord_rows, name_rows)):
        row = i + 1
        parts = coord_row.split(",")
        if len(parts) != 2:
            raise InputFormatError(
                f"expected 2 comma-separated fields, got {len(parts)}",
                source=coordinates_source,
                row=row,
            )
        x = _parse_coordinate(parts[0].strip(), coordinates_source, row)
        y = _parse_coordinate(parts[1].strip(), coordinates_source, row)

        name = name_row.strip()
        if not name:
            raise InputFormatError("empty city name", source=names_source, row=row)

        cities.append(City(id=i, name=name, x=x, y=y))

    return CityTable(cities)


def _read_lines(path: Path) -> List[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFormatError(f"cannot read file: {exc}", source=str(path)) from exc


def load_cities(coordinates_path, names_path) -> CityTable:
    """
    Load a city table from a coordinates file and a names file.

    Args:
        coordinates_path: File with one "x,y" row per city
        names_path: File with one name per city

    Returns:
        The loaded CityTable
    """
    coordinates_path = Path(coordinates_path)
    names_path = Path(names_path)
    return parse_cities(
        _read_lines(coordinates_path),
        _read_lines(names_path),
        coordinates_source=str(coordinates_path),
        names_source=str(names_path),
    )


def load_city_files(prefix) -> CityTable:
    """Load '<prefix>_xy.csv' and '<prefix>_name.csv'."""
    prefix = str(prefix)
    return load_cities(f"{prefix}_xy.csv", f"{prefix}_name.csv")


def random_cities(num_cities: int, *, seed: int | None = None, scale: float = 10.0) -> CityTable:
    """
    Generate cities with uniform random coordinates.

    Args:
        num_cities: Number of cities
        seed: Random seed for reproducibility
        scale: Coordinates are drawn from [0, scale)

    Returns:
        CityTable with cities named City1..CityN
    """
    if num_cities < 1:
        raise EmptyPopulationError("num_cities must be at least 1")

    rng = np.random.default_rng(seed)
    coords = rng.random(size=(num_cities, 2)) * scale
    return CityTable(
        [
            City(id=i, name=f"City{i + 1}", x=float(coords[i, 0]), y=float(coords[i, 1]))
            for i in range(num_cities)
        ]
    )
