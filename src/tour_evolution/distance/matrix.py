"""
Euclidean distance matrix and closed-tour length helpers.

Every tour is a cycle: its length includes the closing edge from the
last city back to the first.
"""

from typing import Sequence

import numpy as np


def build_distance_matrix(coords: np.ndarray) -> np.ndarray:
    """
    Compute pairwise Euclidean distances.

    Args:
        coords: Array of shape (n, 2) with x, y coordinates

    Returns:
        Array of shape (n, n) with dist[i, j] = |coords[i] - coords[j]|
    """
    coords = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.sqrt(np.sum(np.square(diff), axis=-1))


def closed_tour_length(order: Sequence[int], dist: np.ndarray) -> float:
    """
    Length of the cycle visiting cities in the given order.

    Args:
        order: Sequence of city indices
        dist: Distance matrix

    Returns:
        Sum of consecutive edge lengths plus the closing edge
    """
    if len(order) == 0:
        return 0.0
    idx = np.asarray(order, dtype=np.intp)
    return float(dist[idx, np.roll(idx, -1)].sum())


def swap_delta(order: Sequence[int], i: int, j: int, dist: np.ndarray) -> float:
    """
    Compute cost change from swapping positions i and j in a closed tour.

    Only the edges touching the two positions are re-evaluated.

    Args:
        order: Tour order
        i: First position index
        j: Second position index
        dist: Distance matrix

    Returns:
        Length difference (positive = worse)
    """
    n = len(order)
    if i == j or n < 3:
        return 0.0

    # Edge k joins position k and position k + 1 (mod n)
    edges = {(i - 1) % n, i, (j - 1) % n, j}

    def edge_sum(seq: Sequence[int]) -> float:
        return sum(float(dist[seq[k], seq[(k + 1) % n]]) for k in edges)

    swapped = list(order)
    swapped[i], swapped[j] = swapped[j], swapped[i]
    return edge_sum(swapped) - edge_sum(order)
