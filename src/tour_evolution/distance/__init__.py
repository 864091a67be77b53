"""Distance computations for closed tours."""

from .matrix import build_distance_matrix, closed_tour_length, swap_delta

__all__ = ["build_distance_matrix", "closed_tour_length", "swap_delta"]
