"""
Error types raised by the tour evolution package.

Input and configuration problems are fatal and surface before any search
starts. An invalid permutation is an internal defect, never a recoverable
condition.
"""


class TourEvolutionError(Exception):
    """Base class for all errors raised by this package."""


class InputFormatError(TourEvolutionError, ValueError):
    """
    Malformed city input.

    Raised for mismatched coordinate/name row counts, wrong field counts,
    unparsable or non-finite numbers, empty names and unreadable files.

    Attributes:
        source: Name of the offending source (file path or label)
        row: 1-based row number, or None when the error is not row-specific
    """

    def __init__(self, message: str, *, source: str = "", row: int | None = None):
        self.source = source
        self.row = row
        location = source
        if row is not None:
            location = f"{source}:{row}" if source else f"row {row}"
        super().__init__(f"{location}: {message}" if location else message)


class EmptyPopulationError(TourEvolutionError, ValueError):
    """Population size or city count of zero."""


class InvalidPermutationError(TourEvolutionError, AssertionError):
    """A tour order that is not a permutation of 0..n-1."""
