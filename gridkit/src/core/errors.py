"""Exception types raised by grid operations."""

from __future__ import annotations

from typing import Tuple

__all__ = [
    "GridError",
    "InvalidDimensions",
    "RaggedInput",
    "OutOfBounds",
    "GridEncodingError",
]


class GridError(Exception):
    """Base class for all grid failures."""


class InvalidDimensions(GridError, ValueError):
    """Raised when a grid is requested with a negative row or column count."""


class RaggedInput(GridError, ValueError):
    """Raised when nested input rows do not share a common length."""


class OutOfBounds(GridError, IndexError):
    """Raised when a coordinate falls outside the grid extent."""

    def __init__(self, row: int, column: int, shape: Tuple[int, int]):
        self.row = row
        self.column = column
        self.shape = shape
        super().__init__(
            f"Coordinate ({row}, {column}) is outside grid of shape {shape}"
        )


class GridEncodingError(GridError, TypeError):
    """Raised when a grid cannot be encoded to, or decoded from, a document."""
