"""Rectangular region descriptors used to scope bulk grid operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class GridRegion:
    """Origin plus extent of a rectangle in grid coordinates.

    A region is plain data: it holds no reference to any grid and is not
    checked against grid bounds when created. Operations that consume a
    region clip it to the bounds of the grid they act on, so the same region
    can be computed once and applied to grids of different sizes. A negative
    ``height`` or ``width`` describes an empty rectangle.
    """

    start_row: int
    start_column: int
    height: int
    width: int

    @property
    def end_row(self) -> int:
        """Exclusive upper row bound."""
        return self.start_row + max(self.height, 0)

    @property
    def end_column(self) -> int:
        """Exclusive upper column bound."""
        return self.start_column + max(self.width, 0)

    @property
    def is_empty(self) -> bool:
        return self.height <= 0 or self.width <= 0

    def contains(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` lies inside the rectangle."""
        return self.start_row <= row < self.end_row and self.start_column <= col < self.end_column

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every coordinate of the rectangle in row-major order."""
        for r in range(self.start_row, self.end_row):
            for c in range(self.start_column, self.end_column):
                yield (r, c)

    def clipped(self, rows: int, columns: int) -> "GridRegion":
        """Return the intersection with a ``rows`` x ``columns`` extent."""
        top = min(max(self.start_row, 0), rows)
        left = min(max(self.start_column, 0), columns)
        bottom = max(min(self.end_row, rows), top)
        right = max(min(self.end_column, columns), left)
        return GridRegion(top, left, bottom - top, right - left)


__all__ = ["GridRegion"]
