"""Generic two-dimensional grid container."""

from __future__ import annotations

import copy
from collections import Counter
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from gridkit.src.core.errors import InvalidDimensions, OutOfBounds, RaggedInput
from gridkit.src.core.neighbors import Coord, neighbors_within
from gridkit.src.core.region import GridRegion
from gridkit.src.utils import config_loader
from gridkit.src.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Grid(Generic[T]):
    """Dense rectangular grid of values addressed by ``(row, col)``.

    Cells are stored row-major as a list of lists in :attr:`data`. The grid is
    always fully populated: every coordinate inside ``rows`` x ``columns``
    holds a value. Indexed access is bounds checked and never wraps around,
    so ``grid[-1, 0]`` raises :class:`OutOfBounds` rather than reading the
    last row.

    Parameters
    ----------
    rows:
        Nested sequence of cell values. All inner sequences must have the
        same length, otherwise :class:`RaggedInput` is raised. The input is
        copied; later changes to it do not affect the grid.
    """

    def __init__(self, rows: Sequence[Sequence[T]] = ()):
        data = [list(row) for row in rows]
        width = len(data[0]) if data else 0
        for index, row in enumerate(data):
            if len(row) != width:
                raise RaggedInput(
                    f"Row {index} has length {len(row)}, expected {width}"
                )
        self.data: List[List[T]] = data
        self._rows = len(data)
        self._columns = width

    @classmethod
    def filled(cls, rows: int, columns: int, default: T) -> "Grid[T]":
        """Return a ``rows`` x ``columns`` grid with every cell set to a copy of ``default``."""
        if rows < 0 or columns < 0:
            raise InvalidDimensions(f"Grid dimensions must be non-negative, got {rows}x{columns}")
        data = [[copy.deepcopy(default) for _ in range(columns)] for _ in range(rows)]
        return cls._wrap(data, rows, columns)

    @classmethod
    def _wrap(cls, data: List[List[T]], rows: int, columns: int) -> "Grid[T]":
        grid = cls.__new__(cls)
        grid.data = data
        grid._rows = rows
        grid._columns = columns
        return grid

    # Queries -------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def count(self) -> int:
        """Total number of cells."""
        return self._rows * self._columns

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, columns)."""
        return self._rows, self._columns

    def coords(self) -> Iterator[Coord]:
        """Iterate over all coordinates in row-major order."""
        for r in range(self._rows):
            for c in range(self._columns):
                yield (r, c)

    def value_counts(self) -> Counter:
        """Return a mapping from cell value to number of occurrences."""
        return Counter(value for row in self.data for value in row)

    # Access --------------------------------------------------------------

    def is_valid(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._columns

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid(row, col):
            raise OutOfBounds(row, col, self.shape())

    def get(self, row: int, col: int) -> T:
        """Return the value stored at ``row``, ``col``."""
        self._check(row, col)
        return self.data[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        """Store ``value`` at ``row``, ``col``."""
        self._check(row, col)
        self.data[row][col] = value

    def __getitem__(self, key: Tuple[int, int]) -> T:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        row, col = key
        self.set(row, col, value)

    # Regions and bulk operations -----------------------------------------

    def region(self, start_row: int, start_col: int, height: int, width: int) -> GridRegion:
        """Describe a rectangle of this grid.

        The region is not validated here; :meth:`fill` and :meth:`transform`
        clip it to the bounds the grid has when they run.
        """
        return GridRegion(start_row, start_col, height, width)

    def _clip(self, region: Optional[GridRegion]) -> GridRegion:
        if region is None:
            return GridRegion(0, 0, self._rows, self._columns)
        clipped = region.clipped(self._rows, self._columns)
        if clipped != region:
            logger.debug("Clipped %s to %s for grid of shape %s", region, clipped, self.shape())
        return clipped

    def fill(self, value: T, region: Optional[GridRegion] = None) -> None:
        """Set every in-bounds cell of ``region`` to a copy of ``value``.

        Parts of the region outside the grid are skipped. ``region=None``
        fills the whole grid.
        """
        for r, c in self._clip(region).cells():
            self.data[r][c] = copy.deepcopy(value)

    def transform(self, region: Optional[GridRegion], func: Callable[[T], T]) -> None:
        """Replace each in-bounds cell of ``region`` with ``func(current)``."""
        for r, c in self._clip(region).cells():
            self.data[r][c] = func(self.data[r][c])

    def for_each(self, block: Callable[[int, int, T], Any]) -> None:
        """Call ``block(row, col, value)`` for every cell in row-major order."""
        for r, row in enumerate(self.data):
            for c, value in enumerate(row):
                block(r, c, value)

    # Neighbours ----------------------------------------------------------

    def neighbors(self, row: int, col: int, include_diagonals: Optional[bool] = None) -> List[Coord]:
        """Return in-bounds neighbours of ``row``, ``col``.

        Orthogonal neighbours come first (up, down, left, right) followed by
        the diagonals when ``include_diagonals`` is true. ``None`` uses the
        configured default.
        """
        self._check(row, col)
        if include_diagonals is None:
            include_diagonals = config_loader.INCLUDE_DIAGONALS
        return neighbors_within(row, col, self._rows, self._columns, include_diagonals)

    # Geometric transforms ------------------------------------------------

    def _remap(self, rows: int, columns: int, source: Callable[[int, int], Coord]) -> "Grid[T]":
        data = []
        for r in range(rows):
            new_row = []
            for c in range(columns):
                sr, sc = source(r, c)
                new_row.append(copy.deepcopy(self.data[sr][sc]))
            data.append(new_row)
        return type(self)._wrap(data, rows, columns)

    def rotated_clockwise(self) -> "Grid[T]":
        """Return a new grid rotated 90 degrees clockwise."""
        h = self._rows
        return self._remap(self._columns, h, lambda r, c: (h - 1 - c, r))

    def rotated_counter_clockwise(self) -> "Grid[T]":
        """Return a new grid rotated 90 degrees counter-clockwise."""
        w = self._columns
        return self._remap(w, self._rows, lambda r, c: (c, w - 1 - r))

    def flipped_horizontally(self) -> "Grid[T]":
        """Return a new grid with the column order reversed."""
        w = self._columns
        return self._remap(self._rows, w, lambda r, c: (r, w - 1 - c))

    def flipped_vertically(self) -> "Grid[T]":
        """Return a new grid with the row order reversed."""
        h = self._rows
        return self._remap(h, self._columns, lambda r, c: (h - 1 - r, c))

    def rotate90(self, times: int = 1) -> "Grid[T]":
        """Return a new grid rotated 90 degrees clockwise ``times`` times."""
        times = times % 4
        result = self.copy()
        for _ in range(times):
            result = result.rotated_clockwise()
        return result

    def copy(self) -> "Grid[T]":
        """Return an independent copy of the grid."""
        return self._remap(self._rows, self._columns, lambda r, c: (r, c))

    # Serialization -------------------------------------------------------

    def to_array(self) -> List[List[T]]:
        """Return a deep row-major list copy of the grid data.

        A grid with no rows becomes ``[]`` whatever its column count, so
        ``Grid(g.to_array())`` restores a ``0 x n`` grid as ``0 x 0``. Use
        :func:`gridkit.src.data.grid_codec.encode_grid` to keep both sizes.
        """
        return [[copy.deepcopy(value) for value in row] for row in self.data]

    to_list = to_array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape() == other.shape() and self.data == other.data

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid"]
