import math
from collections import Counter
from typing import Any, Dict, Optional

import numpy as np

from .errors import GridEncodingError, InvalidDimensions
from .grid import Grid


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes)) or not hasattr(value, "__len__")


def grid_to_ndarray(grid: Grid, dtype: Any = None) -> np.ndarray:
    """Return a 2-D ``np.ndarray`` copy of ``grid`` with shape ``grid.shape()``.

    Grids holding sequence-like cells become ``object`` arrays with one cell
    per element, so nested values never add array dimensions.
    """
    if grid.rows == 0 or grid.columns == 0:
        return np.empty(grid.shape(), dtype=dtype if dtype is not None else float)
    cells = grid.to_array()
    if all(_is_scalar(value) for row in cells for value in row):
        return np.array(cells, dtype=dtype)
    if dtype is not None and np.dtype(dtype) != np.dtype(object):
        raise GridEncodingError(f"Grid with sequence cells cannot be stored as {dtype}")
    arr = np.empty(grid.shape(), dtype=object)
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            arr[r, c] = value
    return arr


def grid_from_ndarray(arr: np.ndarray) -> Grid:
    """Build a :class:`Grid` of Python scalars from a 2-D array."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise InvalidDimensions(f"Expected a 2-D array, got {arr.ndim} dimensions")
    h, w = arr.shape
    if h == 0:
        return Grid.filled(0, w, None)
    return Grid(arr.tolist())


class GridProxy:
    """Lightweight ``np.ndarray`` snapshot of a grid with cached metadata."""

    def __init__(self, grid: Grid, dtype: Any = None):
        self.array = grid_to_ndarray(grid, dtype=dtype)
        self._value_counts: Optional[Dict[Any, int]] = None
        self._entropy: Optional[float] = None

    # ------------------------------------------------------------------
    def shape(self) -> tuple[int, int]:
        return self.array.shape

    def to_grid(self) -> Grid:
        return grid_from_ndarray(self.array)

    # ------------------------------------------------------------------
    def value_counts(self) -> Dict[Any, int]:
        if self._value_counts is None:
            self._value_counts = dict(Counter(self.array.ravel().tolist()))
        return self._value_counts

    def entropy(self) -> float:
        """Shannon entropy (bits) of the value distribution."""
        if self._entropy is None:
            total = self.array.size
            ent = 0.0
            for n in self.value_counts().values():
                p = n / total
                ent -= p * math.log2(p)
            self._entropy = ent
        return self._entropy

    def __getitem__(self, key):
        return self.array[key]


__all__ = ["GridProxy", "grid_to_ndarray", "grid_from_ndarray"]
