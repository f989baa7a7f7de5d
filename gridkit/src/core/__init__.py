"""Core grid data structures."""

from .errors import GridEncodingError, GridError, InvalidDimensions, OutOfBounds, RaggedInput
from .region import GridRegion
from .grid import Grid
from .grid_utils import diff_mask, match_ratio

__all__ = [
    "Grid",
    "GridRegion",
    "GridError",
    "InvalidDimensions",
    "RaggedInput",
    "OutOfBounds",
    "GridEncodingError",
    "diff_mask",
    "match_ratio",
]
