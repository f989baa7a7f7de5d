"""gridkit: a generic two-dimensional grid container."""

from gridkit.src.core import Grid, GridRegion

__all__ = ["Grid", "GridRegion"]
