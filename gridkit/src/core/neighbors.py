"""Neighbourhood offsets and grid distance metrics."""

from __future__ import annotations

from typing import List, Tuple

Coord = Tuple[int, int]

# ---------------------------------------------------------------------------
# Canonical offsets
# ---------------------------------------------------------------------------

# up, down, left, right
ORTHOGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def neighbor_offsets(include_diagonals: bool = False) -> Tuple[Coord, ...]:
    """Return the offsets of a 4- or 8-connected neighbourhood in canonical order."""
    if include_diagonals:
        return ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS
    return ORTHOGONAL_OFFSETS


def neighbors_within(
    row: int, col: int, rows: int, columns: int, include_diagonals: bool = False
) -> List[Coord]:
    """Return neighbours of ``(row, col)`` that fall inside a ``rows`` x ``columns`` extent.

    Cells on an edge or corner simply have fewer neighbours; there is no
    wraparound.
    """

    result: List[Coord] = []
    for dr, dc in neighbor_offsets(include_diagonals):
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < columns:
            result.append((nr, nc))
    return result


# ---------------------------------------------------------------------------
# Distance metrics
# ---------------------------------------------------------------------------

def manhattan_distance(a: Coord, b: Coord) -> int:
    """Number of orthogonal steps between ``a`` and ``b``."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev_distance(a: Coord, b: Coord) -> int:
    """Number of king moves between ``a`` and ``b``."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


__all__ = [
    "Coord",
    "ORTHOGONAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "neighbor_offsets",
    "neighbors_within",
    "manhattan_distance",
    "chebyshev_distance",
]
