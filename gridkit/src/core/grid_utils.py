from __future__ import annotations

"""Low-level grid comparison utilities."""

from typing import List

from .grid import Grid


def diff_mask(before: Grid, after: Grid) -> List[List[bool]]:
    """Return a mask marking cells that differ between ``before`` and ``after``.

    The mask covers the union of both extents; cells present in only one
    grid count as differences.
    """
    h1, w1 = before.shape()
    h2, w2 = after.shape()
    h = max(h1, h2)
    w = max(w1, w2)
    mask: List[List[bool]] = [[True for _ in range(w)] for _ in range(h)]
    for r in range(h):
        for c in range(w):
            if before.is_valid(r, c) and after.is_valid(r, c):
                mask[r][c] = before.get(r, c) != after.get(r, c)
    return mask


def match_ratio(left: Grid, right: Grid) -> float:
    """Return ratio of matching cells (1.0 equals perfect match).

    Grids of different shapes never match.
    """
    if left.shape() != right.shape():
        return 0.0
    total = left.count
    if not total:
        return 1.0
    matches = sum(
        1 for r_left, r_right in zip(left.data, right.data) for a, b in zip(r_left, r_right) if a == b
    )
    return matches / total


__all__ = ["diff_mask", "match_ratio"]
