import pytest

from gridkit.src.core.errors import OutOfBounds
from gridkit.src.core.grid import Grid
from gridkit.src.core.neighbors import (
    chebyshev_distance,
    manhattan_distance,
    neighbor_offsets,
)
from gridkit.src.utils import config_loader


def test_corner_orthogonal_neighbors():
    grid = Grid.filled(3, 3, 0)
    assert grid.neighbors(0, 0, include_diagonals=False) == [(1, 0), (0, 1)]


def test_center_orthogonal_order():
    grid = Grid.filled(5, 5, 0)
    assert grid.neighbors(2, 2, include_diagonals=False) == [(1, 2), (3, 2), (2, 1), (2, 3)]


def test_center_with_diagonals():
    grid = Grid.filled(5, 5, 0)
    result = grid.neighbors(2, 2, include_diagonals=True)
    assert len(result) == 8
    assert result == [(1, 2), (3, 2), (2, 1), (2, 3), (1, 1), (1, 3), (3, 1), (3, 3)]


def test_corner_with_diagonals():
    grid = Grid.filled(4, 4, 0)
    assert grid.neighbors(3, 3, include_diagonals=True) == [(2, 3), (3, 2), (2, 2)]


def test_edge_neighbors():
    grid = Grid.filled(3, 3, 0)
    assert grid.neighbors(0, 1, include_diagonals=False) == [(1, 1), (0, 0), (0, 2)]


def test_single_cell_has_no_neighbors():
    assert Grid([[1]]).neighbors(0, 0, include_diagonals=True) == []


def test_neighbors_requires_valid_center():
    grid = Grid.filled(3, 3, 0)
    with pytest.raises(OutOfBounds):
        grid.neighbors(3, 0)
    with pytest.raises(OutOfBounds):
        grid.neighbors(0, -1, include_diagonals=True)


def test_neighbors_default_follows_config():
    grid = Grid.filled(3, 3, 0)
    original = config_loader.INCLUDE_DIAGONALS
    try:
        config_loader.set_include_diagonals(True)
        assert len(grid.neighbors(1, 1)) == 8
        config_loader.set_include_diagonals(False)
        assert len(grid.neighbors(1, 1)) == 4
    finally:
        config_loader.set_include_diagonals(original)


def test_neighbor_offsets():
    assert len(neighbor_offsets()) == 4
    assert neighbor_offsets(True)[:4] == neighbor_offsets(False)


def test_distances():
    assert manhattan_distance((0, 0), (2, 3)) == 5
    assert chebyshev_distance((0, 0), (2, 3)) == 3
    assert manhattan_distance((1, 1), (1, 1)) == 0
