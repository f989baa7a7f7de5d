from gridkit.src.core.grid import Grid
from gridkit.src.core.region import GridRegion


def test_region_is_not_validated_on_creation():
    grid = Grid.filled(2, 2, 0)
    region = grid.region(-5, 10, 3, 4)
    assert region == GridRegion(-5, 10, 3, 4)


def test_fill_region_inside_grid():
    grid = Grid.filled(3, 3, 0)
    grid.fill(1, grid.region(1, 1, 2, 2))
    assert grid.to_array() == [[0, 0, 0], [0, 1, 1], [0, 1, 1]]


def test_fill_clips_oversized_region():
    grid = Grid.filled(5, 5, 0)
    grid.fill(9, grid.region(-2, -2, 10, 10))
    assert grid.shape() == (5, 5)
    assert all(grid.get(r, c) == 9 for r, c in grid.coords())


def test_fill_partial_overlap():
    grid = Grid.filled(3, 3, 0)
    grid.fill(5, grid.region(2, -1, 4, 2))
    assert grid.to_array() == [[0, 0, 0], [0, 0, 0], [5, 0, 0]]


def test_fill_disjoint_region_is_noop():
    grid = Grid.filled(3, 3, 0)
    grid.fill(5, grid.region(10, 10, 2, 2))
    grid.fill(5, grid.region(-4, 0, 2, 2))
    assert grid == Grid.filled(3, 3, 0)


def test_fill_without_region_fills_everything():
    grid = Grid.filled(2, 2, 0)
    grid.fill(3)
    assert grid == Grid.filled(2, 2, 3)


def test_fill_copies_value_per_cell():
    grid = Grid.filled(1, 2, None)
    grid.fill([])
    grid.get(0, 0).append(1)
    assert grid.get(0, 1) == []


def test_transform_region():
    grid = Grid([[1, 2, 3], [4, 5, 6]])
    grid.transform(grid.region(0, 1, 5, 5), lambda v: v * 10)
    assert grid.to_array() == [[1, 20, 30], [4, 50, 60]]


def test_region_reused_across_grids():
    region = GridRegion(0, 0, 2, 2)
    small = Grid.filled(1, 1, 0)
    large = Grid.filled(3, 3, 0)
    small.fill(1, region)
    large.fill(1, region)
    assert small.to_array() == [[1]]
    assert large.to_array() == [[1, 1, 0], [1, 1, 0], [0, 0, 0]]


def test_negative_extent_is_empty():
    grid = Grid.filled(2, 2, 0)
    region = grid.region(0, 0, -1, 2)
    assert region.is_empty
    assert list(region.cells()) == []
    grid.fill(1, region)
    assert grid == Grid.filled(2, 2, 0)


def test_region_helpers():
    region = GridRegion(1, 2, 2, 3)
    assert region.end_row == 3
    assert region.end_column == 5
    assert region.contains(1, 2)
    assert region.contains(2, 4)
    assert not region.contains(3, 2)
    assert list(GridRegion(0, 0, 1, 2).cells()) == [(0, 0), (0, 1)]


def test_clipped():
    assert GridRegion(-2, -2, 10, 10).clipped(5, 5) == GridRegion(0, 0, 5, 5)
    assert GridRegion(3, 1, 4, 1).clipped(5, 5) == GridRegion(3, 1, 2, 1)
    assert GridRegion(7, 7, 2, 2).clipped(5, 5).is_empty
    assert GridRegion(-5, 0, 2, 2).clipped(5, 5).is_empty
