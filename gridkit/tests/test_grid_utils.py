from gridkit.src.core.grid import Grid
from gridkit.src.core.grid_utils import diff_mask, match_ratio


def test_diff_mask_same_shape():
    before = Grid([[1, 2], [3, 4]])
    after = Grid([[1, 0], [3, 4]])
    assert diff_mask(before, after) == [[False, True], [False, False]]


def test_diff_mask_covers_union_of_extents():
    before = Grid([[1]])
    after = Grid([[1, 2]])
    assert diff_mask(before, after) == [[False, True]]


def test_match_ratio():
    assert match_ratio(Grid([[1, 2], [3, 4]]), Grid([[1, 2], [0, 0]])) == 0.5
    assert match_ratio(Grid([[1]]), Grid([[1, 1]])) == 0.0
    assert match_ratio(Grid([]), Grid([])) == 1.0


def test_rotation_changes_asymmetric_grid():
    grid = Grid([[1, 2], [3, 4]])
    assert match_ratio(grid, grid.rotated_clockwise()) == 0.0
    assert match_ratio(grid, grid.rotate90(4)) == 1.0
