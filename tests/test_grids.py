import pytest

from problemset.grids import best_coordinate, shortest_bridge


def test_bridge_diagonal_islands():
    assert shortest_bridge([[0, 1], [1, 0]]) == 1


def test_bridge_corner_islands():
    assert shortest_bridge([[0, 1, 0], [0, 0, 0], [0, 0, 1]]) == 2


@pytest.mark.parametrize("gap", range(0, 5))
def test_bridge_across_a_row_gap(gap):
    size = gap + 2
    grid = [[0] * size for _ in range(size)]
    grid[0][0] = 1
    grid[0][size - 1] = 1
    if gap == 0:
        # two adjacent cells form a single island
        assert shortest_bridge(grid) == gap
    else:
        assert shortest_bridge(grid) == gap


def test_bridge_is_symmetric_under_transpose():
    grid = [
        [1, 1, 0, 0, 0],
        [1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0],
        [0, 0, 0, 1, 1],
        [0, 0, 0, 1, 0],
    ]
    transposed = [list(column) for column in zip(*grid)]
    assert shortest_bridge(grid) == shortest_bridge(transposed)


def test_bridge_does_not_modify_input():
    grid = [[0, 1, 0], [0, 0, 0], [0, 0, 1]]
    snapshot = [list(row) for row in grid]
    shortest_bridge(grid)
    assert grid == snapshot


def test_bridge_rejects_non_square_grid():
    with pytest.raises(ValueError):
        shortest_bridge([[0, 1, 0], [1, 0, 0]])


def test_best_coordinate_worked_example():
    assert best_coordinate([[1, 2, 5], [2, 1, 7], [3, 1, 9]], 2) == [2, 1]


def test_best_coordinate_single_tower_is_its_position():
    assert best_coordinate([[23, 11, 21]], 9) == [23, 11]


def test_best_coordinate_tie_prefers_smallest_coordinates():
    towers = [[5, 5, 3], [1, 1, 3]]
    assert best_coordinate(towers, 0) == [1, 1]


def test_best_coordinate_without_signal_defaults_to_origin():
    towers = [[4, 7, 0], [6, 9, 0]]
    assert best_coordinate(towers, 3) == [0, 0]


def test_best_coordinate_without_towers_defaults_to_origin():
    assert best_coordinate([], 5) == [0, 0]


def test_best_coordinate_lies_within_bounding_box():
    towers = [[1, 2, 13], [2, 1, 7], [0, 1, 9]]
    x, y = best_coordinate(towers, 2)
    assert min(t[0] for t in towers) <= x <= max(t[0] for t in towers)
    assert min(t[1] for t in towers) <= y <= max(t[1] for t in towers)