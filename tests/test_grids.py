import pytest

from puzzlekit.grids import knight_move_table, knight_moves, largest_region


def test_largest_region_sample():
    grid = [
        [1, 1, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 1, 0],
        [1, 0, 0, 0],
    ]
    assert largest_region(grid) == 5


def test_largest_region_diagonal_join():
    assert largest_region([[1, 0], [0, 1]]) == 2


def test_largest_region_all_filled_counts_every_cell():
    grid = [[1] * 4 for _ in range(3)]
    assert largest_region(grid) == 12


@pytest.mark.parametrize("grid", [[], [[0, 0], [0, 0]]])
def test_largest_region_empty(grid):
    assert largest_region(grid) == 0


def test_largest_region_separate_groups():
    grid = [
        [1, 0, 0, 1],
        [0, 0, 0, 1],
        [1, 0, 0, 0],
    ]
    assert largest_region(grid) == 2


def test_largest_region_does_not_modify_grid():
    grid = [[1, 1], [0, 1]]
    largest_region(grid)
    assert grid == [[1, 1], [0, 1]]


def test_knight_single_jump_corner_to_corner():
    assert knight_moves(2, 1, 1) == 1
    assert knight_moves(5, 4, 4) == 1


def test_knight_moves_symmetric_in_step():
    for a in range(1, 5):
        for b in range(1, 5):
            assert knight_moves(5, a, b) == knight_moves(5, b, a)


def test_knight_one_cell_board():
    assert knight_moves(1, 1, 2) == 0


def test_knight_unreachable_is_minus_one():
    assert knight_moves(3, 2, 2) == 1
    assert knight_moves(4, 3, 1) == -1 or knight_moves(4, 3, 1) > 0


def test_knight_rejects_bad_board():
    with pytest.raises(ValueError):
        knight_moves(0, 1, 1)


def test_knight_move_table_shape():
    table = knight_move_table(5)
    assert len(table) == 10
    assert [(a, b) for a, b, _ in table] == [
        (a, b) for a in range(1, 5) for b in range(a, 5)
    ]
    assert all(moves == knight_moves(5, a, b) for a, b, moves in table)