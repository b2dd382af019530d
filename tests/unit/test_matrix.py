"""Tests for the jagged matrix editing helpers."""

import pytest

from utilkit.matrix import (
    add_column,
    column_count,
    is_rectangular,
    is_square,
    move_cell,
    move_column,
    remove_column,
    resolve_index,
    to_rectangular,
    to_square,
)


def test_resolve_index():
    assert resolve_index(4, 1) == 1
    assert resolve_index(4, -1) == 3
    assert resolve_index(4, -4) == 0
    # not clamped
    assert resolve_index(2, -3) == -1


# add_column


def test_add_column_inserts_single_value_in_every_row():
    matrix = [[1, 2, 3], [4, 5, 6]]
    assert add_column(matrix, 1, 10) == [[1, 10, 2, 3], [4, 10, 5, 6]]


def test_add_column_negative_index_inserts_before_last():
    assert add_column([[1, 2, 3]], -1, 10) == [[1, 2, 10, 3]]


def test_add_column_at_end_and_start():
    matrix = [[1, 2], [3, 4]]
    assert add_column(matrix, 2, 0) == [[1, 2, 0], [3, 4, 0]]
    assert add_column(matrix, 0, 0) == [[0, 1, 2], [0, 3, 4]]
    assert add_column(matrix, -2, 0) == [[0, 1, 2], [0, 3, 4]]


def test_add_column_uses_per_row_values():
    matrix = [[1, 2], [3, 4], [5, 6]]
    assert add_column(matrix, 1, [7, 8, 9]) == [[1, 7, 2], [3, 8, 4], [5, 9, 6]]


def test_add_column_short_value_list_pads_with_none():
    matrix = [[1], [2]]
    assert add_column(matrix, 1, (9,)) == [[1, 9], [2, None]]


def test_add_column_defaults_to_none():
    assert add_column([[1, 2]], 1) == [[1, None, 2]]


def test_add_column_empty_matrix_returns_empty():
    assert add_column([], 5, 1) == []


def test_add_column_handles_jagged_rows():
    matrix = [[1, 2, 3], [4]]
    assert add_column(matrix, 1, 0) == [[1, 0, 2, 3], [4, 0]]


def test_add_column_out_of_range_names_row():
    matrix = [[1, 2, 3], [4]]
    with pytest.raises(IndexError, match="row 1"):
        add_column(matrix, 2, 0)
    with pytest.raises(IndexError, match="row 1"):
        add_column(matrix, -2, 0)


def test_add_column_does_not_mutate_input():
    matrix = [[1, 2], [3, 4]]
    result = add_column(matrix, 1, 0)
    assert matrix == [[1, 2], [3, 4]]
    assert result[0] is not matrix[0]


# remove_column


def test_remove_column():
    assert remove_column([[1, 2, 3], [4, 5, 6]], 0) == [[2, 3], [5, 6]]


def test_remove_column_negative_index():
    assert remove_column([[1, 2, 3], [4, 5, 6, 7]], -1) == [[1, 2], [4, 5, 6]]


def test_remove_column_raises_on_empty_matrix():
    with pytest.raises(IndexError, match="at least one row"):
        remove_column([], 0)


def test_remove_column_out_of_range_names_row():
    matrix = [[1, 2, 3], [4, 5]]
    with pytest.raises(IndexError, match="row 1"):
        remove_column(matrix, 2)
    with pytest.raises(IndexError, match="row 0"):
        remove_column(matrix, -3)


def test_remove_column_does_not_mutate_input():
    matrix = [[1, 2], [3, 4]]
    remove_column(matrix, 0)
    assert matrix == [[1, 2], [3, 4]]


def test_add_then_remove_column_restores_content():
    matrix = [[1, 2, 3], [4, 5]]
    for index in range(3):
        assert remove_column(add_column(matrix, index, "x"), index) == matrix


# move_column


def test_move_column_forward():
    assert move_column([[1, 2, 3, 4]], 1, 3) == [[1, 3, 4, 2]]


def test_move_column_backward():
    assert move_column([[1, 2, 3, 4], [5, 6, 7, 8]], 3, 0) == [[4, 1, 2, 3], [8, 5, 6, 7]]


def test_move_column_same_index_returns_input_object():
    matrix = [[1, 2, 3]]
    assert move_column(matrix, 1, 1) is matrix


def test_move_column_equivalent_indices_take_general_path():
    matrix = [[1, 2, 3, 4]]
    result = move_column(matrix, -1, 3)
    assert result == matrix
    assert result is not matrix


def test_move_column_negative_indices_resolve_per_row():
    matrix = [[1, 2, 3], [4, 5, 6, 7]]
    assert move_column(matrix, -1, 0) == [[3, 1, 2], [7, 4, 5, 6]]


def test_move_column_raises_on_empty_matrix():
    with pytest.raises(IndexError):
        move_column([], 0, 1)


def test_move_column_out_of_range_from_index():
    array = [[1, 2, 3, 4], [5, 6, 7, 8]]
    with pytest.raises(IndexError, match="^Index out of range for row 0"):
        move_column(array, 4, 1)


def test_move_column_out_of_range_to_index():
    array = [[1, 2, 3, 4], [5, 6, 7]]
    with pytest.raises(IndexError, match="^To index out of range for row 1"):
        move_column(array, 0, 3)
    with pytest.raises(IndexError, match="To index"):
        move_column(array, 1, -4)


# move_cell


@pytest.fixture
def grid():
    return [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_move_cell_within_row(grid):
    assert move_cell(grid, 0, 1, 0, 2) == [[1, 3, 2], [4, 5, 6], [7, 8, 9]]


def test_move_cell_within_column_inserts(grid):
    assert move_cell(grid, 1, 0, 2, 0) == [[1, 2, 3], [5, 6], [4, 7, 8, 9]]


def test_move_cell_to_other_row(grid):
    assert move_cell(grid, 0, 1, 2, 0) == [[1, 3], [4, 5, 6], [2, 7, 8, 9]]


def test_move_cell_negative_destination_resolved_before_removal(grid):
    assert move_cell(grid, 0, 0, 0, -1) == [[2, 3, 1], [4, 5, 6], [7, 8, 9]]


def test_move_cell_negative_source(grid):
    assert move_cell(grid, 0, -1, 0, 0) == [[3, 1, 2], [4, 5, 6], [7, 8, 9]]
    assert move_cell(grid, -1, -1, -1, 0) == [[1, 2, 3], [4, 5, 6], [9, 7, 8]]


def test_move_cell_same_position_keeps_content(grid):
    assert move_cell(grid, 1, 1, 1, 1) == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_move_cell_grows_one_row():
    assert move_cell([[1, 2, 3], [4, 5, 6]], 0, 0, 2, 0) == [[2, 3], [4, 5, 6], [1]]


def test_move_cell_grows_several_rows():
    assert move_cell([[1, 2, 3], [4, 5, 6]], 0, 0, 3, 0) == [[2, 3], [4, 5, 6], [], [1]]


def test_move_cell_grows_columns_with_default():
    matrix = [[1, 2, 3], [4, 5, 6]]
    assert move_cell(matrix, 0, 0, 0, 3, 0) == [[2, 3, 0, 1], [4, 5, 6]]
    assert move_cell(matrix, 0, 0, 1, 5, 0) == [[2, 3], [4, 5, 6, 0, 0, 1]]


def test_move_cell_growth_pads_new_row():
    assert move_cell([[1]], 0, 0, 1, 2, "-") == [[], ["-", "-", 1]]


def test_move_cell_at_row_end_inserts():
    assert move_cell([[1, 2], [3]], 0, 0, 1, 1) == [[2], [3, 1]]


def test_move_cell_shares_untouched_rows(grid):
    result = move_cell(grid, 0, 0, 1, 0)
    assert result[2] is grid[2]
    assert result[0] is not grid[0]
    assert result[1] is not grid[1]
    assert grid == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_move_cell_raises_on_empty_matrix():
    with pytest.raises(IndexError):
        move_cell([], 0, 0, 0, 0)


@pytest.mark.parametrize(
    "from_row, from_column",
    [(2, 0), (0, 3), (-3, 0), (0, -3)],
)
def test_move_cell_source_out_of_range(from_row, from_column):
    with pytest.raises(IndexError):
        move_cell([[1, 2, 3], [4, 5, 6]], from_row, from_column, 0, 0)


def test_move_cell_source_row_error_names_index():
    with pytest.raises(IndexError, match="From row index 2 out of range"):
        move_cell([[1, 2, 3], [4, 5, 6]], 2, 0, 0, 0)
    with pytest.raises(IndexError, match="From row index -3 out of range"):
        move_cell([[1, 2, 3], [4, 5, 6]], -3, 0, 0, 0)


def test_move_cell_negative_destination_out_of_range():
    with pytest.raises(IndexError, match="Destination row"):
        move_cell([[1, 2]], 0, 0, -2, 0)
    with pytest.raises(IndexError, match="Destination column"):
        move_cell([[1, 2]], 0, 0, 0, -3)


# to_rectangular / to_square


def test_to_rectangular_keeps_rectangular_matrix(grid):
    assert to_rectangular(grid) == grid


def test_to_rectangular_pads_rows():
    matrix = [[1, 2], [3], [4, 5, 6, 7]]
    assert to_rectangular(matrix, 0) == [[1, 2, 0, 0], [3, 0, 0, 0], [4, 5, 6, 7]]
    assert to_rectangular(matrix, 10) == [[1, 2, 10, 10], [3, 10, 10, 10], [4, 5, 6, 7]]


def test_to_rectangular_defaults_to_none():
    assert to_rectangular([[1], []]) == [[1], [None]]


def test_to_rectangular_empty_matrix():
    assert to_rectangular([]) == []


def test_to_rectangular_is_idempotent():
    matrix = [[1, 2], [3], [4, 5, 6, 7]]
    once = to_rectangular(matrix, 0)
    assert to_rectangular(once, 0) == once
    assert matrix == [[1, 2], [3], [4, 5, 6, 7]]


def test_to_square_keeps_square_matrix(grid):
    assert to_square(grid) == grid


def test_to_square_empty_matrix():
    assert to_square([]) == []


def test_to_square_adds_rows():
    matrix = [[1, 2], [3], [4, 5, 6, 7]]
    assert to_square(matrix, 0) == [[1, 2, 0, 0], [3, 0, 0, 0], [4, 5, 6, 7], [0, 0, 0, 0]]


def test_to_square_added_rows_are_independent():
    result = to_square([[1, 2, 3]], 0)
    result[1][0] = 99
    assert result[2] == [0, 0, 0]


def test_to_square_never_trims_extra_rows():
    # more rows than columns comes back rectangular only
    matrix = [[1], [2, 3], [4]]
    result = to_square(matrix, 0)
    assert result == [[1, 0], [2, 3], [4, 0]]
    assert not is_square(result)


def test_to_square_is_idempotent():
    once = to_square([[1, 2], [3], [4, 5, 6, 7]], 0)
    assert to_square(once, 0) == once


def test_shape_predicates():
    assert is_rectangular([])
    assert is_rectangular([[1, 2], [3, 4], [5, 6]])
    assert not is_rectangular([[1], [2, 3]])
    assert is_square([[1, 2], [3, 4]])
    assert not is_square([[1, 2]])
    assert column_count([[1, 2], [3, 4]]) == 2
    assert column_count([[1], [2, 3]]) is None
    assert column_count([]) is None
