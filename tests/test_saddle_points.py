import pytest

from katas.saddle_points import find_saddle_points


def test_identify_single_saddle_point():
    assert find_saddle_points([[9, 8, 7], [5, 3, 2], [6, 6, 7]]) == [(1, 0)]


def test_identify_empty_matrix():
    assert find_saddle_points([[], [], []]) == []


def test_identify_lack_of_saddle_point():
    assert find_saddle_points([[1, 2, 3], [3, 1, 2], [2, 3, 1]]) == []


def test_multiple_saddle_points_in_col():
    result = find_saddle_points([[4, 5, 4], [3, 5, 5], [1, 5, 4]])
    assert sorted(result) == [(0, 1), (1, 1), (2, 1)]


def test_multiple_saddle_points_in_row():
    result = find_saddle_points([[6, 7, 8], [5, 5, 5], [7, 5, 6]])
    assert sorted(result) == [(1, 0), (1, 1), (1, 2)]


def test_identify_bottom_right_saddle_point():
    assert find_saddle_points([[8, 7, 9], [6, 7, 6], [3, 2, 5]]) == [(2, 2)]


def test_non_square_matrix_high():
    assert find_saddle_points([[1, 5], [3, 6], [2, 7], [3, 8]]) == [(0, 1)]


def test_non_square_matrix_wide():
    assert sorted(find_saddle_points([[3, 1, 3], [3, 2, 4]])) == [(0, 0), (0, 2)]


def test_single_column_matrix():
    assert find_saddle_points([[2], [1], [4], [1]]) == [(1, 0), (3, 0)]


def test_single_row_matrix():
    assert find_saddle_points([[2, 5, 3, 5]]) == [(0, 1), (0, 3)]


def test_matrix_without_rows_is_rejected():
    with pytest.raises(IndexError):
        find_saddle_points([])