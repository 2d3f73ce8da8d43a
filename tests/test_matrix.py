import pytest

from algopuzzles.matrix import multiply, saddle_point, transpose

SOURCE_A = [[1, 2, 3], [4, 5, 6]]
SOURCE_B = [[1, 0, 2, 3], [4, 1, 5, 6], [6, 8, 9, 0]]


def test_transpose_source_example():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 0, 1, 2]]
    result = transpose(matrix)
    assert result == [[1, 5, 9], [2, 6, 0], [3, 7, 1], [4, 8, 2]]
    assert transpose(result) == matrix


def test_transpose_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_multiply_identity():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert multiply(SOURCE_B, identity) == SOURCE_B


def test_multiply_shape_and_transpose_rule():
    product = multiply(SOURCE_A, SOURCE_B)
    assert len(product) == 2 and all(len(row) == 4 for row in product)
    assert transpose(product) == multiply(transpose(SOURCE_B), transpose(SOURCE_A))


def test_multiply_entry_is_row_dot_column():
    product = multiply(SOURCE_A, SOURCE_B)
    column = [row[2] for row in SOURCE_B]
    assert product[1][2] == sum(x * y for x, y in zip(SOURCE_A[1], column))


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply(SOURCE_B, SOURCE_A)


def test_saddle_point_source_example():
    matrix = [
        [1, 2, 3, 4, 5],
        [2, 3, 4, 5, 6],
        [3, 4, 5, 6, 7],
        [4, 5, 6, 7, 8],
        [5, 6, 7, 8, 9],
    ]
    assert saddle_point(matrix) == (0, 4)


def test_saddle_point_is_row_max_and_column_min():
    matrix = [[9, 3, 4], [8, 7, 2], [10, 6, 12]]
    found = saddle_point(matrix)
    assert found is not None
    row, col = found
    value = matrix[row][col]
    assert value == max(matrix[row])
    assert value == min(r[col] for r in matrix)


def test_saddle_point_none():
    assert saddle_point([[1, 2], [2, 1]]) is None


def test_saddle_point_tie_in_row_disqualifies():
    assert saddle_point([[5, 5], [9, 9]]) is None


def test_saddle_point_empty():
    assert saddle_point([]) is None