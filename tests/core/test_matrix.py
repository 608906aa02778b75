"""
Tests for graph matrices.
"""

import numpy as np
import pytest

from nodal.core.exceptions import InvalidInputError
from nodal.core.iterators import collect
from nodal.core.matrix import GraphMatrix


def test_default_values():
    """Test cells never set hold the default value."""
    matrix = GraphMatrix(3, 0, dtype=int)
    assert matrix.size == 3
    assert matrix.get_value(2, 1) == 0
    assert matrix.to_numpy().dtype == np.dtype(int)


def test_lines_and_columns():
    """Test lines and columns are read in index order."""
    matrix = GraphMatrix(2, 0.0, dtype=float)
    matrix.set_value(0, 1, 1.5)
    matrix.set_value(1, 0, 2.5)

    assert collect(matrix.line(0)) == [0.0, 1.5]
    assert collect(matrix.column(0)) == [0.0, 2.5]


def test_object_matrix_holds_containers():
    """Test object matrices keep lists as single values."""
    matrix = GraphMatrix(2, [])
    matrix.set_value(0, 0, ["link"])
    assert matrix.get_value(0, 0) == ["link"]
    assert matrix.get_value(1, 1) == []


def test_to_numpy_is_a_copy():
    """Test changes to the exported array do not affect the matrix."""
    matrix = GraphMatrix(2, 0, dtype=int)
    array = matrix.to_numpy()
    array[0, 0] = 10
    assert matrix.get_value(0, 0) == 0


@pytest.mark.parametrize("size", [0, -2])
def test_invalid_size(size):
    """Test matrix size must be positive."""
    with pytest.raises(InvalidInputError):
        GraphMatrix(size)


def test_invalid_indexes():
    """Test out of range indexes."""
    matrix = GraphMatrix(2, 0)
    with pytest.raises(InvalidInputError):
        matrix.get_value(2, 0)
    with pytest.raises(InvalidInputError):
        matrix.set_value(0, -1, 1)
    with pytest.raises(InvalidInputError):
        matrix.line(5)
    with pytest.raises(InvalidInputError):
        matrix.column(-1)
