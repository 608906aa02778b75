"""
Square matrices built from graphs.

GraphMatrix wraps a numpy array so that a graph projection can be used both
through the engine's cursor protocol (lines and columns) and directly for
numerical work (to_numpy).
"""

from typing import Any, Optional

import numpy as np

from .exceptions import InvalidInputError
from .iterators import Cursor, SliceCursor


class GraphMatrix:
    """
    Square matrix of a given size.

    Attributes:
        default_value (Any): Value of the cells that were never set
    """

    def __init__(self, size: int, default_value: Any = None, dtype: Optional[Any] = object):
        if size <= 0:
            raise InvalidInputError(f"invalid matrix size: {size}")

        self.default_value = default_value
        if dtype is object:
            # fill keeps containers such as lists as single cell values
            self._values = np.empty((size, size), dtype=object)
            self._values.fill(default_value)
        else:
            self._values = np.full((size, size), default_value, dtype=dtype)

    @property
    def size(self) -> int:
        """Number of lines, that is number of columns."""
        return self._values.shape[0]

    def set_value(self, i: int, j: int, value: Any) -> None:
        """Set the value at line i, column j."""
        self._check_index(i)
        self._check_index(j)
        self._values[i, j] = value

    def get_value(self, i: int, j: int) -> Any:
        """Return the value at line i, column j, default value if never set."""
        self._check_index(i)
        self._check_index(j)
        return self._values[i, j]

    def line(self, i: int) -> Cursor[Any]:
        """Return line i as a cursor, from column 0 to size - 1."""
        self._check_index(i)
        return SliceCursor(self._values[i, :].tolist())

    def column(self, j: int) -> Cursor[Any]:
        """Return column j as a cursor, from line 0 to size - 1."""
        self._check_index(j)
        return SliceCursor(self._values[:, j].tolist())

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the values as a numpy array."""
        return self._values.copy()

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise InvalidInputError(f"invalid index {index} for matrix of size {self.size}")
