"""Injective mapping from unhashable values to increasing integer indexes."""

from typing import Callable, Dict, Generic, List, Optional, TypeVar

from .iterators import Cursor, SliceCursor

V = TypeVar("V")


class IncreasingMapping(Generic[V]):
    """
    Arena assigning increasing indexes to values compared by equality.

    Indexes are never reused: removing a value leaves a hole, the next value
    gets a brand new index. Use to_increasing_indexes to get a contiguous
    numbering of the live values.

    Attributes:
        equals (Callable[[V, V], bool]): Returns True when two values are the same
        max_index (int): Index given to the next new value
    """

    def __init__(self, equals: Callable[[V, V], bool]):
        self.equals = equals
        self.max_index = 0
        self._values: Dict[int, V] = {}

    def add_value(self, value: V) -> int:
        """Add value if not already there, and return its index."""
        index = self.get_index(value)
        if index is not None:
            return index

        index = self.max_index
        self._values[index] = value
        self.max_index = index + 1
        return index

    def get_index(self, value: V) -> Optional[int]:
        """Return the index of value, None if not found."""
        for index, current in self._values.items():
            if self.equals(current, value):
                return index
        return None

    def get_value(self, index: int) -> V:
        return self._values[index]

    def remove_value(self, value: V) -> Optional[int]:
        """Remove value if any, and return its former index."""
        index = self.get_index(value)
        if index is not None:
            del self._values[index]
        return index

    def indexes(self) -> List[int]:
        """Live indexes, increasing."""
        return sorted(self._values)

    def size(self) -> int:
        return len(self._values)

    def to_cursor(self) -> Cursor[V]:
        """Return a cursor over the live values, by increasing index."""
        return SliceCursor(self.to_increasing_values())

    def to_increasing_indexes(self) -> Dict[int, int]:
        """Map each live index to its rank among live indexes (0 to size - 1)."""
        return {index: rank for rank, index in enumerate(self.indexes())}

    def to_increasing_values(self) -> List[V]:
        """Live values ordered by increasing index."""
        return [self._values[index] for index in self.indexes()]
