"""
Equality based sets.

Graph elements are not assumed hashable, so traversals mark nodes in sets
that compare elements with a caller provided equality. AbstractSet is the
contract algorithms rely on, ListSet the in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, TypeVar

from .exceptions import EmptySetError
from .iterators import Cursor, SliceCursor

T = TypeVar("T")

EqualsFunction = Callable[[T, T], bool]


class AbstractSet(ABC, Generic[T]):
    """What a set of possibly unhashable elements should do."""

    @abstractmethod
    def to_cursor(self) -> Cursor[T]:
        """Return a new cursor over the elements of the set."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True for an empty set."""

    @abstractmethod
    def add(self, element: T) -> None:
        """Add element, unless an equal one is already in the set."""

    @abstractmethod
    def has(self, element: T) -> bool:
        """Return True if an equal element is in the set."""

    @abstractmethod
    def remove(self, element: T) -> None:
        """Remove the equal element, if any."""

    @abstractmethod
    def peek(self) -> T:
        """
        Return an element without removing it.

        Raises:
            EmptySetError: If the set is empty
        """

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    def __len__(self) -> int:
        return self.size()


SetBuilder = Callable[[EqualsFunction], AbstractSet]


class ListSet(AbstractSet[T]):
    """
    Set backed by a list, scanned with the equality function.

    Attributes:
        equality (EqualsFunction): Returns True when two elements are the same
    """

    def __init__(self, equality: EqualsFunction):
        self.equality = equality
        self._elements: List[T] = []

    def to_cursor(self) -> Cursor[T]:
        return SliceCursor(list(self._elements))

    def is_empty(self) -> bool:
        return not self._elements

    def add(self, element: T) -> None:
        if not self.has(element):
            self._elements.append(element)

    def has(self, element: T) -> bool:
        return any(self.equality(current, element) for current in self._elements)

    def remove(self, element: T) -> None:
        self._elements = [
            current for current in self._elements if not self.equality(current, element)
        ]

    def peek(self) -> T:
        if not self._elements:
            raise EmptySetError("empty set")
        return self._elements[0]

    def size(self) -> int:
        return len(self._elements)
