"""
Lazy cursors over graph content.

A cursor is a pull based sequence that starts before its first element.
Callers move it with advance() and read it with current(), in two steps, so
that a failing data source can be told apart from an exhausted one:

    cursor = graph.all_nodes()
    while cursor.advance():
        node = cursor.current()

Every cursor is also a plain Python iterator built on those two calls.

Cursors that skip over many source elements in a single advance()
(MapFilterCursor, CompositeCursor) do not stop at the first failing element.
They keep the failures and hand them over through pop_errors(), so that the
caller decides what to do with them.

Cursors are single consumer and stateful: one traversal owns one cursor.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Generic, Iterator, List, Optional, Sequence, TypeVar

from .exceptions import IterationError, JoinedError

T = TypeVar("T")
U = TypeVar("U")


class Cursor(ABC, Generic[T]):
    """Abstract pull based cursor, set before its first element."""

    @abstractmethod
    def advance(self) -> bool:
        """
        Move to the next element.

        Returns:
            bool: True if there is a current element after the move
        """

    @abstractmethod
    def current(self) -> T:
        """
        Return the current element.

        Raises:
            IterationError: Before the first successful advance, or after exhaustion
        """

    def pop_errors(self) -> Optional[JoinedError]:
        """Return and forget the element level errors accumulated so far."""
        return None

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.advance():
            raise StopIteration
        return self.current()


class EmptyCursor(Cursor[T]):
    """Cursor with no element at all."""

    def advance(self) -> bool:
        return False

    def current(self) -> T:
        raise IterationError("empty cursor, no value")


class SliceCursor(Cursor[T]):
    """
    In-memory cursor over a fixed sequence.

    Attributes:
        values (Sequence[T]): Backing sequence, None behaves as empty
        index (int): Position of the current element, -1 before the first one
    """

    def __init__(self, values: Optional[Sequence[T]]):
        self.values: Sequence[T] = values if values is not None else ()
        self.index = -1

    def advance(self) -> bool:
        if self.index < len(self.values):
            self.index += 1
        return self.index < len(self.values)

    def current(self) -> T:
        if self.index < 0 or self.index >= len(self.values):
            raise IterationError("no value to return")
        return self.values[self.index]


class MapCursor(Cursor[U], Generic[T, U]):
    """Cursor applying a transformation to each element of a source cursor."""

    def __init__(self, source: Optional[Cursor[T]], mapper: Callable[[T], U]):
        self.source = source
        self.mapper = mapper

    def advance(self) -> bool:
        if self.source is None:
            return False
        return self.source.advance()

    def current(self) -> U:
        if self.source is None:
            raise IterationError("nil source, no value")
        return self.mapper(self.source.current())

    def pop_errors(self) -> Optional[JoinedError]:
        if self.source is None:
            return None
        return self.source.pop_errors()


class MapFilterCursor(Cursor[U], Generic[T, U]):
    """
    Cursor mapping source elements and keeping those accepted by a predicate.

    advance() pulls the source until a mapped value is accepted or the source
    is exhausted. Elements that fail to load or to map are skipped and their
    errors accumulated, so a later accepted element still returns True.

    Attributes:
        source (Optional[Cursor[T]]): Source cursor, None behaves as empty
        mapper (Callable[[T], U]): Transformation applied to each element
        predicate (Optional[Callable[[U], bool]]): Filter over mapped values,
            None accepts everything
        errors (List[BaseException]): Element level failures not popped yet
    """

    def __init__(
        self,
        source: Optional[Cursor[T]],
        mapper: Callable[[T], U],
        predicate: Optional[Callable[[U], bool]] = None,
    ):
        self.source = source
        self.mapper = mapper
        self.predicate = predicate
        self.errors: List[BaseException] = []
        self._value: Optional[U] = None
        self._has_value = False

    def advance(self) -> bool:
        self._has_value = False
        self._value = None
        if self.source is None:
            return False

        while self.source.advance():
            try:
                value = self.mapper(self.source.current())
            except Exception as e:
                self.errors.append(e)
                continue

            if self.predicate is None or self.predicate(value):
                self._value = value
                self._has_value = True
                return True

        return False

    def current(self) -> U:
        if not self._has_value:
            raise IterationError("no current value")
        return self._value  # type: ignore[return-value]

    def pop_errors(self) -> Optional[JoinedError]:
        inner = self.source.pop_errors() if self.source is not None else None
        result = JoinedError.join(inner, *self.errors)
        self.errors = []
        return result


class CompositeCursor(Cursor[T]):
    """
    Ordered sequence of cursors consumed one after the other.

    The sequence may change while iterating, which is what graph walks use to
    grow their frontier:

    * replace_current drops what remains of the current cursor
    * postpone_current runs a new cursor now and resumes the current one after
    * add_next runs a new cursor right after the current one
    * add_last runs a new cursor after every pending one
    * halt drops everything, further advance() calls return False
    """

    def __init__(self, first: Optional[Cursor[T]] = None):
        self._current: Cursor[T] = first if first is not None else EmptyCursor()
        self._pending: Deque[Cursor[T]] = deque()
        self.errors: List[BaseException] = []

    def advance(self) -> bool:
        if self._current.advance():
            return True

        # the first pending cursor with an element becomes the current one
        while self._pending:
            candidate = self._pending.popleft()
            try:
                has_value = candidate.advance()
            except Exception as e:
                self.errors.append(e)
                continue

            if has_value:
                self._current = candidate
                return True

        self._current = EmptyCursor()
        return False

    def current(self) -> T:
        return self._current.current()

    def replace_current(self, cursor: Cursor[T]) -> None:
        """Force cursor as the current one, the previous remainder is lost."""
        self._check(cursor)
        self._current = cursor

    def postpone_current(self, cursor: Cursor[T]) -> None:
        """Run cursor first, then resume the current cursor."""
        self._check(cursor)
        self._pending.appendleft(self._current)
        self._current = cursor

    def add_next(self, cursor: Cursor[T]) -> None:
        """Run cursor right after the current one."""
        self._check(cursor)
        self._pending.appendleft(cursor)

    def add_last(self, cursor: Cursor[T]) -> None:
        """Run cursor once every other cursor is over."""
        self._check(cursor)
        self._pending.append(cursor)

    def halt(self) -> None:
        """Stop any iteration."""
        self._current = EmptyCursor()
        self._pending.clear()

    def pop_errors(self) -> Optional[JoinedError]:
        result = JoinedError.join(None, *self.errors)
        self.errors = []
        return result

    @staticmethod
    def _check(cursor: Optional[Cursor[T]]) -> None:
        if cursor is None:
            raise IterationError("empty cursor")


class DynamicCursor(Cursor[T]):
    """
    Growable work queue of raw values.

    Values added with add_next_value are processed right after the current
    one, values added with add_last_value after every pending value. Used as
    the explicit queue of breadth first walks.
    """

    def __init__(self, values: Optional[Sequence[T]] = None):
        self._pending: Deque[T] = deque(values or ())
        self._value: Optional[T] = None
        self._has_value = False

    def advance(self) -> bool:
        if not self._pending:
            self._has_value = False
            self._value = None
            return False

        self._value = self._pending.popleft()
        self._has_value = True
        return True

    def current(self) -> T:
        if not self._has_value:
            raise IterationError("empty cursor")
        return self._value  # type: ignore[return-value]

    def add_next_value(self, value: T) -> None:
        """Add the next value to process."""
        self._pending.appendleft(value)

    def add_last_value(self, value: T) -> None:
        """Add the last value to process."""
        self._pending.append(value)

    def halt(self) -> None:
        """Discard all pending work, immediately."""
        self._pending.clear()
        self._has_value = False
        self._value = None

    def __len__(self) -> int:
        return len(self._pending)


def collect(cursor: Optional[Cursor[T]]) -> List[T]:
    """Read a cursor until exhaustion and return its elements."""
    if cursor is None:
        return []
    return list(cursor)
