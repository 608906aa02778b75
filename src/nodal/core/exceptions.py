"""
Custom exceptions for the graph engine.

This module defines the hierarchy of exceptions used throughout the engine.
Absence (unknown node, unknown link) is never an error: lookups return None
and removals are no-ops. Exceptions cover three situations:

* invalid input, fatal to the call that detects it
* cursor misuse or a failing data source
* element-level failures accumulated during a pass and reported together
"""

from typing import Iterable, Iterator, List, Optional


class ValidationError(Exception):
    """
    Raised when data validation fails.

    Examples:
        * Invalid dataclass field types
        * Malformed generator configuration
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidInputError(ValidationError):
    """
    Raised when an operation receives parameters that make no sense.

    The operation that detects it aborts immediately, nothing is returned.

    Examples:
        * Probability outside [0, 1]
        * Negative graph size
        * Initial size greater than max size
        * Generated link direction inconsistent with the requested mode
        * Matrix index out of range
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Failure while walking the graph
        * Export failures
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class IterationError(Exception):
    """
    Raised when a cursor is misused or its data source fails.

    Examples:
        * Reading the current value before the first advance
        * Reading the current value after exhaustion
        * Adding a None cursor to a composite cursor
    """


class EmptySetError(IterationError):
    """Raised when peeking an element from an empty set."""


class JoinedError(GraphOperationError):
    """
    Aggregate of non fatal errors collected during a pass.

    Algorithms looping over many elements do not stop at the first failing
    element. They finish the pass and return their best effort result along
    with a JoinedError holding every failure, in the order they happened.
    """

    def __init__(self, errors: Iterable[BaseException]):
        self.errors: List[BaseException] = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors))

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    @classmethod
    def join(
        cls, current: Optional["JoinedError"], *errors: Optional[BaseException]
    ) -> Optional["JoinedError"]:
        """
        Join errors into an existing aggregate.

        None values are ignored, nested aggregates are flattened. Returns None
        when there is nothing to report.

        Args:
            current: Aggregate built so far, if any
            errors: New errors to append

        Returns:
            Optional[JoinedError]: The aggregate, or None if no error at all
        """
        collected: List[BaseException] = list(current.errors) if current else []
        for error in errors:
            if error is None:
                continue
            if isinstance(error, JoinedError):
                collected.extend(error.errors)
            else:
                collected.append(error)

        if not collected:
            return None
        return cls(collected)


class ExportError(GraphOperationError):
    """
    Raised when a graph export fails.

    Attributes:
        cause (Optional[JoinedError]): Element level failures met during export
    """

    def __init__(self, message: str, cause: Optional[JoinedError] = None):
        super().__init__(message)
        self.cause = cause
