"""
Tests for custom exceptions.
"""

import pytest

from nodal.core.exceptions import (
    EmptySetError,
    ExportError,
    GraphOperationError,
    InvalidInputError,
    IterationError,
    JoinedError,
    ValidationError,
)


def test_error_messages():
    """Test error messages are prefixed with their category."""
    assert str(ValidationError("bad size")) == "Validation Error: bad size"
    assert str(InvalidInputError("bad size")) == "Validation Error: bad size"
    assert str(GraphOperationError("failed")) == "Graph Operation Error: failed"


def test_hierarchy():
    """Test exception hierarchy."""
    assert issubclass(InvalidInputError, ValidationError)
    assert issubclass(EmptySetError, IterationError)
    assert issubclass(JoinedError, GraphOperationError)
    assert issubclass(ExportError, GraphOperationError)

    with pytest.raises(ValidationError):
        raise InvalidInputError("probability")


def test_join_ignores_none():
    """Test joining nothing gives no error at all."""
    assert JoinedError.join(None) is None
    assert JoinedError.join(None, None, None) is None


def test_join_accumulates_and_flattens():
    """Test joined errors keep every error in order, nested aggregates flattened."""
    first = ValueError("first")
    second = KeyError("second")
    third = IterationError("third")

    joined = JoinedError.join(None, first)
    joined = JoinedError.join(joined, None, second)
    joined = JoinedError.join(None, joined, third)

    assert isinstance(joined, JoinedError)
    assert len(joined) == 3
    assert list(joined) == [first, second, third]
    assert "first" in str(joined)


def test_export_error_cause():
    """Test export errors keep their cause."""
    cause = JoinedError([ValueError("node")])
    error = ExportError("export failed", cause=cause)
    assert error.cause is cause
    assert ExportError("no cause").cause is None
