"""
Tests for equality based sets and index mappings.
"""

import pytest

from nodal.core.exceptions import EmptySetError, IterationError
from nodal.core.iterators import collect
from nodal.core.mappings import IncreasingMapping
from nodal.core.models import IdNode
from nodal.core.sets import ListSet


def same_node(a, b):
    return a.same_node(b)


def test_list_set_uses_equality():
    """Test list set membership relies on the equality function."""
    elements = ListSet(same_node)
    assert elements.is_empty()

    elements.add(IdNode("a"))
    elements.add(IdNode("a"))
    elements.add(IdNode("b"))
    assert elements.size() == 2
    assert len(elements) == 2
    assert elements.has(IdNode("b"))
    assert not elements.has(IdNode("c"))

    elements.remove(IdNode("a"))
    elements.remove(IdNode("unknown"))
    assert [node.id for node in collect(elements.to_cursor())] == ["b"]


def test_list_set_peek():
    """Test peek returns an element without removing it, fails on empty sets."""
    elements = ListSet(lambda a, b: a == b)
    with pytest.raises(EmptySetError):
        elements.peek()

    elements.add(3)
    assert elements.peek() == 3
    assert elements.size() == 1

    # empty set errors are iteration errors
    elements.remove(3)
    with pytest.raises(IterationError):
        elements.peek()


def test_increasing_mapping_never_reuses_indexes():
    """Test removed values leave holes, new values get new indexes."""
    mapping = IncreasingMapping(same_node)
    assert mapping.add_value(IdNode("a")) == 0
    assert mapping.add_value(IdNode("b")) == 1
    assert mapping.add_value(IdNode("a")) == 0

    assert mapping.remove_value(IdNode("a")) == 0
    assert mapping.remove_value(IdNode("a")) is None
    assert mapping.get_index(IdNode("a")) is None

    assert mapping.add_value(IdNode("c")) == 2
    assert mapping.indexes() == [1, 2]
    assert mapping.size() == 2


def test_increasing_mapping_compaction():
    """Test compaction numbers live values contiguously, by index order."""
    mapping = IncreasingMapping(same_node)
    for name in "abcd":
        mapping.add_value(IdNode(name))
    mapping.remove_value(IdNode("b"))

    assert mapping.to_increasing_indexes() == {0: 0, 2: 1, 3: 2}
    assert [node.id for node in mapping.to_increasing_values()] == ["a", "c", "d"]
    assert [node.id for node in mapping.to_cursor()] == ["a", "c", "d"]
    assert mapping.get_value(2).id == "c"
