"""
Tests for the link models and neighborhoods.
"""

from nodal.core.iterators import SliceCursor, collect
from nodal.core.models import (
    IdNode,
    Neighborhood,
    TypePropertiesLink,
    UndirectedSimpleLink,
    ValuedLink,
)

A = IdNode("a")
B = IdNode("b")
C = IdNode("c")


def test_undirected_simple_link_ignores_order():
    """Test undirected links are the same whatever the extremities order."""
    link = UndirectedSimpleLink(A, B)
    assert not link.is_directed()
    assert link.same_link(UndirectedSimpleLink(B, A))
    assert link.same_link(UndirectedSimpleLink(A, B))
    assert not link.same_link(UndirectedSimpleLink(A, C))
    assert not link.same_link(None)


def test_valued_links():
    """Test valued links compare direction, value and extremities."""
    directed = ValuedLink.directed_link(A, B, 10)
    assert directed.is_directed()
    assert directed.same_link(ValuedLink.directed_link(A, B, 10))
    assert not directed.same_link(ValuedLink.directed_link(B, A, 10))
    assert not directed.same_link(ValuedLink.directed_link(A, B, 20))
    assert not directed.same_link(ValuedLink.undirected_link(A, B, 10))

    undirected = ValuedLink.undirected_link(A, B, "x")
    assert not undirected.is_directed()
    assert undirected.same_link(ValuedLink.undirected_link(B, A, "x"))
    assert not undirected.same_link(UndirectedSimpleLink(A, B))


def test_type_properties_link():
    """Test typed links are directed and compare type and extremities."""
    link = TypePropertiesLink("knows", A, B)
    assert link.is_directed()
    assert link.same_link(TypePropertiesLink("knows", A, B, {"since": "2020"}))
    assert not link.same_link(TypePropertiesLink("likes", A, B))
    assert not link.same_link(TypePropertiesLink("knows", B, A))

    link.set_property("since", "2020")
    assert link.get_property("since") == "2020"
    assert link.property_keys() == ["since"]
    link.remove_property("since")
    assert link.properties() == {}


def test_opposite():
    """Test opposite returns the other extremity."""
    link = UndirectedSimpleLink(A, B)
    assert link.opposite(A) is B
    assert link.opposite(B) is A
    loop = UndirectedSimpleLink(A, A)
    assert loop.opposite(A) is A


def test_neighborhood():
    """Test neighborhood degrees and lazy links."""
    calls = []

    def links_factory():
        calls.append(1)
        return SliceCursor([UndirectedSimpleLink(A, B)])

    neighborhood = Neighborhood(A, undirected_degree=1, links_factory=links_factory)
    assert not neighborhood.is_isolated()
    assert not calls

    assert len(collect(neighborhood.links())) == 1
    assert len(collect(neighborhood.links())) == 1
    assert len(calls) == 2


def test_isolated_neighborhood():
    """Test default neighborhood is isolated with no link."""
    neighborhood = Neighborhood(A)
    assert neighborhood.is_isolated()
    assert collect(neighborhood.links()) == []
