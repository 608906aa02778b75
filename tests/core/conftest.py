"""Shared test fixtures."""

from typing import Callable, List

import pytest

from nodal.core.graph import MapGraph
from nodal.core.matrix_graph import AdjacencyMatrixGraph
from nodal.core.models import IdNode, UndirectedSimpleLink


@pytest.fixture
def make_nodes() -> Callable[[int], List[IdNode]]:
    """Fixture providing a factory of nodes with ids n0, n1, ..."""

    def factory(size: int) -> List[IdNode]:
        return [IdNode(f"n{index}") for index in range(size)]

    return factory


@pytest.fixture
def counting_node_generator() -> Callable[[], IdNode]:
    """Fixture providing a node generator returning g0, g1, ... at each call."""
    counter = {"value": 0}

    def generate() -> IdNode:
        node = IdNode(f"g{counter['value']}")
        counter["value"] += 1
        return node

    return generate


@pytest.fixture(params=[MapGraph, AdjacencyMatrixGraph], ids=["map", "matrix"])
def graph_class(request):
    """Fixture providing each adjacency engine, both follow the same contract."""
    return request.param


@pytest.fixture
def clusters_graph(make_nodes) -> MapGraph:
    """
    Fixture providing a graph with three components of sizes 1, 3 and 4.

    n0 is isolated, n1 - n2 - n3 is a path, n4 - n5 - n6 - n7 is a cycle.
    """
    nodes = make_nodes(8)
    graph = MapGraph()
    graph.add_node(nodes[0])
    for a, b in [(1, 2), (2, 3), (4, 5), (5, 6), (6, 7), (7, 4)]:
        graph.add_link(UndirectedSimpleLink(nodes[a], nodes[b]))
    return graph
