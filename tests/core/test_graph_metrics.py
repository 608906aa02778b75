"""Tests for graph metrics calculation."""

import pytest

from nodal.core.exceptions import IterationError
from nodal.core.graph import MapGraph
from nodal.core.graph_operations.metrics import (
    MetricsCalculator,
    NetworkStatistics,
    incoming_degree,
    outgoing_degree,
    total_degree,
    undirected_degree,
)
from nodal.core.graph_operations.randoms import generate_complete_undirected_graph
from nodal.core.models import IdNode, Neighborhood, UndirectedSimpleLink, ValuedLink


@pytest.mark.parametrize("size", [2, 5, 8])
def test_complete_graph_statistics(size, counting_node_generator):
    """Test complete graphs have degree size - 1 and density 1."""
    graph = generate_complete_undirected_graph(size, counting_node_generator, UndirectedSimpleLink)
    result = MetricsCalculator.calculate_network_statistics(graph, undirected_degree)
    statistics = result.statistics

    assert result.errors is None
    assert statistics.nodes_size == size
    assert statistics.undirected_size == size * (size - 1) // 2
    assert statistics.directed_size == 0
    assert statistics.average_undirected_degree == pytest.approx(size - 1)
    assert statistics.undirected_density == pytest.approx(1.0)
    assert statistics.directed_density == pytest.approx(0.0)
    assert statistics.degree_distribution == {size - 1: pytest.approx(1.0)}


def test_empty_graph_sentinels():
    """Test averages are -1 and densities 0 without nodes."""
    statistics = MetricsCalculator.calculate_network_statistics(MapGraph()).statistics

    assert statistics.nodes_size == 0
    assert statistics.average_directed_degree == -1.0
    assert statistics.average_undirected_degree == -1.0
    assert statistics.directed_density == 0.0
    assert statistics.undirected_density == 0.0
    assert statistics.degree_distribution == {}


def test_single_node_densities():
    """Test densities are 0 under two nodes."""
    statistics = NetworkStatistics(nodes_size=1)
    assert statistics.directed_density == 0.0
    assert statistics.undirected_density == 0.0
    assert statistics.average_directed_degree == 0.0


def test_directed_statistics(make_nodes):
    """Test directed links counts, averages and distributions."""
    a, b, c = make_nodes(3)
    graph = MapGraph()
    graph.add_link(ValuedLink.directed_link(a, b, 1))
    graph.add_link(ValuedLink.directed_link(a, c, 1))
    graph.add_link(ValuedLink.directed_link(b, c, 1))

    statistics = MetricsCalculator.calculate_network_statistics(graph, outgoing_degree).statistics
    assert statistics.directed_size == 3
    assert statistics.undirected_size == 0
    assert statistics.average_directed_degree == pytest.approx(1.0)
    assert statistics.directed_density == pytest.approx(0.5)
    assert statistics.degree_distribution == {
        2: pytest.approx(1 / 3),
        1: pytest.approx(1 / 3),
        0: pytest.approx(1 / 3),
    }

    incoming = MetricsCalculator.calculate_network_statistics(graph, incoming_degree).statistics
    assert incoming.degree_distribution[2] == pytest.approx(1 / 3)


def test_degree_counters():
    """Test counter helpers read the right degrees."""
    neighborhood = Neighborhood(
        IdNode("a"), incoming_degree=1, outgoing_degree=2, undirected_degree=4
    )
    assert incoming_degree(neighborhood) == 1
    assert outgoing_degree(neighborhood) == 2
    assert undirected_degree(neighborhood) == 4
    assert total_degree(neighborhood) == 7


def test_statistics_errors_are_accumulated(make_nodes):
    """Test failing nodes are skipped and reported."""
    a, b, c = make_nodes(3)

    class FlakyGraph(MapGraph):
        def neighbors(self, node):
            if node.same_node(c):
                raise IterationError("cannot load")
            return super().neighbors(node)

    graph = FlakyGraph([UndirectedSimpleLink(a, b)])
    graph.add_node(c)

    result = MetricsCalculator.calculate_network_statistics(graph)
    assert result.errors is not None
    assert len(result.errors) == 1
    assert result.statistics.nodes_size == 2
    assert result.statistics.undirected_size == 1
