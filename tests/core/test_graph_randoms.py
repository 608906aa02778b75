"""Tests for random graph generation."""

import random

import pytest

from nodal.core.exceptions import InvalidInputError
from nodal.core.graph_operations.components import ComponentAnalysis
from nodal.core.graph_operations.randoms import (
    RandomGraphGenerator,
    generate_complete_undirected_graph,
)
from nodal.core.iterators import collect
from nodal.core.models import IdNode, UndirectedSimpleLink, ValuedLink


def directed_link(source, destination):
    return ValuedLink.directed_link(source, destination, None)


def all_degrees(graph):
    return [graph.neighbors(node) for node in graph.all_nodes()]


def test_directed_gnp_extreme_probabilities(counting_node_generator):
    """Test p=0 gives no link, p=1 every ordered pair."""
    generator = RandomGraphGenerator(seed=1)

    empty = generator.directed_gnp(10, 0.0, counting_node_generator, directed_link)
    assert empty.node_count() == 10
    assert all(neighborhood.is_isolated() for neighborhood in all_degrees(empty))

    full = generator.directed_gnp(10, 1.0, counting_node_generator, directed_link)
    for neighborhood in all_degrees(full):
        assert neighborhood.outgoing_degree == 9
        assert neighborhood.incoming_degree == 9
        assert neighborhood.undirected_degree == 0


def test_undirected_gnp_complete(counting_node_generator):
    """Test undirected p=1 gives a complete graph."""
    generator = RandomGraphGenerator(seed=1)
    graph = generator.undirected_gnp(7, 1.0, counting_node_generator, UndirectedSimpleLink)
    for neighborhood in all_degrees(graph):
        assert neighborhood.undirected_degree == 6


def test_directed_gnp_degrees_match_links(counting_node_generator):
    """Test degree counters are consistent with stored links."""
    generator = RandomGraphGenerator(seed=7)
    graph = generator.directed_gnp(30, 0.2, counting_node_generator, directed_link)

    total_outgoing = 0
    total_incoming = 0
    for neighborhood in all_degrees(graph):
        links = collect(neighborhood.links())
        assert len(links) == neighborhood.outgoing_degree
        assert all(link.source.same_node(neighborhood.center_node) for link in links)
        total_outgoing += neighborhood.outgoing_degree
        total_incoming += neighborhood.incoming_degree
    assert total_outgoing == total_incoming


def test_gnp_is_reproducible_with_seed():
    """Test same seed, same graph."""

    def build(seed):
        counter = iter(range(1000))
        graph = RandomGraphGenerator(seed=seed).undirected_gnp(
            15, 0.3, lambda: IdNode(f"x{next(counter)}"), UndirectedSimpleLink
        )
        return [
            (neighborhood.center_node.id, neighborhood.undirected_degree)
            for neighborhood in all_degrees(graph)
        ]

    assert build(3) == build(3)


class CountingRandom(random.Random):
    """Random numbers with a count of random() calls."""

    def __init__(self, seed):
        super().__init__(seed)
        self.draws = 0

    def random(self):
        self.draws += 1
        return super().random()


@pytest.mark.parametrize("size", [1, 2, 6])
def test_gnp_draws_once_per_pair(size, counting_node_generator):
    """Test each unordered pair is drawn once undirected, each ordered pair once directed."""
    rng = CountingRandom(4)
    RandomGraphGenerator(rng=rng).undirected_gnp(
        size, 0.5, counting_node_generator, UndirectedSimpleLink
    )
    assert rng.draws == size * (size - 1) // 2

    rng = CountingRandom(4)
    RandomGraphGenerator(rng=rng).directed_gnp(size, 0.5, counting_node_generator, directed_link)
    assert rng.draws == size * (size - 1)


def test_undirected_gnp_links_each_pair_once(counting_node_generator):
    """Test the link generator is called once per unordered pair."""
    calls = []

    def link_generator(source, destination):
        calls.append((source.id, destination.id))
        return UndirectedSimpleLink(source, destination)

    RandomGraphGenerator(seed=2).undirected_gnp(5, 1.0, counting_node_generator, link_generator)
    assert len(calls) == 10
    assert len({frozenset(call) for call in calls}) == 10


def test_generator_accepts_random_instance(counting_node_generator):
    """Test an existing random.Random can be shared."""
    rng = random.Random(5)
    generator = RandomGraphGenerator(rng=rng)
    assert generator.rng is rng
    graph = generator.undirected_gnp(4, 0.5, counting_node_generator, UndirectedSimpleLink)
    assert graph.node_count() == 4


@pytest.mark.parametrize(
    "size,probability", [(-1, 0.5), (5, -0.1), (5, 1.5), (5, float("nan"))]
)
def test_gnp_invalid_inputs(size, probability, counting_node_generator):
    """Test invalid sizes and probabilities."""
    generator = RandomGraphGenerator(seed=1)
    with pytest.raises(InvalidInputError):
        generator.directed_gnp(size, probability, counting_node_generator, directed_link)
    with pytest.raises(InvalidInputError):
        generator.undirected_gnp(size, probability, counting_node_generator, UndirectedSimpleLink)


def test_gnp_empty_graph(counting_node_generator):
    """Test size 0 gives an empty graph."""
    graph = RandomGraphGenerator().directed_gnp(0, 0.5, counting_node_generator, directed_link)
    assert graph.node_count() == 0


def test_gnp_inconsistent_link_type(counting_node_generator):
    """Test links whose direction does not match the model are rejected."""
    generator = RandomGraphGenerator(seed=1)
    with pytest.raises(InvalidInputError):
        generator.directed_gnp(3, 1.0, counting_node_generator, UndirectedSimpleLink)
    with pytest.raises(InvalidInputError):
        generator.undirected_gnp(3, 1.0, counting_node_generator, directed_link)


def test_duplicate_generated_nodes_are_rejected():
    """Test node generators must return new nodes."""
    with pytest.raises(InvalidInputError):
        RandomGraphGenerator().undirected_gnp(
            3, 0.5, lambda: IdNode("same"), UndirectedSimpleLink
        )


def test_complete_graph(counting_node_generator):
    """Test complete graph generation and its invalid inputs."""
    graph = generate_complete_undirected_graph(4, counting_node_generator, UndirectedSimpleLink)
    assert graph.node_count() == 4
    for neighborhood in all_degrees(graph):
        assert neighborhood.undirected_degree == 3

    assert generate_complete_undirected_graph(
        0, counting_node_generator, UndirectedSimpleLink
    ).node_count() == 0
    with pytest.raises(InvalidInputError):
        generate_complete_undirected_graph(-1, counting_node_generator, UndirectedSimpleLink)
    with pytest.raises(InvalidInputError):
        generate_complete_undirected_graph(3, counting_node_generator, directed_link)


def test_barabasi_albert(counting_node_generator):
    """Test preferential attachment from a complete graph of 10 nodes to 20 nodes."""
    generator = RandomGraphGenerator(seed=42)
    graph = generator.undirected_barabasi_albert(
        10, 20, counting_node_generator, UndirectedSimpleLink
    )
    neighborhoods = all_degrees(graph)
    assert len(neighborhoods) == 20

    degrees = [neighborhood.undirected_degree for neighborhood in neighborhoods]
    links = 10 * 9 // 2 + 10
    assert sum(degrees) == 2 * links
    # the complete core keeps degree 9 at least
    assert sum(1 for degree in degrees if degree >= 9) >= 10
    # each new node has one link to an older node
    assert all(degree >= 1 for degree in degrees)
    assert ComponentAnalysis.connected_components_size(graph).sorted_sizes() == [20]


def test_barabasi_albert_single_node_core(counting_node_generator):
    """Test growth from a single node, whose degree is 0."""
    graph = RandomGraphGenerator(seed=3).undirected_barabasi_albert(
        1, 5, counting_node_generator, UndirectedSimpleLink
    )
    degrees = [neighborhood.undirected_degree for neighborhood in all_degrees(graph)]
    assert len(degrees) == 5
    assert sum(degrees) == 8


@pytest.mark.parametrize("initial_size,max_size", [(0, 5), (5, 0), (6, 5), (-1, 3)])
def test_barabasi_albert_invalid_sizes(initial_size, max_size, counting_node_generator):
    """Test inconsistent sizes."""
    with pytest.raises(InvalidInputError):
        RandomGraphGenerator().undirected_barabasi_albert(
            initial_size, max_size, counting_node_generator, UndirectedSimpleLink
        )


def test_barabasi_albert_directed_links(counting_node_generator):
    """Test directed link generators are rejected."""
    with pytest.raises(InvalidInputError):
        RandomGraphGenerator().undirected_barabasi_albert(
            3, 5, counting_node_generator, directed_link
        )
