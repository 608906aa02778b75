"""
Random graph generation.

This module provides the classic random graph models:

* G(n, p): every pair of nodes is linked with probability p, directed or not
* Barabasi-Albert: nodes are added one by one, each new node links to an
  existing node chosen with a probability proportional to its degree
* complete undirected graphs, the starting point of Barabasi-Albert

Nodes and links are never built here: callers provide a node generator and
a link generator, so that generated graphs hold their own domain values.
"""

import logging
import random
from typing import List, Optional

from ..exceptions import InvalidInputError
from ..graph import MapGraph
from ..models import Node
from ..types import LinkGenerator, NodeGenerator

logger = logging.getLogger(__name__)


def generate_complete_undirected_graph(
    size: int, node_generator: NodeGenerator, link_generator: LinkGenerator
) -> MapGraph:
    """
    Generate a graph with size nodes, each one linked to all the others.

    Args:
        size: Number of nodes
        node_generator: Returns a new node at each call
        link_generator: Returns an undirected link between two nodes

    Returns:
        MapGraph: The complete graph, empty for size 0

    Raises:
        InvalidInputError: For a negative size, or a directed generated link
    """
    if size < 0:
        raise InvalidInputError(f"invalid size: {size}")

    result = MapGraph()
    nodes = _add_nodes(result, size, node_generator)
    for i, source in enumerate(nodes):
        for j, destination in enumerate(nodes):
            if i == j:
                continue

            link = link_generator(source, destination)
            if link.is_directed():
                raise InvalidInputError("undirected links only")
            result.add_link(link)

    return result


def _add_nodes(graph: MapGraph, size: int, node_generator: NodeGenerator) -> List[Node]:
    """Add size generated nodes to graph, in generation order."""
    nodes = []
    for _ in range(size):
        node = node_generator()
        if graph.has_node(node):
            raise InvalidInputError("node generator returned an existing node")
        graph.add_node(node)
        nodes.append(node)
    return nodes


class RandomGraphGenerator:
    """
    Generates random graphs.

    All the draws of an instance come from the same random.Random, so that
    a seeded generator always builds the same graphs in the same order.

    Attributes:
        rng (random.Random): Source of randomness
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize generator.

        Args:
            seed: Seed of a new random.Random, ignored when rng is given
            rng: Random number generator to use
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def directed_gnp(
        self,
        size: int,
        probability: float,
        node_generator: NodeGenerator,
        link_generator: LinkGenerator,
    ) -> MapGraph:
        """Directed G(n, p) graph: each ordered pair is tested once."""
        return self._gnp(size, probability, True, node_generator, link_generator)

    def undirected_gnp(
        self,
        size: int,
        probability: float,
        node_generator: NodeGenerator,
        link_generator: LinkGenerator,
    ) -> MapGraph:
        """Undirected G(n, p) graph: each unordered pair is tested once."""
        return self._gnp(size, probability, False, node_generator, link_generator)

    def undirected_barabasi_albert(
        self,
        initial_size: int,
        max_size: int,
        node_generator: NodeGenerator,
        link_generator: LinkGenerator,
    ) -> MapGraph:
        """
        Undirected graph of max_size nodes grown by preferential attachment.

        The graph starts as a complete graph of initial_size nodes. Each new
        node then gets a single link to an existing node n, chosen with
        probability degree(n) / sum of degrees. The draw walks nodes in the
        order they entered the graph, so a seeded generator is reproducible.

        Args:
            initial_size: Number of nodes of the complete starting graph
            max_size: Number of nodes of the result
            node_generator: Returns a new node at each call
            link_generator: Returns an undirected link between two nodes

        Raises:
            InvalidInputError: If sizes are not positive, initial_size exceeds
                max_size, or a generated link is directed
        """
        if initial_size <= 0 or max_size <= 0 or initial_size > max_size:
            raise InvalidInputError(
                f"invalid sizes: initial size {initial_size}, max size {max_size}"
            )

        result = generate_complete_undirected_graph(initial_size, node_generator, link_generator)

        # degrees[i] is the degree of nodes[i], maintained while the graph grows
        nodes: List[Node] = list(result.all_nodes())
        degrees: List[int] = []
        for node in nodes:
            degrees.append(result.neighbors(node).undirected_degree)
        total = sum(degrees)

        for _ in range(initial_size, max_size):
            new_node = _add_nodes(result, 1, node_generator)[0]
            target = self._preferential_index(degrees, total)

            link = link_generator(new_node, nodes[target])
            if link.is_directed():
                raise InvalidInputError("undirected links only")
            result.add_link(link)

            nodes.append(new_node)
            degrees.append(1)
            degrees[target] += 1
            total += 2

        logger.debug(f"Generated preferential attachment graph of {len(nodes)} nodes")
        return result

    def _preferential_index(self, degrees: List[int], total: int) -> int:
        """Draw an index with probability degrees[index] / total."""
        if total == 0:
            # single node core, nothing to prefer
            return self.rng.randrange(len(degrees))

        value = self.rng.randrange(total)
        running = 0
        for index, degree in enumerate(degrees):
            running += degree
            if value < running:
                return index
        return len(degrees) - 1

    def _gnp(
        self,
        size: int,
        probability: float,
        directed: bool,
        node_generator: NodeGenerator,
        link_generator: LinkGenerator,
    ) -> MapGraph:
        """
        Generate a G(n, p) graph.

        For directed graphs, each couple (source, destination) is tested. For
        undirected graphs, only one of (a, b) and (b, a) is.

        Raises:
            InvalidInputError: For a negative size, a probability outside
                [0, 1], or a link whose direction does not match directed
        """
        if size < 0:
            raise InvalidInputError(f"invalid size: {size}")
        if not 0.0 <= probability <= 1.0:
            raise InvalidInputError(f"invalid probability: {probability}")

        result = MapGraph()
        if size == 0:
            return result

        nodes = _add_nodes(result, size, node_generator)
        for i, source in enumerate(nodes):
            for j, destination in enumerate(nodes):
                if i == j or (not directed and i > j):
                    continue
                if self.rng.random() >= probability:
                    continue

                link = link_generator(source, destination)
                if link.is_directed() != directed:
                    raise InvalidInputError("inconsistent link type")
                if not result.has_link(link):
                    result.add_link(link)

        logger.debug(f"Generated G({size}, {probability}) graph, directed: {directed}")
        return result
