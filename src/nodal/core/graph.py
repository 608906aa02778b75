"""
Sparse in-memory graph based on index maps.

This module provides MapGraph, the primary graph implementation. Nodes are
not hashable in general, so the graph assigns each node an integer index
(IncreasingMapping) and keeps, per index, an AdjacencyRecord holding degree
counters and the links grouped by the index of their other end.

Neighborhood queries are O(local degree): directed links are stored with
their source, undirected links with both of their extremities.
"""

import logging
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple

from .adjacency import AdjacencyRecord
from .iterators import Cursor
from .mappings import IncreasingMapping
from .matrix import GraphMatrix
from .models import L, N, Neighborhood

logger = logging.getLogger(__name__)


class MapGraph(Generic[N, L]):
    """
    Sparse graph of nodes and links, directed or not.

    Every mutation keeps the degree counters exact: adding a link that is
    already there (by same_link) changes nothing, removing a link or a node
    that is not there changes nothing either.

    Attributes:
        _nodes (IncreasingMapping[N]): Injective node to index assignment
        _content (Dict[int, AdjacencyRecord]): Links and counters per index
    """

    def __init__(self, links: Optional[Iterable[L]] = None):
        """
        Initialize graph from links.

        Args:
            links (Optional[Iterable[L]]): Links to add, their extremities are
                added as nodes
        """
        self._nodes: IncreasingMapping[N] = IncreasingMapping(lambda a, b: a.same_node(b))
        self._content: Dict[int, AdjacencyRecord[N, L]] = {}
        for link in links or []:
            self.add_link(link)

    @classmethod
    def from_links(cls, links: Iterable[L]) -> "MapGraph[N, L]":
        """Create a MapGraph instance from links."""
        return cls(links)

    def add_node(self, node: N) -> None:
        """Add a node if it did not exist, does nothing otherwise."""
        self._ensure_index(node)

    def remove_node(self, node: N) -> None:
        """Remove a node and all its links, does nothing for an unknown node."""
        index = self._nodes.remove_value(node)
        if index is None:
            return

        record = self._content.pop(index)
        # directed links from the node were only counted by their destination
        for destination_index, links in record.values.items():
            if destination_index == index:
                continue
            directed = sum(1 for link in links if link.is_directed())
            self._content[destination_index].incoming_counter -= directed

        for other in self._content.values():
            other.remove_node(index)

        logger.debug(f"Removed node at index {index}")

    def add_link(self, link: L) -> None:
        """Add a link, and its extremities if needed, unless the same link is there."""
        source_index = self._ensure_index(link.source)
        destination_index = self._ensure_index(link.destination)
        self._set_link(source_index, destination_index, link)

    def has_link(self, link: L) -> bool:
        """Return True if the same link is in the graph."""
        source_index = self._nodes.get_index(link.source)
        destination_index = self._nodes.get_index(link.destination)
        if source_index is None or destination_index is None:
            return False

        if self._contains(source_index, destination_index, link):
            return True
        if link.is_directed():
            return False
        # undirected links may appear as the opposite
        return self._contains(destination_index, source_index, link)

    def remove_link(self, link: L) -> None:
        """Remove a link if any, keeps the nodes."""
        source_index = self._nodes.get_index(link.source)
        destination_index = self._nodes.get_index(link.destination)
        if source_index is None or destination_index is None:
            return

        removed = self._content[source_index].remove_link(destination_index, link)
        if not removed and not link.is_directed():
            # same undirected link given with swapped extremities
            source_index, destination_index = destination_index, source_index
            removed = self._content[source_index].remove_link(destination_index, link)
        if not removed:
            return

        if link.is_directed():
            self._content[destination_index].incoming_counter -= 1
        elif destination_index != source_index:
            self._content[destination_index].remove_link(source_index, link)

    def has_node(self, node: N) -> bool:
        return self._nodes.get_index(node) is not None

    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return self._nodes.size()

    def __len__(self) -> int:
        return self.node_count()

    def all_nodes(self) -> Cursor[N]:
        """Return a cursor over the nodes, each node appears once."""
        return self._nodes.to_cursor()

    def neighbors(self, node: N) -> Optional[Neighborhood[N, L]]:
        """
        Return the neighborhood of node.

        Returns:
            Optional[Neighborhood]: None if node is not in the graph. An isolated
                node gets a neighborhood with zero degrees and no link.
        """
        index = self._nodes.get_index(node)
        if index is None:
            return None
        return self._content[index].to_neighborhood(self._nodes.get_value(index))

    def to_matrix(
        self, project: Optional[Callable[[List[L]], object]], dtype: Optional[object] = object
    ) -> Tuple[List[N], Optional[GraphMatrix]]:
        """
        Project the graph as a square matrix.

        Cell (i, j) is project(links from node i to node j). Cells with no link
        hold project([]). Rows and columns are numbered 0 to size - 1 whatever
        the removals that happened before.

        As an example, counting links gives the adjacency matrix:

            >>> nodes, matrix = graph.to_matrix(len, dtype=int)

        Args:
            project: Reduces the links between two nodes to a single value
            dtype: numpy dtype of the matrix

        Returns:
            Tuple[List[N], Optional[GraphMatrix]]: Node of each row (and column),
                and the matrix. An empty graph or no projection gives ([], None).
        """
        if project is None or self._nodes.size() == 0:
            return [], None

        ranks = self._nodes.to_increasing_indexes()
        matrix = GraphMatrix(self._nodes.size(), project([]), dtype=dtype)
        for source_index, record in self._content.items():
            for destination_index, links in record.values.items():
                if links:
                    matrix.set_value(
                        ranks[source_index], ranks[destination_index], project(list(links))
                    )

        return self._nodes.to_increasing_values(), matrix

    def _ensure_index(self, node: N) -> int:
        """Return the index of node, adding it if needed."""
        index = self._nodes.add_value(node)
        if index not in self._content:
            self._content[index] = AdjacencyRecord()
        return index

    def _contains(self, source_index: int, destination_index: int, link: L) -> bool:
        return any(
            link.same_link(current)
            for current in self._content[source_index].values.get(destination_index, [])
        )

    def _set_link(self, source_index: int, destination_index: int, link: L) -> bool:
        """Store link at given indexes, maintaining counters of both extremities."""
        if not link.is_directed() and self._contains(destination_index, source_index, link):
            return False
        if not self._content[source_index].add_link(destination_index, link):
            return False

        if link.is_directed():
            self._content[destination_index].incoming_counter += 1
        else:
            self._content[destination_index].add_link(source_index, link)
        return True
