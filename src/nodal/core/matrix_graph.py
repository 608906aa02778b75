"""
Dense graph keyed on pairs of node indexes.

AdjacencyMatrixGraph is the matrix flavoured alternative to MapGraph, meant
for small or dense graphs. Nodes live in a plain list, and each link is
stored once under the pair (lower index, higher index) together with a flag
telling whether it runs from the lower index to the higher one. Degree
counters are kept in parallel lists.

Removing a node leaves an empty slot in the node list. Once empty slots
outnumber live nodes, the lists are compacted and the remaining nodes
renumbered, keeping their relative order.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple

from .iterators import Cursor, SliceCursor
from .matrix import GraphMatrix
from .models import L, N, Neighborhood

logger = logging.getLogger(__name__)

PairKey = Tuple[int, int]


class AdjacencyMatrixGraph(Generic[N, L]):
    """
    Dense graph of nodes and links, directed or not.

    Same contract as MapGraph.

    Attributes:
        _nodes (List[Optional[N]]): Node per index, None for removed nodes
        _incoming (List[int]): Incoming degree per index
        _outgoing (List[int]): Outgoing degree per index
        _undirected (List[int]): Undirected degree per index
        _links (Dict[PairKey, List[Tuple[L, bool]]]): Links per ordered pair of
            indexes, each with True when it runs from the lower index
    """

    def __init__(self, links: Optional[Iterable[L]] = None):
        self._nodes: List[Optional[N]] = []
        self._incoming: List[int] = []
        self._outgoing: List[int] = []
        self._undirected: List[int] = []
        self._links: Dict[PairKey, List[Tuple[L, bool]]] = {}
        self._empty_slots = 0
        for link in links or []:
            self.add_link(link)

    def add_node(self, node: N) -> None:
        """Add a node if it did not exist, does nothing otherwise."""
        self._ensure_index(node)

    def remove_node(self, node: N) -> None:
        """Remove a node and all its links, does nothing for an unknown node."""
        index = self._node_index(node)
        if index is None:
            return

        for key in [key for key in self._links if index in key]:
            for link, forward in self._links.pop(key):
                self._count(key, link, forward, -1)

        self._nodes[index] = None
        self._incoming[index] = 0
        self._outgoing[index] = 0
        self._undirected[index] = 0
        self._empty_slots += 1
        logger.debug(f"Removed node at index {index}")

        if 2 * self._empty_slots > len(self._nodes):
            self._compact()

    def add_link(self, link: L) -> None:
        """Add a link, and its extremities if needed, unless the same link is there."""
        source_index = self._ensure_index(link.source)
        destination_index = self._ensure_index(link.destination)
        key = (min(source_index, destination_index), max(source_index, destination_index))

        entries = self._links.setdefault(key, [])
        if any(link.same_link(current) for current, _ in entries):
            return

        forward = source_index <= destination_index
        entries.append((link, forward))
        self._count(key, link, forward, 1)

    def has_link(self, link: L) -> bool:
        """Return True if the same link is in the graph."""
        return self._find(link) is not None

    def remove_link(self, link: L) -> None:
        """Remove a link if any, keeps the nodes."""
        found = self._find(link)
        if found is None:
            return

        key, position = found
        entries = self._links[key]
        stored, forward = entries.pop(position)
        if not entries:
            del self._links[key]
        self._count(key, stored, forward, -1)

    def has_node(self, node: N) -> bool:
        return self._node_index(node) is not None

    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return sum(1 for node in self._nodes if node is not None)

    def __len__(self) -> int:
        return self.node_count()

    def all_nodes(self) -> Cursor[N]:
        """Return a cursor over the nodes, each node appears once."""
        return SliceCursor([node for node in self._nodes if node is not None])

    def neighbors(self, node: N) -> Optional[Neighborhood[N, L]]:
        """
        Return the neighborhood of node, None if node is not in the graph.

        Its links are the outgoing directed links and the undirected links
        touching the node.
        """
        index = self._node_index(node)
        if index is None:
            return None
        center = self._nodes[index]

        def links_factory() -> Cursor[L]:
            # indexes change when the lists are compacted
            index = self._node_index(center)
            if index is None:
                return SliceCursor([])

            result: List[L] = []
            for key, entries in self._links.items():
                if index not in key:
                    continue
                for link, forward in entries:
                    if not link.is_directed() or self._ends(key, forward)[0] == index:
                        result.append(link)
            return SliceCursor(result)

        return Neighborhood(
            center_node=center,
            incoming_degree=self._incoming[index],
            outgoing_degree=self._outgoing[index],
            undirected_degree=self._undirected[index],
            links_factory=links_factory,
        )

    def to_matrix(
        self, project: Optional[Callable[[List[L]], object]], dtype: Optional[object] = object
    ) -> Tuple[List[N], Optional[GraphMatrix]]:
        """
        Project the graph as a square matrix, see MapGraph.to_matrix.

        Undirected links fill both (i, j) and (j, i).
        """
        live = [index for index, node in enumerate(self._nodes) if node is not None]
        if project is None or not live:
            return [], None

        ranks = {index: rank for rank, index in enumerate(live)}
        cells: Dict[PairKey, List[L]] = defaultdict(list)
        for key, entries in self._links.items():
            for link, forward in entries:
                source_index, destination_index = self._ends(key, forward)
                cells[(ranks[source_index], ranks[destination_index])].append(link)
                if not link.is_directed() and source_index != destination_index:
                    cells[(ranks[destination_index], ranks[source_index])].append(link)

        matrix = GraphMatrix(len(live), project([]), dtype=dtype)
        for (i, j), links in cells.items():
            matrix.set_value(i, j, project(links))

        return [self._nodes[index] for index in live], matrix

    def _node_index(self, node: N) -> Optional[int]:
        """Index of node, None if not found."""
        for index, current in enumerate(self._nodes):
            if current is not None and node.same_node(current):
                return index
        return None

    def _ensure_index(self, node: N) -> int:
        index = self._node_index(node)
        if index is not None:
            return index

        self._nodes.append(node)
        self._incoming.append(0)
        self._outgoing.append(0)
        self._undirected.append(0)
        return len(self._nodes) - 1

    def _compact(self) -> None:
        """Drop empty slots, renumbering live nodes in the same order."""
        live = [index for index, node in enumerate(self._nodes) if node is not None]
        ranks = {index: rank for rank, index in enumerate(live)}

        self._nodes = [self._nodes[index] for index in live]
        self._incoming = [self._incoming[index] for index in live]
        self._outgoing = [self._outgoing[index] for index in live]
        self._undirected = [self._undirected[index] for index in live]
        # ranks keep the order, so keys stay (lower, higher) and flags stay valid
        self._links = {
            (ranks[low], ranks[high]): entries for (low, high), entries in self._links.items()
        }
        logger.debug(f"Compacted {self._empty_slots} empty slots")
        self._empty_slots = 0

    @staticmethod
    def _ends(key: PairKey, forward: bool) -> PairKey:
        """Source and destination indexes of a stored link."""
        return key if forward else (key[1], key[0])

    def _count(self, key: PairKey, link: L, forward: bool, delta: int) -> None:
        """Apply delta to the counters of the extremities of a stored link."""
        if link.is_directed():
            source_index, destination_index = self._ends(key, forward)
            self._outgoing[source_index] += delta
            self._incoming[destination_index] += delta
            return

        self._undirected[key[0]] += delta
        if key[1] != key[0]:
            self._undirected[key[1]] += delta

    def _find(self, link: L) -> Optional[Tuple[PairKey, int]]:
        """Pair key and position of the same link, None if not stored."""
        source_index = self._node_index(link.source)
        destination_index = self._node_index(link.destination)
        if source_index is None or destination_index is None:
            return None

        key = (min(source_index, destination_index), max(source_index, destination_index))
        for position, (current, _) in enumerate(self._links.get(key, [])):
            if link.same_link(current):
                return key, position
        return None
