"""
Core type definitions and protocols.

This module provides the protocols algorithms rely on, so that any graph
implementation (in memory, matrix based, or backed by a storage system) can
be analyzed without the algorithms knowing its internals.
"""

from typing import Callable, Optional, Protocol

from .iterators import Cursor
from .models import Link, Neighborhood, Node

NodeGenerator = Callable[[], Node]
LinkGenerator = Callable[[Node, Node], Link]
DegreeCounter = Callable[[Neighborhood], int]


class GraphProtocol(Protocol):
    """Protocol defining required graph operations."""

    def add_node(self, node: Node) -> None:
        """Add a node, nothing happens for an existing one."""
        ...

    def remove_node(self, node: Node) -> None:
        """Remove a node and its links, nothing happens for an unknown one."""
        ...

    def add_link(self, link: Link) -> None:
        """Add a link and its missing extremities, nothing happens for an existing one."""
        ...

    def remove_link(self, link: Link) -> None:
        """Remove a link but keep its extremities."""
        ...

    def all_nodes(self) -> Cursor[Node]:
        """Cursor over all the nodes, each node appears exactly once."""
        ...

    def neighbors(self, node: Node) -> Optional[Neighborhood]:
        """Neighborhood of a node, None if node is not in the graph."""
        ...
