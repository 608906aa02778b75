"""
Neighborhood of a node.

A neighborhood answers degree questions without loading any link: the three
degrees are counters maintained by the graph on every mutation. Links are
only gathered when links() is called.
"""

from dataclasses import dataclass
from typing import Callable, Generic

from ..iterators import Cursor, EmptyCursor
from .base import L, N


@dataclass(frozen=True)
class Neighborhood(Generic[N, L]):
    """
    Degrees and lazily built links of a node.

    Attributes:
        center_node (N): Node the neighborhood is about
        incoming_degree (int): Number of directed links ending at the node
        outgoing_degree (int): Number of directed links starting from the node
        undirected_degree (int): Number of undirected links touching the node
        links_factory (Callable[[], Cursor[L]]): Builds a cursor over the
            links stored for the node
    """

    center_node: N
    incoming_degree: int = 0
    outgoing_degree: int = 0
    undirected_degree: int = 0
    links_factory: Callable[[], Cursor[L]] = EmptyCursor

    def links(self) -> Cursor[L]:
        """
        Return a new cursor over the links of the node.

        Links are the outgoing directed links and the undirected links of the
        node. They are gathered at call time, not when the neighborhood is built.
        """
        return self.links_factory()

    def is_isolated(self) -> bool:
        """Return True when the node has no link at all."""
        return self.incoming_degree == 0 and self.outgoing_degree == 0 and self.undirected_degree == 0
