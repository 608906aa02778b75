"""
Per node adjacency bookkeeping.

An AdjacencyRecord belongs to one node (its owner, implicit) and keeps:

* the links stored for the owner, grouped by the index of their other end
* running counters for incoming, outgoing and undirected degrees

Directed links are stored in the record of their source only, the record
of their destination only counts them. Undirected links are stored in the
records of both extremities.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List

from .iterators import SliceCursor
from .models import L, N, Neighborhood


@dataclass
class AdjacencyRecord(Generic[N, L]):
    """
    Links and degree counters of a node.

    Attributes:
        incoming_counter (int): Directed links ending at the owner
        outgoing_counter (int): Directed links starting from the owner
        undirected_counter (int): Undirected links touching the owner
        values (Dict[int, List[L]]): Stored links by index of their other end,
            no two links in a list are the same link
    """

    incoming_counter: int = 0
    outgoing_counter: int = 0
    undirected_counter: int = 0
    values: Dict[int, List[L]] = field(default_factory=dict)

    def add_link(self, destination_index: int, link: L) -> bool:
        """
        Store link towards destination_index, unless the same link is there.

        Returns:
            bool: True if the link was inserted
        """
        links = self.values.setdefault(destination_index, [])
        if any(link.same_link(current) for current in links):
            return False

        links.append(link)
        if link.is_directed():
            self.outgoing_counter += 1
        else:
            self.undirected_counter += 1
        return True

    def remove_link(self, destination_index: int, link: L) -> bool:
        """
        Remove the same link towards destination_index, if any.

        Returns:
            bool: True if a link was removed
        """
        links = self.values.get(destination_index)
        if not links:
            return False

        remaining = [current for current in links if not link.same_link(current)]
        if len(remaining) == len(links):
            return False

        if remaining:
            self.values[destination_index] = remaining
        else:
            del self.values[destination_index]

        if link.is_directed():
            self.outgoing_counter -= 1
        else:
            self.undirected_counter -= 1
        return True

    def remove_node(self, node_index: int) -> None:
        """Forget every link towards node_index and update counters."""
        links = self.values.pop(node_index, None)
        if not links:
            return

        directed = sum(1 for link in links if link.is_directed())
        self.outgoing_counter -= directed
        self.undirected_counter -= len(links) - directed

    def links_to(self, destination_index: int) -> List[L]:
        return list(self.values.get(destination_index, []))

    def all_links(self) -> List[L]:
        """Union of all stored links. Destinations are disjoint, so no duplicate."""
        result: List[L] = []
        for links in self.values.values():
            result.extend(links)
        return result

    def to_neighborhood(self, center: N) -> Neighborhood[N, L]:
        """Build the neighborhood of center, links are gathered on demand."""
        return Neighborhood(
            center_node=center,
            incoming_degree=self.incoming_counter,
            outgoing_degree=self.outgoing_counter,
            undirected_degree=self.undirected_counter,
            links_factory=lambda: SliceCursor(self.all_links()),
        )
