"""
Directed graph keyed by plain values.

DirectedValuesGraph is the lightweight alternative to MapGraph when nodes are
hashable values (strings, numbers, tuples) and each link carries one value,
for instance "person A" -- 10.0 --> "course about networks".
"""

from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

NV = TypeVar("NV", bound=Hashable)
LV = TypeVar("LV")


class DirectedValuesGraph(Generic[NV, LV]):
    """
    Directed graph as a map of maps: source -> destination -> link value.

    There is at most one link per ordered pair of nodes, setting a link again
    overwrites its value.
    """

    def __init__(self):
        self._content: Dict[NV, Dict[NV, LV]] = {}

    def set_link(self, source: NV, destination: NV, value: LV) -> None:
        """Set the value of source -> destination, adding missing nodes."""
        self._content.setdefault(source, {})[destination] = value
        self._content.setdefault(destination, {})

    def remove_link(self, source: NV, destination: NV) -> None:
        """Remove the link, keep the nodes."""
        self._content.get(source, {}).pop(destination, None)

    def add_node(self, node: NV) -> None:
        """Add the node, does nothing for an existing node."""
        self._content.setdefault(node, {})

    def remove_node(self, node: NV) -> None:
        """Remove the node and all the links to or from it."""
        for destinations in self._content.values():
            destinations.pop(node, None)
        self._content.pop(node, None)

    def has_node(self, node: NV) -> bool:
        return node in self._content

    def nodes(self) -> List[NV]:
        return list(self._content)

    def neighbors(self, source: NV) -> Optional[Dict[NV, LV]]:
        """
        Return the destinations of source with their link values.

        Returns:
            Optional[Dict[NV, LV]]: A copy of the destinations, None if source
                is unknown or has no outgoing link
        """
        destinations = self._content.get(source)
        if not destinations:
            return None
        return dict(destinations)

    def predecessors(self, destination: NV) -> Dict[NV, LV]:
        """Return the sources linked to destination with their link values."""
        return {
            source: destinations[destination]
            for source, destinations in self._content.items()
            if destination in destinations
        }

    def link_value(self, source: NV, destination: NV) -> Tuple[Optional[LV], bool]:
        """
        Return the value of source -> destination.

        Returns:
            Tuple[Optional[LV], bool]: (value, True) if the link exists,
                (None, False) otherwise
        """
        destinations = self._content.get(source)
        if destinations is None or destination not in destinations:
            return None, False
        return destinations[destination], True
