"""
Identity and capability contracts for graph elements.

Nodes and links are compared with semantic predicates (same_node, same_link),
never with hashing or identity. Containers of nodes therefore scan with the
predicate instead of relying on dict or set membership.

Capabilities (ids, labels, properties) are runtime checkable protocols, so a
node may offer them without inheriting from anything but Node.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, TypeVar, runtime_checkable


def new_unique_id() -> str:
    """Return a new random unique id."""
    return str(uuid.uuid4())


class Node(ABC):
    """Most general definition of a graph vertex."""

    @abstractmethod
    def same_node(self, other: Optional["Node"]) -> bool:
        """Test if other is "the same as" this node."""


N = TypeVar("N", bound=Node)


class Link(ABC, Generic[N]):
    """
    Link between two nodes, directed or not, valued or not.

    No matter the direction, a link has a source and a destination. For
    undirected links, same_link must accept the swapped extremities as the
    same link. For directed links, sources and destinations must both match.
    """

    @property
    @abstractmethod
    def source(self) -> N:
        """Source of the link, or first extremity for undirected links."""

    @property
    @abstractmethod
    def destination(self) -> N:
        """Destination of the link, or second extremity for undirected links."""

    @abstractmethod
    def is_directed(self) -> bool:
        """Return True for directed links, False for undirected ones."""

    @abstractmethod
    def same_link(self, other: Optional["Link[N]"]) -> bool:
        """Test if other is the same link as this one."""

    def opposite(self, node: N) -> N:
        """Return the extremity of the link seen from node."""
        if self.source.same_node(node):
            return self.destination
        return self.source


L = TypeVar("L", bound=Link)


@runtime_checkable
class WithId(Protocol):
    """Elements identified by a unique string id."""

    @property
    def id(self) -> str:
        """Unique id of the element."""
        ...


@runtime_checkable
class WithLabels(Protocol):
    """Elements carrying a set of labels."""

    def add_label(self, label: str) -> None:
        """Add a label, no duplicate."""
        ...

    def labels(self) -> List[str]:
        """Return labels as a sorted list."""
        ...

    def remove_label(self, label: str) -> None:
        """Remove a label, if any."""
        ...


@runtime_checkable
class WithProperties(Protocol):
    """Elements carrying untyped string properties."""

    def get_property(self, key: str) -> Optional[str]:
        """Return the value of a property, None if not set."""
        ...

    def set_property(self, key: str, value: str) -> None:
        """Set the value of a property."""
        ...

    def remove_property(self, key: str) -> None:
        """Remove a property by key."""
        ...

    def property_keys(self) -> List[str]:
        """Return the keys of the available properties."""
        ...


def join_labels(element: WithLabels) -> str:
    """Serialize labels the standard way: sorted, comma separated."""
    return ",".join(sorted(element.labels()))
