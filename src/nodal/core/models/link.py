"""
Concrete link models.

This module defines the ready to use link implementations:

* UndirectedSimpleLink: the simplest undirected link, no value
* ValuedLink: a link carrying a value, directed or not
* TypePropertiesLink: a directed typed link with properties (property graph model)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional

from .base import Link, N


@dataclass(frozen=True, eq=False)
class UndirectedSimpleLink(Link[N], Generic[N]):
    """
    Undirected link between two extremities.

    Attributes:
        link_source (N): First extremity
        link_destination (N): Second extremity
    """

    link_source: N
    link_destination: N

    @property
    def source(self) -> N:
        return self.link_source

    @property
    def destination(self) -> N:
        return self.link_destination

    def is_directed(self) -> bool:
        return False

    def same_link(self, other: Optional[Link[N]]) -> bool:
        """Same class, and same extremities in any order."""
        if not isinstance(other, UndirectedSimpleLink):
            return False
        if self.link_source.same_node(other.link_source) and self.link_destination.same_node(
            other.link_destination
        ):
            return True
        return self.link_source.same_node(
            other.link_destination
        ) and self.link_destination.same_node(other.link_source)


@dataclass(frozen=True, eq=False)
class ValuedLink(Link[N], Generic[N]):
    """
    Link carrying a value, such as a distance or a weight.

    Attributes:
        link_source (N): Source, or first extremity for undirected links
        link_destination (N): Destination, or second extremity for undirected links
        value (Any): Value of the link, compared with ==
        directed (bool): True for directed links
    """

    link_source: N
    link_destination: N
    value: Any
    directed: bool = True

    @classmethod
    def directed_link(cls, source: N, destination: N, value: Any) -> "ValuedLink[N]":
        return cls(source, destination, value, True)

    @classmethod
    def undirected_link(cls, source: N, destination: N, value: Any) -> "ValuedLink[N]":
        return cls(source, destination, value, False)

    @property
    def source(self) -> N:
        return self.link_source

    @property
    def destination(self) -> N:
        return self.link_destination

    def is_directed(self) -> bool:
        return self.directed

    def same_link(self, other: Optional[Link[N]]) -> bool:
        """
        Same direction, same value, matching extremities.

        Directed links need equal sources and equal destinations. Undirected
        links also match when swapped.
        """
        if not isinstance(other, ValuedLink):
            return False
        if other.directed != self.directed or other.value != self.value:
            return False

        if self.directed:
            return self.link_source.same_node(
                other.link_source
            ) and self.link_destination.same_node(other.link_destination)
        if self.link_source.same_node(other.link_destination):
            return self.link_destination.same_node(other.link_source)
        if self.link_source.same_node(other.link_source):
            return self.link_destination.same_node(other.link_destination)
        return False


@dataclass(eq=False)
class TypePropertiesLink(Link[N], Generic[N]):
    """
    Directed link with a type and untyped properties.

    Attributes:
        link_type (str): Type of the link
        link_source (N): Source of the link
        link_destination (N): Destination of the link
        link_properties (Dict[str, str]): Properties as key values
    """

    link_type: str
    link_source: N
    link_destination: N
    link_properties: Dict[str, str] = field(default_factory=dict)

    @property
    def source(self) -> N:
        return self.link_source

    @property
    def destination(self) -> N:
        return self.link_destination

    def is_directed(self) -> bool:
        return True

    def same_link(self, other: Optional[Link[N]]) -> bool:
        """Same type, same source and same destination."""
        if not isinstance(other, TypePropertiesLink):
            return False
        if other.link_type != self.link_type:
            return False
        return self.link_source.same_node(other.link_source) and self.link_destination.same_node(
            other.link_destination
        )

    def properties(self) -> Dict[str, str]:
        """Return a copy of the properties."""
        return dict(self.link_properties)

    def get_property(self, key: str) -> Optional[str]:
        return self.link_properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.link_properties[key] = value

    def remove_property(self, key: str) -> None:
        self.link_properties.pop(key, None)

    def property_keys(self) -> List[str]:
        return list(self.link_properties.keys())
