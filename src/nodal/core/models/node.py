"""
Concrete node models.

This module defines the ready to use node implementations:

* IdNode: just an id, equal to any node exposing the same id
* PropertiesNode: an id and string properties
* LabelsPropertiesNode: an id, labels and string properties (property graph model)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ...utils.validation import validate_dataclass
from .base import Node, WithId, new_unique_id


@validate_dataclass
@dataclass(frozen=True)
class IdNode(Node):
    """
    Node identified by its id only.

    Attributes:
        node_id (str): Unique id of the node
    """

    node_id: str

    def __post_init__(self):
        """Validate node after initialization."""
        if not self.node_id.strip():
            raise ValueError("node id must be a non-empty string")

    @property
    def id(self) -> str:
        return self.node_id

    @classmethod
    def random(cls) -> "IdNode":
        """Return a new node with a random id."""
        return cls(new_unique_id())

    def same_node(self, other: Optional[Node]) -> bool:
        """
        Compare ids.

        other does not have to be an IdNode, any node with an id matches when
        the ids are equal.
        """
        return isinstance(other, WithId) and other.id == self.node_id


@dataclass(eq=False)
class PropertiesNode(Node):
    """
    Node with an id and untyped properties.

    Attributes:
        node_id (str): Unique id of the node
        node_properties (Dict[str, str]): Properties as key values
    """

    node_id: str = field(default_factory=new_unique_id)
    node_properties: Dict[str, str] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.node_id

    def same_node(self, other: Optional[Node]) -> bool:
        """Same class and same id."""
        return isinstance(other, PropertiesNode) and other.node_id == self.node_id

    def get_property(self, key: str) -> Optional[str]:
        return self.node_properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.node_properties[key] = value

    def remove_property(self, key: str) -> None:
        self.node_properties.pop(key, None)

    def property_keys(self) -> List[str]:
        """Return all keys, in no particular order."""
        return list(self.node_properties.keys())


@dataclass(eq=False)
class LabelsPropertiesNode(Node):
    """
    Node with an id, a set of labels and untyped properties.

    This is the property graph model used by graph databases such as Neo4j.

    Attributes:
        node_id (str): Unique id of the node
        node_labels (Set[str]): Labels, no duplicate
        node_properties (Dict[str, str]): Properties as key values
    """

    node_id: str = field(default_factory=new_unique_id)
    node_labels: Set[str] = field(default_factory=set)
    node_properties: Dict[str, str] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.node_id

    def same_node(self, other: Optional[Node]) -> bool:
        """Same class and same id."""
        return isinstance(other, LabelsPropertiesNode) and other.node_id == self.node_id

    def add_label(self, label: str) -> None:
        self.node_labels.add(label)

    def labels(self) -> List[str]:
        """Labels sorted, so that two nodes compare their labels by order."""
        return sorted(self.node_labels)

    def remove_label(self, label: str) -> None:
        self.node_labels.discard(label)

    def properties(self) -> Dict[str, str]:
        """Return a copy of the properties."""
        return dict(self.node_properties)

    def get_property(self, key: str) -> Optional[str]:
        return self.node_properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.node_properties[key] = value

    def remove_property(self, key: str) -> None:
        self.node_properties.pop(key, None)

    def property_keys(self) -> List[str]:
        return list(self.node_properties.keys())
