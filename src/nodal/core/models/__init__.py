"""
Core domain models package for the graph engine.

This package provides the node and link contracts, their concrete
implementations, and the neighborhood view returned by graphs.
"""

from .base import L, Link, N, Node, WithId, WithLabels, WithProperties, join_labels, new_unique_id
from .link import TypePropertiesLink, UndirectedSimpleLink, ValuedLink
from .neighborhood import Neighborhood
from .node import IdNode, LabelsPropertiesNode, PropertiesNode

__all__ = [
    # Contracts
    "Node",
    "Link",
    "N",
    "L",
    "WithId",
    "WithLabels",
    "WithProperties",
    "join_labels",
    "new_unique_id",
    # Node models
    "IdNode",
    "PropertiesNode",
    "LabelsPropertiesNode",
    # Link models
    "UndirectedSimpleLink",
    "ValuedLink",
    "TypePropertiesLink",
    # Views
    "Neighborhood",
]
