"""Core graph functionality."""

from .exceptions import (
    EmptySetError,
    ExportError,
    GraphOperationError,
    InvalidInputError,
    IterationError,
    JoinedError,
    ValidationError,
)
from .iterators import (
    CompositeCursor,
    Cursor,
    DynamicCursor,
    EmptyCursor,
    MapCursor,
    MapFilterCursor,
    SliceCursor,
    collect,
)
from .models import (
    IdNode,
    LabelsPropertiesNode,
    Link,
    Neighborhood,
    Node,
    PropertiesNode,
    TypePropertiesLink,
    UndirectedSimpleLink,
    ValuedLink,
)
from .sets import AbstractSet, ListSet
from .types import GraphProtocol
from .matrix import GraphMatrix
from .graph import MapGraph
from .matrix_graph import AdjacencyMatrixGraph
from .value_graph import DirectedValuesGraph
from .graph_operations.components import ComponentAnalysis, ComponentResult
from .graph_operations.metrics import MetricsCalculator, NetworkStatistics, StatisticsResult
from .graph_operations.randoms import RandomGraphGenerator, generate_complete_undirected_graph
from .graph_operations.serialization import GexfExporter

__all__ = [
    "AbstractSet",
    "AdjacencyMatrixGraph",
    "ComponentAnalysis",
    "ComponentResult",
    "CompositeCursor",
    "Cursor",
    "DirectedValuesGraph",
    "DynamicCursor",
    "EmptyCursor",
    "EmptySetError",
    "ExportError",
    "GexfExporter",
    "GraphMatrix",
    "GraphOperationError",
    "GraphProtocol",
    "IdNode",
    "InvalidInputError",
    "IterationError",
    "JoinedError",
    "LabelsPropertiesNode",
    "Link",
    "ListSet",
    "MapCursor",
    "MapFilterCursor",
    "MapGraph",
    "MetricsCalculator",
    "Neighborhood",
    "NetworkStatistics",
    "Node",
    "PropertiesNode",
    "RandomGraphGenerator",
    "SliceCursor",
    "StatisticsResult",
    "TypePropertiesLink",
    "UndirectedSimpleLink",
    "ValidationError",
    "ValuedLink",
    "collect",
    "generate_complete_undirected_graph",
]
