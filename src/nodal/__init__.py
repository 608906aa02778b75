"""
Nodal - Generic In-Memory Graph Engine

This package provides a generic graph engine working on any node and link
types. It includes:

- Node and link models, directed or not, with labels and properties
- Lazy cursors to walk graph content
- Sparse and dense adjacency engines with exact degree bookkeeping
- Components, statistics and random graph algorithms
- GEXF export and a command line generator
"""

__version__ = "0.1.0"

from .core.graph import MapGraph
from .core.models import IdNode, UndirectedSimpleLink

__all__ = ["MapGraph", "IdNode", "UndirectedSimpleLink", "__version__"]
