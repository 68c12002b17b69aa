"""
Edge-list graph algorithms.

Depth-first and breadth-first traversal, component discovery and cycle
detection over a single in-memory graph with vertex ids ``1..n``.
"""

from .components import Component, find_components, weak_components
from .config import ConfigError, GraphConfig
from .cycles import has_cycle, topological_order
from .graph import (
    MAX_VERTICES,
    Edge,
    Graph,
    GraphError,
    GraphInputError,
    TraversalStrategy,
    Vertex,
    VertexRangeError,
)
from .loader import load_graph, read_graph, read_vertex_count

__all__ = [
    # Graph structure
    "Graph",
    "Vertex",
    "Edge",
    "MAX_VERTICES",
    "TraversalStrategy",
    # Errors
    "GraphError",
    "VertexRangeError",
    "GraphInputError",
    "ConfigError",
    # Loading
    "read_graph",
    "read_vertex_count",
    "load_graph",
    # Algorithms
    "Component",
    "find_components",
    "weak_components",
    "has_cycle",
    "topological_order",
    # Configuration
    "GraphConfig",
]
