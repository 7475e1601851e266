"""
Graph representations for graphsolver.

This package provides:
- Edge, an immutable undirected weighted edge
- AdjacencyMatrix, symmetric integer matrix storage
- Graph, the abstract read contract
- AdjacencyGraph (matrix-backed) and BasicGraph (map-backed) immutable graphs
- MutableGraph for incremental construction

All node orderings are deterministic and use the string form of each node.
"""

from .adjacency import AdjacencyGraph
from .base import Graph, validate_graph
from .basic import BasicGraph
from .edge import Edge
from .matrix import AdjacencyMatrix
from .mutable import MutableGraph
from .utils import canonical_key, node_index_map, sorted_nodes

__all__ = [
    "Edge",
    "AdjacencyMatrix",
    "Graph",
    "AdjacencyGraph",
    "BasicGraph",
    "MutableGraph",
    "validate_graph",
    "canonical_key",
    "node_index_map",
    "sorted_nodes",
]
