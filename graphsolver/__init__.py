"""graphsolver - undirected weighted graphs with shortest path and spanning tree solvers."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Errors
from .exceptions import (
    GraphError,
    GraphStateError,
    InvalidGraphError,
    NodeNotFoundError,
    NoPathError,
)

# Graph representations
from .graphs import (
    AdjacencyGraph,
    AdjacencyMatrix,
    BasicGraph,
    Edge,
    Graph,
    MutableGraph,
    node_index_map,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Solvers
from .solvers import (
    DijkstraPathCalculator,
    KruskalMSTCalculator,
    MSTCalculator,
    PathCalculator,
    ShortestPaths,
    UnionFind,
)

__all__ = [
    "__version__",
    # Graphs
    "Edge",
    "AdjacencyMatrix",
    "Graph",
    "AdjacencyGraph",
    "BasicGraph",
    "MutableGraph",
    "node_index_map",
    # Solvers
    "PathCalculator",
    "MSTCalculator",
    "DijkstraPathCalculator",
    "ShortestPaths",
    "KruskalMSTCalculator",
    "UnionFind",
    # Errors
    "GraphError",
    "InvalidGraphError",
    "NodeNotFoundError",
    "NoPathError",
    "GraphStateError",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
