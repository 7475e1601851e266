"""Exception hierarchy for graphsolver.

Each error also derives from the built-in exception callers would expect
(``ValueError``, ``KeyError``, ``RuntimeError``) so existing handlers keep
working.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for all graphsolver errors."""


class InvalidGraphError(GraphError, ValueError):
    """Raised when nodes and edges do not form a valid graph."""


class NodeNotFoundError(GraphError, KeyError):
    """Raised when a node is queried that is not part of the graph."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(node)

    def __str__(self) -> str:
        return f"Node not found: {self.node!r}"


class NoPathError(GraphError, ValueError):
    """Raised when the target node cannot be reached from the start node."""

    def __init__(self, start: Hashable, end: Hashable):
        self.start = start
        self.end = end
        super().__init__(f"No path from {start!r} to {end!r}")


class GraphStateError(GraphError, RuntimeError):
    """Raised when internal solver bookkeeping is inconsistent."""


__all__ = [
    "GraphError",
    "InvalidGraphError",
    "NodeNotFoundError",
    "NoPathError",
    "GraphStateError",
]
