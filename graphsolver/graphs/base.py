"""
Graph contract shared by all graph representations.

A graph is a node set plus a set of undirected weighted edges whose
endpoints are members of the node set. Representations differ only in how
they answer ``adjacent_edges``.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, FrozenSet, Hashable, Iterable, Tuple

from ..exceptions import InvalidGraphError
from .edge import Edge
from .matrix import WEIGHT_MAX, WEIGHT_MIN
from .utils import CanonicalKey, canonical_key

if TYPE_CHECKING:
    from .mutable import MutableGraph


def check_weight(edge: Edge) -> None:
    """
    Check that an edge weight is an integer that every representation can store.

    Raises:
        InvalidGraphError: If the weight is not integral or outside the
            int64 range of the matrix storage.
    """
    if not isinstance(edge.weight, numbers.Integral):
        raise InvalidGraphError(f"Edge {edge} has non-integer weight {edge.weight!r}")
    if not WEIGHT_MIN <= edge.weight <= WEIGHT_MAX:
        raise InvalidGraphError(f"Edge {edge} has weight outside [{WEIGHT_MIN}, {WEIGHT_MAX}]")


def check_canonical_keys(nodes: Iterable[Hashable]) -> None:
    """
    Check that no two nodes share a canonical ordering key.

    Raises:
        InvalidGraphError: If two distinct nodes have the same key.
    """
    seen: Dict[CanonicalKey, Hashable] = {}
    for node in nodes:
        key = canonical_key(node)
        if key in seen:
            raise InvalidGraphError(f"Nodes {seen[key]!r} and {node!r} cannot be ordered apart")
        seen[key] = node


def validate_graph(
    nodes: Iterable[Hashable], edges: Iterable[Edge]
) -> Tuple[FrozenSet[Hashable], FrozenSet[Edge]]:
    """
    Check that nodes and edges form a valid undirected simple graph.

    Args:
        nodes: Iterable of hashable nodes.
        edges: Iterable of Edge instances.

    Returns:
        Tuple of (frozen node set, frozen edge set).

    Raises:
        InvalidGraphError: If an edge references a node outside ``nodes``,
            two different edges connect the same pair of nodes, an edge
            weight is not a storable integer, or two nodes share a
            canonical key.
    """
    node_set = frozenset(nodes)
    edge_set = frozenset(edges)
    check_canonical_keys(node_set)

    seen: Dict[FrozenSet[Hashable], Edge] = {}
    for edge in edge_set:
        check_weight(edge)
        for endpoint in edge.endpoints():
            if endpoint not in node_set:
                raise InvalidGraphError(f"Edge {edge} references unknown node {endpoint!r}")
        pair = frozenset(edge.endpoints())
        if pair in seen:
            raise InvalidGraphError(f"Parallel edges {seen[pair]} and {edge} are not supported")
        seen[pair] = edge

    return node_set, edge_set


class Graph(ABC):
    """
    Abstract undirected weighted graph.

    Subclasses must provide ``nodes``, ``edges`` and ``adjacent_edges``.
    The conversion methods have defaults suitable for immutable graphs.
    """

    @abstractmethod
    def nodes(self) -> FrozenSet[Hashable]:
        """Return the set of nodes."""

    @abstractmethod
    def edges(self) -> FrozenSet[Edge]:
        """Return the set of edges."""

    @abstractmethod
    def adjacent_edges(self, node: Hashable) -> FrozenSet[Edge]:
        """
        Return the edges incident to ``node``.

        Raises:
            NodeNotFoundError: If ``node`` is not in the graph.
        """

    def to_mutable_graph(self) -> MutableGraph:
        """Return a mutable copy of this graph."""
        from .mutable import MutableGraph

        return MutableGraph(self.nodes(), self.edges())

    def to_graph(self) -> Graph:
        """Return an immutable version of this graph (``self`` if already immutable)."""
        return self

    def has_node(self, node: Hashable) -> bool:
        """Return True if ``node`` is part of the graph."""
        return node in self.nodes()

    def total_weight(self) -> int:
        """Return the sum of all edge weights."""
        return sum(edge.weight for edge in self.edges())

    def __contains__(self, node: object) -> bool:
        return node in self.nodes()

    def __len__(self) -> int:
        return len(self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self.nodes())}, edges={len(self.edges())})"

    @staticmethod
    def of(nodes: Iterable[Hashable] = (), edges: Iterable[Edge] = ()) -> Graph:
        """
        Create an immutable graph with the default representation.

        Args:
            nodes: Iterable of nodes.
            edges: Iterable of edges between those nodes.

        Returns:
            A BasicGraph.
        """
        from .basic import BasicGraph

        return BasicGraph(nodes, edges)

    @staticmethod
    def empty() -> Graph:
        """Return an immutable graph without nodes or edges."""
        return Graph.of()
