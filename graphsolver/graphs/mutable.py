"""
Mutable graph.

Supports adding and removing nodes and edges after creation. Immutable
snapshots are produced with ``to_graph``.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Hashable, Iterable, Set

from ..exceptions import InvalidGraphError, NodeNotFoundError
from .base import Graph, check_weight, validate_graph
from .edge import Edge
from .utils import canonical_key


class MutableGraph(Graph):
    """
    Undirected weighted graph whose nodes and edges may change.

    The same invariants as for immutable graphs hold after every operation:
    edge endpoints are nodes of the graph and no two edges connect the same
    pair of nodes. Read methods return frozen snapshots, never live views.

    Example:
        >>> G = MutableGraph()
        >>> G.add_node('A')
        >>> G.add_node('B')
        >>> G.add_edge(Edge('A', 'B', 4))
        >>> G.to_graph().edges() == {Edge('A', 'B', 4)}
        True
    """

    def __init__(self, nodes: Iterable[Hashable] = (), edges: Iterable[Edge] = ()):
        node_set, edge_set = validate_graph(nodes, edges)
        self._adj: Dict[Hashable, Set[Edge]] = {node: set() for node in node_set}
        self._edges: Set[Edge] = set(edge_set)
        for edge in edge_set:
            self._adj[edge.a].add(edge)
            self._adj[edge.b].add(edge)

    @classmethod
    def of(cls, nodes: Iterable[Hashable] = (), edges: Iterable[Edge] = ()) -> MutableGraph:
        """Create a mutable graph from nodes and edges."""
        return cls(nodes, edges)

    def nodes(self) -> FrozenSet[Hashable]:
        return frozenset(self._adj)

    def edges(self) -> FrozenSet[Edge]:
        return frozenset(self._edges)

    def adjacent_edges(self, node: Hashable) -> FrozenSet[Edge]:
        if node not in self._adj:
            raise NodeNotFoundError(node)
        return frozenset(self._adj[node])

    def has_node(self, node: Hashable) -> bool:
        return node in self._adj

    def add_node(self, node: Hashable) -> None:
        """
        Add a node; adding an existing node is a no-op.

        Raises:
            InvalidGraphError: If another node has the same canonical key.
        """
        if node in self._adj:
            return
        key = canonical_key(node)
        for existing in self._adj:
            if canonical_key(existing) == key:
                raise InvalidGraphError(f"Nodes {existing!r} and {node!r} cannot be ordered apart")
        self._adj[node] = set()

    def remove_node(self, node: Hashable) -> None:
        """
        Remove a node together with its incident edges.

        Raises:
            NodeNotFoundError: If ``node`` is not in the graph.
        """
        if node not in self._adj:
            raise NodeNotFoundError(node)
        for edge in list(self._adj[node]):
            self._discard_edge(edge)
        del self._adj[node]

    def add_edge(self, edge: Edge) -> None:
        """
        Add an edge between two existing nodes.

        Adding an edge equal to one already present is a no-op.

        Raises:
            InvalidGraphError: If an endpoint is missing, the weight is not a
                storable integer, or a different edge already connects the
                same pair of nodes.
        """
        check_weight(edge)
        for endpoint in edge.endpoints():
            if endpoint not in self._adj:
                raise InvalidGraphError(f"Edge {edge} references unknown node {endpoint!r}")
        if edge in self._edges:
            return
        pair = frozenset(edge.endpoints())
        for existing in self._adj[edge.a]:
            if frozenset(existing.endpoints()) == pair:
                raise InvalidGraphError(f"Parallel edges {existing} and {edge} are not supported")
        self._edges.add(edge)
        self._adj[edge.a].add(edge)
        self._adj[edge.b].add(edge)

    def remove_edge(self, edge: Edge) -> None:
        """
        Remove an edge.

        Raises:
            InvalidGraphError: If the edge is not part of the graph.
        """
        if edge not in self._edges:
            raise InvalidGraphError(f"Edge {edge} is not part of the graph")
        self._discard_edge(edge)

    def _discard_edge(self, edge: Edge) -> None:
        self._edges.discard(edge)
        self._adj[edge.a].discard(edge)
        self._adj[edge.b].discard(edge)

    def to_mutable_graph(self) -> MutableGraph:
        return MutableGraph(self._adj, self._edges)

    def to_graph(self) -> Graph:
        """Return an immutable snapshot of the current state."""
        return Graph.of(self._adj, self._edges)
