"""
Matrix-backed immutable graph.

Nodes are assigned dense indices in canonical order and edges are written
into an AdjacencyMatrix. Incident edges are rebuilt from the matrix on
every query.
"""

from typing import FrozenSet, Hashable, Iterable

from ..exceptions import NodeNotFoundError
from ..logging import get_logger
from .base import Graph, validate_graph
from .edge import Edge
from .matrix import AdjacencyMatrix
from .utils import node_index_map

logger = get_logger(__name__)


class AdjacencyGraph(Graph):
    """
    Immutable graph backed by an AdjacencyMatrix.

    ``edges()`` returns the edges exactly as given. ``adjacent_edges(node)``
    synthesizes fresh Edge objects ``Edge(node, neighbor, weight)`` from the
    matrix; they compare equal to the stored edges because edge equality is
    symmetric.

    Complexity:
        - construction: O(V^2 + E)
        - adjacent_edges: O(V)
    """

    def __init__(self, nodes: Iterable[Hashable] = (), edges: Iterable[Edge] = ()):
        """
        Build the graph.

        Args:
            nodes: Iterable of nodes.
            edges: Iterable of edges between those nodes.

        Raises:
            InvalidGraphError: If the edges do not fit the nodes.
        """
        self._nodes, self._edges = validate_graph(nodes, edges)
        self._node_indices, self._index_nodes = node_index_map(self._nodes)
        self._matrix = AdjacencyMatrix(len(self._index_nodes))

        for edge in self._edges:
            self._matrix.add_edge(self._node_indices[edge.a], self._node_indices[edge.b], edge.weight)

        logger.debug("Built AdjacencyGraph with %d nodes and %d edges", len(self._nodes), len(self._edges))

    @property
    def matrix(self) -> AdjacencyMatrix:
        """The underlying adjacency matrix (rows in canonical node order)."""
        return self._matrix

    def index_of(self, node: Hashable) -> int:
        """
        Return the matrix index assigned to ``node``.

        Raises:
            NodeNotFoundError: If ``node`` is not in the graph.
        """
        try:
            return self._node_indices[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def node_at(self, index: int) -> Hashable:
        """Return the node stored at matrix ``index``."""
        return self._index_nodes[index]

    def nodes(self) -> FrozenSet[Hashable]:
        return self._nodes

    def edges(self) -> FrozenSet[Edge]:
        return self._edges

    def adjacent_edges(self, node: Hashable) -> FrozenSet[Edge]:
        index = self.index_of(node)
        return frozenset(
            Edge(node, self._index_nodes[other], self._matrix.get_weight(index, other))
            for other in self._matrix.adjacent_indices(index)
        )
