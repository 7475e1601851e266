"""
Map-backed immutable graph.

Each node is mapped directly to the frozen set of edges incident to it.
"""

from typing import Dict, FrozenSet, Hashable, Iterable

from ..exceptions import NodeNotFoundError
from ..logging import get_logger
from .base import Graph, validate_graph
from .edge import Edge

logger = get_logger(__name__)


class BasicGraph(Graph):
    """
    Immutable graph storing a node -> incident edges mapping.

    Every edge is stored verbatim, including edges of weight 0.

    Complexity:
        - construction: O(V + E)
        - adjacent_edges: O(1)

    Example:
        >>> G = BasicGraph({'A', 'B'}, {Edge('A', 'B', 2)})
        >>> G.adjacent_edges('A') == {Edge('B', 'A', 2)}
        True
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

        incident: Dict[Hashable, set] = {node: set() for node in self._nodes}
        for edge in self._edges:
            incident[edge.a].add(edge)
            incident[edge.b].add(edge)
        self._backing: Dict[Hashable, FrozenSet[Edge]] = {
            node: frozenset(node_edges) for node, node_edges in incident.items()
        }

        logger.debug("Built BasicGraph with %d nodes and %d edges", len(self._nodes), len(self._edges))

    def nodes(self) -> FrozenSet[Hashable]:
        return self._nodes

    def edges(self) -> FrozenSet[Edge]:
        return self._edges

    def adjacent_edges(self, node: Hashable) -> FrozenSet[Edge]:
        try:
            return self._backing[node]
        except KeyError:
            raise NodeNotFoundError(node) from None
