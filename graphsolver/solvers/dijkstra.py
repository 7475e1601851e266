"""
Dijkstra's single-source shortest path algorithm.

All state of a run lives in the returned ShortestPaths object, so one
calculator can be reused and shared between callers.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ..diagnostics import assert_non_negative_weights, is_debug_enabled
from ..exceptions import GraphStateError, NodeNotFoundError, NoPathError
from ..graphs.utils import node_index_map
from ..logging import get_logger
from .base import PathCalculator

logger = get_logger(__name__)

# Heap entries: (distance, canonical index, node); the index keeps nodes from being compared.
_HeapEntry = Tuple[float, int, Hashable]


@dataclass
class ShortestPaths:
    """
    Result of a single-source Dijkstra run.

    Attributes:
        start: Source node of the run.
        distances: Mapping node -> shortest distance from ``start``
            (``math.inf`` if unreachable).
        predecessors: Mapping node -> previous node on a shortest path
            (None for ``start`` and for unreachable nodes).
    """

    start: Hashable
    distances: Dict[Hashable, float] = field(default_factory=dict)
    predecessors: Dict[Hashable, Optional[Hashable]] = field(default_factory=dict)

    def _require(self, node: Hashable) -> None:
        if node not in self.distances:
            raise NodeNotFoundError(node)

    def distance_to(self, node: Hashable) -> float:
        """Return the shortest distance from ``start`` to ``node``."""
        self._require(node)
        return self.distances[node]

    def is_reachable(self, node: Hashable) -> bool:
        """Return True if ``node`` can be reached from ``start``."""
        return self.distance_to(node) != math.inf

    def path_to(self, end: Hashable) -> List[Hashable]:
        """
        Reconstruct the shortest path from ``start`` to ``end``.

        The walk along predecessors is bounded by the number of nodes, so a
        broken predecessor chain is reported instead of looping.

        Returns:
            List of nodes from ``start`` to ``end``, both inclusive.

        Raises:
            NodeNotFoundError: If ``end`` is not part of the graph.
            NoPathError: If ``end`` is unreachable from ``start``.
        """
        self._require(end)

        path = [end]
        current = end
        for _ in range(len(self.distances)):
            if current == self.start:
                path.reverse()
                return path
            current = self.predecessors[current]
            if current is None:
                break
            path.append(current)

        raise NoPathError(self.start, end)


class DijkstraPathCalculator(PathCalculator):
    """
    Shortest path calculator using Dijkstra's algorithm.

    Every node is settled on each run (no early exit once ``end`` is
    reached). Among nodes with equal tentative distance the one that comes
    first in canonical node order is settled first, so results are
    reproducible.

    Complexity: O((V + E) log V) using a binary heap.

    Example:
        >>> G = Graph.of({'A', 'B', 'C'}, {Edge('A', 'B', 1), Edge('B', 'C', 1)})
        >>> DijkstraPathCalculator(G).calculate_path('A', 'C')
        ['A', 'B', 'C']
    """

    def calculate_path(self, start: Hashable, end: Hashable) -> List[Hashable]:
        if not self.graph.has_node(end):
            raise NodeNotFoundError(end)
        return self.shortest_paths(start).path_to(end)

    def shortest_paths(self, start: Hashable) -> ShortestPaths:
        """
        Compute shortest distances and predecessors from ``start`` to all nodes.

        Args:
            start: Source node.

        Returns:
            ShortestPaths for this run.

        Raises:
            NodeNotFoundError: If ``start`` is not in the graph.
            ValueError: In debug mode, if the graph has a negative edge weight.
        """
        graph = self.graph
        if not graph.has_node(start):
            raise NodeNotFoundError(start)
        if is_debug_enabled():
            assert_non_negative_weights(graph.edges())

        order, _ = node_index_map(graph.nodes())
        result = ShortestPaths(start)
        for node in graph.nodes():
            result.distances[node] = 0 if node == start else math.inf
            result.predecessors[node] = None
        remaining: Set[Hashable] = set(graph.nodes())

        heap: List[_HeapEntry] = [(result.distances[node], order[node], node) for node in remaining]
        heapq.heapify(heap)

        while remaining:
            node = _extract_min(heap, remaining, result.distances)
            remaining.remove(node)

            for edge in graph.adjacent_edges(node):
                # Undirected: the edge may be stored with ``node`` on either side
                for source, target in ((edge.a, edge.b), (edge.b, edge.a)):
                    if target in remaining and _relax(source, target, edge.weight, result):
                        heapq.heappush(heap, (result.distances[target], order[target], target))

        logger.debug(
            "Dijkstra from %r settled %d nodes, %d reachable",
            start,
            len(result.distances),
            sum(1 for d in result.distances.values() if d != math.inf),
        )
        return result


def _extract_min(
    heap: List[_HeapEntry], remaining: Set[Hashable], distances: Dict[Hashable, float]
) -> Hashable:
    """Pop the unvisited node with minimal distance, skipping stale heap entries."""
    while heap:
        dist, _, node = heapq.heappop(heap)
        if node in remaining and dist == distances[node]:
            return node
    raise GraphStateError("Heap exhausted while unvisited nodes remain")


def _relax(source: Hashable, target: Hashable, weight: int, result: ShortestPaths) -> bool:
    """Shorten the distance to ``target`` via ``source`` if possible."""
    candidate = result.distances[source] + weight
    if candidate < result.distances[target]:
        result.distances[target] = candidate
        result.predecessors[target] = source
        return True
    return False
