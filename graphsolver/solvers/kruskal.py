"""
Kruskal's minimum spanning tree algorithm.

Edges are processed in ascending Edge order and accepted when they join two
different groups of nodes, tracked with a union-find structure.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from typing import Dict, FrozenSet, Hashable, Iterable, List, Set, Tuple

from ..diagnostics import assert_spanning_forest, is_debug_enabled
from ..exceptions import GraphStateError
from ..graphs import Edge, Graph
from ..graphs.utils import canonical_key
from ..logging import get_logger
from .base import MSTCalculator

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by size.

    Each group initially holds a single node. Merging moves the smaller
    group under the larger one; on equal sizes the group of the first
    argument is merged into the group of the second.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        """
        Initialize union-find with one singleton group per node.

        Args:
            nodes: Iterable of nodes.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.size[node] = 1

        self._count = len(self.parent)

    def find(self, x: Hashable) -> Hashable:
        """
        Find the representative of the group containing x, compressing the path.

        Raises:
            GraphStateError: If x was never added.
        """
        if x not in self.parent:
            raise GraphStateError(f"No group contains node {x!r}")
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the groups containing x and y.

        Returns:
            True if the groups were merged, False if x and y were already
            in the same group.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.size[root_x] > self.size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_x] = root_y
        self.size[root_y] += self.size.pop(root_x)
        self._count -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Return True if x and y are in the same group."""
        return self.find(x) == self.find(y)

    def groups(self) -> List[FrozenSet[Hashable]]:
        """
        Return all groups, ordered by their smallest member in canonical order.
        """
        members: Dict[Hashable, Set[Hashable]] = {}
        for node in self.parent:
            members.setdefault(self.find(node), set()).add(node)
        return sorted(
            (frozenset(group) for group in members.values()),
            key=lambda group: min(canonical_key(node) for node in group),
        )

    def __len__(self) -> int:
        return self._count


class KruskalMSTCalculator(MSTCalculator):
    """
    Minimum spanning tree calculator using Kruskal's algorithm.

    Edges of equal weight are processed in Edge order (canonical endpoint
    order), so the same graph always yields the same tree. For a
    disconnected graph the result is a minimum spanning forest; it contains
    ``len(nodes) - 1`` edges only if the input is connected.

    Complexity: O(E log E) for sorting plus near-constant union-find operations.

    Example:
        >>> G = Graph.of({'A', 'B', 'C'}, {Edge('A', 'B', 1), Edge('B', 'C', 2), Edge('A', 'C', 3)})
        >>> KruskalMSTCalculator(G).calculate_mst().total_weight()
        3
    """

    def calculate_mst(self) -> Graph:
        accepted, _ = self._run()
        return Graph.of(self.graph.nodes(), accepted)

    def spanning_groups(self) -> List[FrozenSet[Hashable]]:
        """
        Return the node groups joined by the spanning forest.

        These are the connected components of the graph.
        """
        _, groups = self._run()
        return groups.groups()

    def _run(self) -> Tuple[List[Edge], UnionFind]:
        nodes = self.graph.nodes()
        groups = UnionFind(nodes)
        accepted: List[Edge] = []

        for edge in sorted(self.graph.edges()):
            if groups.union(edge.a, edge.b):
                accepted.append(edge)

        if is_debug_enabled():
            assert_spanning_forest(len(accepted), len(nodes), len(groups))

        logger.debug(
            "Kruskal accepted %d of %d edges, %d groups",
            len(accepted),
            len(self.graph.edges()),
            len(groups),
        )
        return accepted, groups
