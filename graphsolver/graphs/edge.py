"""
Undirected weighted edge.

Edges compare equal regardless of endpoint order and sort by weight first,
so sorting a collection of edges gives the processing order used by
Kruskal's algorithm.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Hashable, Tuple

from ..exceptions import NodeNotFoundError
from .utils import CanonicalKey, canonical_key


@total_ordering
@dataclass(frozen=True, eq=False)
class Edge:
    """
    Immutable undirected edge between two nodes with an integer weight.

    ``Edge(a, b, w)`` and ``Edge(b, a, w)`` denote the same edge: they are
    equal and hash identically. Edges are totally ordered by weight, with
    ties broken by the canonical order of the endpoints. Within one graph
    canonical keys are unique, so the order is total over its edges.

    Attributes:
        a: First endpoint.
        b: Second endpoint.
        weight: Edge weight. Negative weights are accepted, although
            Dijkstra's algorithm assumes non-negative weights.

    Example:
        >>> Edge('A', 'B', 3) == Edge('B', 'A', 3)
        True
        >>> sorted([Edge('A', 'C', 3), Edge('A', 'B', 1)])[0]
        Edge(a='A', b='B', weight=1)
    """

    a: Hashable
    b: Hashable
    weight: int

    def endpoints(self) -> Tuple[Hashable, Hashable]:
        """Return the two endpoints as ``(a, b)``."""
        return self.a, self.b

    def other(self, node: Hashable) -> Hashable:
        """
        Return the endpoint opposite to ``node``.

        Raises:
            NodeNotFoundError: If ``node`` is not an endpoint of this edge.
        """
        if node == self.a:
            return self.b
        if node == self.b:
            return self.a
        raise NodeNotFoundError(node)

    def connects(self, node: Hashable) -> bool:
        """Return True if ``node`` is one of the endpoints."""
        return node == self.a or node == self.b

    def sort_key(self) -> Tuple[int, CanonicalKey, CanonicalKey]:
        """Key used for ordering: weight, then the sorted canonical endpoint keys."""
        key_a, key_b = canonical_key(self.a), canonical_key(self.b)
        if key_b < key_a:
            key_a, key_b = key_b, key_a
        return self.weight, key_a, key_b

    def _pair(self) -> frozenset:
        return frozenset((self.a, self.b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self._pair() == other._pair()

    def __hash__(self) -> int:
        return hash((self._pair(), self.weight))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key() < other.sort_key()
