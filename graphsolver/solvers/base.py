"""Calculator contracts for path and spanning tree solvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Hashable, List

from ..graphs import Graph


class PathCalculator(ABC):
    """
    Computes paths between two nodes of a fixed graph.

    Args:
        graph: Graph to calculate paths in.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    @abstractmethod
    def calculate_path(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """
        Return the nodes of a path from ``start`` to ``end``, both inclusive.

        Raises:
            NodeNotFoundError: If ``start`` or ``end`` is not in the graph.
            NoPathError: If ``end`` cannot be reached from ``start``.
        """


class MSTCalculator(ABC):
    """
    Computes a minimum spanning tree (or forest) of a fixed graph.

    Args:
        graph: Graph to calculate the spanning tree for.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    @abstractmethod
    def calculate_mst(self) -> Graph:
        """Return a graph over all nodes containing only the spanning tree edges."""


# Calculator classes are themselves factories of these types.
PathCalculatorFactory = Callable[[Graph], PathCalculator]
MSTCalculatorFactory = Callable[[Graph], MSTCalculator]
