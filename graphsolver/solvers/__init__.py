"""
Graph solvers for graphsolver.

- DijkstraPathCalculator: single-source shortest paths
- KruskalMSTCalculator: minimum spanning tree / forest
"""

from .base import MSTCalculator, MSTCalculatorFactory, PathCalculator, PathCalculatorFactory
from .dijkstra import DijkstraPathCalculator, ShortestPaths
from .kruskal import KruskalMSTCalculator, UnionFind

__all__ = [
    "PathCalculator",
    "MSTCalculator",
    "PathCalculatorFactory",
    "MSTCalculatorFactory",
    "DijkstraPathCalculator",
    "ShortestPaths",
    "KruskalMSTCalculator",
    "UnionFind",
]
