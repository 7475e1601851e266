"""Grid network example.

This example builds a small road grid with random integer travel costs,
routes between two corners with Dijkstra's algorithm and computes the
cheapest set of roads that keeps every intersection connected with
Kruskal's algorithm. Both graph representations are used and compared.
"""

from __future__ import annotations

from typing import Set, Tuple

import numpy as np

import graphsolver as gs


def make_grid(rows: int, cols: int, seed: int = 7) -> Tuple[Set[Tuple[int, int]], Set[gs.Edge]]:
    """Generate intersections and weighted roads of a rows x cols grid.

    Args:
        rows: Number of grid rows.
        cols: Number of grid columns.
        seed: Seed for the numpy RNG drawing the travel costs.

    Returns:
        Tuple of (nodes, edges) where nodes are (row, col) tuples.
    """
    rng = np.random.default_rng(seed)
    nodes = {(r, c) for r in range(rows) for c in range(cols)}
    edges = set()
    for r, c in nodes:
        if r + 1 < rows:
            edges.add(gs.Edge((r, c), (r + 1, c), int(rng.integers(1, 10))))
        if c + 1 < cols:
            edges.add(gs.Edge((r, c), (r, c + 1), int(rng.integers(1, 10))))
    return nodes, edges


def main() -> None:
    """Run the grid network example."""
    rows, cols = 4, 5
    nodes, edges = make_grid(rows, cols)

    for graph_cls in (gs.AdjacencyGraph, gs.BasicGraph):
        graph = graph_cls(nodes, edges)
        start, end = (0, 0), (rows - 1, cols - 1)

        paths = gs.DijkstraPathCalculator(graph).shortest_paths(start)
        route = paths.path_to(end)
        mst = gs.KruskalMSTCalculator(graph).calculate_mst()

        print(f"{graph_cls.__name__}:")
        print(f"  route {start} -> {end}: {route}")
        print(f"  route cost: {paths.distance_to(end)}")
        print(f"  spanning tree: {len(mst.edges())} roads, total cost {mst.total_weight()}")


if __name__ == "__main__":
    main()
