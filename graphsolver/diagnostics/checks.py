"""Consistency checks the solvers run while debug mode is enabled."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..exceptions import GraphStateError

if TYPE_CHECKING:
    from ..graphs import Edge


def assert_non_negative_weights(edges: Iterable[Edge]) -> None:
    """
    Assert that no edge has a negative weight.

    Dijkstra's algorithm only produces shortest paths under this condition.

    Parameters
    ----------
    edges:
        Edges of the graph being solved.

    Raises
    ------
    ValueError
        If an edge has a negative weight.
    """
    for edge in edges:
        if edge.weight < 0:
            raise ValueError(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {edge.weight} on edge ({edge.a}, {edge.b})"
            )


def assert_spanning_forest(n_edges: int, n_nodes: int, n_groups: int) -> None:
    """
    Assert that a spanning forest has one edge less per group than it has nodes.

    Parameters
    ----------
    n_edges:
        Number of accepted forest edges.
    n_nodes:
        Number of nodes in the graph.
    n_groups:
        Number of disjoint node groups (trees) in the forest.

    Raises
    ------
    GraphStateError
        If the counts do not satisfy ``n_edges == n_nodes - n_groups``.
    """
    if n_edges != n_nodes - n_groups:
        raise GraphStateError(
            f"Spanning forest has {n_edges} edges for {n_nodes} nodes in {n_groups} groups"
        )
