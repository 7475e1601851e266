"""
Utility functions for graph representations.

Provides the canonical node ordering and dense node indexing shared by the
graph classes and the solvers.
"""

from typing import Dict, Hashable, Iterable, List, Tuple

CanonicalKey = Tuple[str, str, str]


def canonical_key(node: Hashable) -> CanonicalKey:
    """
    Return the ordering key used for deterministic node ordering.

    Nodes are opaque, so they are ordered by their string representation,
    then by type name and ``repr`` to separate nodes such as ``1`` and
    ``"1"``. Graphs reject node sets in which two nodes share a key.
    """
    return str(node), type(node).__qualname__, repr(node)


def sorted_nodes(nodes: Iterable[Hashable]) -> List[Hashable]:
    """
    Return the distinct nodes in canonical order.

    Args:
        nodes: Iterable of hashable nodes; duplicates are dropped.

    Returns:
        Sorted list of nodes.
    """
    return sorted(set(nodes), key=canonical_key)


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    The index -> node list is built first and the node -> index dict is
    derived from it, so the two are always exact inverses.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    index_to_node = sorted_nodes(nodes)
    node_to_index = {node: idx for idx, node in enumerate(index_to_node)}
    return node_to_index, index_to_node
