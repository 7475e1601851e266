"""
Symmetric adjacency matrix storage.

A thin wrapper around NumPy arrays used as the storage engine of
AdjacencyGraph. Weights live in an integer matrix; a parallel boolean
matrix records which cells actually hold an edge, so an edge of weight 0
is not mistaken for a missing edge.
"""

from __future__ import annotations

import numbers

import numpy as np

# Range of weights representable by the int64 storage
WEIGHT_MIN = int(np.iinfo(np.int64).min)
WEIGHT_MAX = int(np.iinfo(np.int64).max)


class AdjacencyMatrix:
    """
    Square symmetric matrix of integer edge weights keyed by dense indices.

    Invariants:
        - ``weights[i, j] == weights[j, i]`` and ``present[i, j] == present[j, i]``.
        - ``weights[i, j] == 0`` wherever ``present[i, j]`` is False.

    Indices must lie in ``[0, size)``; anything else raises ``IndexError``.

    Complexity:
        - add_edge / get_weight / has_edge: O(1)
        - get_adjacent / adjacent_indices: O(n)
    """

    def __init__(self, size: int):
        """
        Initialize an empty matrix.

        Args:
            size: Number of rows (and columns).

        Raises:
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}")
        self._weights = np.zeros((size, size), dtype=np.int64)
        self._present = np.zeros((size, size), dtype=bool)

    @property
    def size(self) -> int:
        """Number of rows of the matrix."""
        return self._weights.shape[0]

    def _check(self, index: int) -> None:
        # NumPy would silently accept negative indices
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} out of range for matrix of size {self.size}")

    def add_edge(self, a: int, b: int, weight: int) -> None:
        """
        Store an undirected edge between indices ``a`` and ``b``.

        Both ``(a, b)`` and ``(b, a)`` are written.

        Raises:
            ValueError: If weight is not an integer in the int64 range.
        """
        self._check(a)
        self._check(b)
        if not isinstance(weight, numbers.Integral) or not WEIGHT_MIN <= weight <= WEIGHT_MAX:
            raise ValueError(f"Weight {weight!r} is not an int64 integer")
        self._weights[a, b] = self._weights[b, a] = weight
        self._present[a, b] = self._present[b, a] = True

    def get_weight(self, a: int, b: int) -> int:
        """Return the stored weight between ``a`` and ``b`` (0 if no edge)."""
        self._check(a)
        self._check(b)
        return int(self._weights[a, b])

    def has_edge(self, a: int, b: int) -> bool:
        """Return True if an edge was stored between ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        return bool(self._present[a, b])

    def get_adjacent(self, index: int) -> np.ndarray:
        """
        Return a copy of row ``index`` of the weight matrix.

        Mutating the returned array never affects the matrix.
        """
        self._check(index)
        return self._weights[index].copy()

    def adjacent_indices(self, index: int) -> np.ndarray:
        """Return the indices connected to ``index``, in ascending order."""
        self._check(index)
        return np.flatnonzero(self._present[index])

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(size={self.size})"
