"""Tests for AdjacencyMatrix storage."""

import numpy as np
import pytest

from graphsolver.graphs import AdjacencyMatrix


class TestAdjacencyMatrix:
    """Tests for the symmetric weight matrix."""

    def test_initialized_to_zero(self):
        """Test that a new matrix holds no edges."""
        matrix = AdjacencyMatrix(3)
        assert matrix.size == 3
        for i in range(3):
            assert np.all(matrix.get_adjacent(i) == 0)
            assert len(matrix.adjacent_indices(i)) == 0

    def test_add_edge_is_symmetric(self):
        """Test that add_edge writes both cells."""
        matrix = AdjacencyMatrix(3)
        matrix.add_edge(0, 2, 5)
        assert matrix.get_weight(0, 2) == 5
        assert matrix.get_weight(2, 0) == 5
        assert matrix.has_edge(2, 0)
        assert not matrix.has_edge(0, 1)

    def test_get_adjacent_returns_copy(self):
        """Test that mutating the returned row leaves the matrix intact."""
        matrix = AdjacencyMatrix(2)
        matrix.add_edge(0, 1, 7)
        row = matrix.get_adjacent(0)
        row[1] = 100
        assert matrix.get_weight(0, 1) == 7
        assert list(matrix.get_adjacent(0)) == [0, 7]

    def test_zero_weight_edge_is_present(self):
        """Test that a weight-0 edge is distinguishable from no edge."""
        matrix = AdjacencyMatrix(3)
        matrix.add_edge(0, 1, 0)
        assert matrix.get_weight(0, 1) == 0
        assert matrix.has_edge(0, 1)
        assert list(matrix.adjacent_indices(0)) == [1]
        assert len(matrix.adjacent_indices(2)) == 0

    def test_get_weight_returns_int(self):
        matrix = AdjacencyMatrix(2)
        matrix.add_edge(0, 1, 3)
        assert isinstance(matrix.get_weight(0, 1), int)

    @pytest.mark.parametrize("i, j", [(3, 0), (0, 3), (-1, 0)])
    def test_out_of_range(self, i, j):
        """Test that invalid indices raise IndexError."""
        matrix = AdjacencyMatrix(3)
        with pytest.raises(IndexError):
            matrix.get_weight(i, j)
        with pytest.raises(IndexError):
            matrix.add_edge(i, j, 1)

    def test_empty_matrix(self):
        matrix = AdjacencyMatrix(0)
        assert matrix.size == 0
        with pytest.raises(IndexError):
            matrix.get_adjacent(0)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            AdjacencyMatrix(-1)


class TestAdjacencyMatrixWeights:
    """Tests for the int64 weight range of the storage."""

    @pytest.mark.parametrize("weight", [2.5, 2**63, -(2**63) - 1, "3"])
    def test_unstorable_weight(self, weight):
        matrix = AdjacencyMatrix(2)
        with pytest.raises(ValueError):
            matrix.add_edge(0, 1, weight)
        assert not matrix.has_edge(0, 1)

    @pytest.mark.parametrize("weight", [2**63 - 1, -(2**63), np.int32(5)])
    def test_int64_bounds(self, weight):
        matrix = AdjacencyMatrix(2)
        matrix.add_edge(0, 1, weight)
        assert matrix.get_weight(1, 0) == weight
