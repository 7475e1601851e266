"""Tests for the immutable graph representations."""

import pytest

from graphsolver.exceptions import InvalidGraphError, NodeNotFoundError
from graphsolver.graphs import AdjacencyGraph, BasicGraph, Edge, Graph, MutableGraph

REPRESENTATIONS = [AdjacencyGraph, BasicGraph]


class Opaque:
    """Node type whose instances all print the same way."""

    def __str__(self):
        return "node"

    def __repr__(self):
        return "node"


def random_graph(graph_cls, rng, n_nodes=8, density=0.4):
    """Build a random simple graph with positive integer weights."""
    nodes = list(range(n_nodes))
    edges = set()
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if rng.random() < density:
                edges.add(Edge(i, j, int(rng.integers(1, 20))))
    return graph_cls(nodes, edges)


@pytest.mark.parametrize("graph_cls", REPRESENTATIONS)
class TestGraphContract:
    """Tests shared by AdjacencyGraph and BasicGraph."""

    def test_empty_graph(self, graph_cls):
        G = graph_cls()
        assert G.nodes() == frozenset()
        assert G.edges() == frozenset()
        assert len(G) == 0

    def test_single_node(self, graph_cls):
        """Test a graph with one node and no edges."""
        G = graph_cls({"A"}, set())
        assert G.nodes() == {"A"}
        assert G.adjacent_edges("A") == frozenset()
        assert "A" in G

    def test_nodes_and_edges_as_given(self, graph_cls):
        nodes = {"A", "B", "C"}
        edges = {Edge("A", "B", 1), Edge("C", "B", 2)}
        G = graph_cls(nodes, edges)
        assert G.nodes() == nodes
        assert G.edges() == edges

    def test_returned_sets_are_immutable(self, graph_cls):
        G = graph_cls({"A", "B"}, {Edge("A", "B", 1)})
        assert isinstance(G.nodes(), frozenset)
        assert isinstance(G.edges(), frozenset)
        assert isinstance(G.adjacent_edges("A"), frozenset)

    def test_input_copied(self, graph_cls):
        """Test that mutating the input sets does not affect the graph."""
        nodes = {"A", "B"}
        edges = {Edge("A", "B", 1)}
        G = graph_cls(nodes, edges)
        nodes.add("C")
        edges.clear()
        assert G.nodes() == {"A", "B"}
        assert G.edges() == {Edge("A", "B", 1)}

    def test_adjacent_edges(self, graph_cls):
        G = graph_cls({"A", "B", "C", "D"}, {Edge("A", "B", 1), Edge("C", "A", 2), Edge("C", "D", 3)})
        assert G.adjacent_edges("A") == {Edge("A", "B", 1), Edge("A", "C", 2)}
        assert G.adjacent_edges("D") == {Edge("D", "C", 3)}

    def test_adjacent_edges_subset_of_edges(self, graph_cls, rng):
        """Test that adjacent_edges(n) is exactly the edges touching n."""
        G = random_graph(graph_cls, rng)
        for node in G.nodes():
            expected = {edge for edge in G.edges() if node in edge.endpoints()}
            assert G.adjacent_edges(node) == expected

    def test_zero_weight_edge(self, graph_cls):
        """Test that an edge of weight 0 is reported as adjacent."""
        G = graph_cls({"A", "B", "C"}, {Edge("A", "B", 0), Edge("B", "C", 2)})
        assert G.adjacent_edges("A") == {Edge("A", "B", 0)}
        assert G.adjacent_edges("B") == {Edge("A", "B", 0), Edge("B", "C", 2)}

    def test_unknown_node(self, graph_cls):
        """Test that querying an unknown node raises NodeNotFoundError."""
        G = graph_cls({"A"}, set())
        with pytest.raises(NodeNotFoundError):
            G.adjacent_edges("Z")
        with pytest.raises(KeyError):
            G.adjacent_edges("Z")

    def test_edge_with_unknown_endpoint(self, graph_cls):
        with pytest.raises(InvalidGraphError):
            graph_cls({"A"}, {Edge("A", "B", 1)})

    def test_parallel_edges_rejected(self, graph_cls):
        with pytest.raises(InvalidGraphError):
            graph_cls({"A", "B"}, {Edge("A", "B", 1), Edge("B", "A", 2)})

    def test_duplicate_edge_collapses(self, graph_cls):
        """Test that an edge given in both orientations is stored once."""
        G = graph_cls({"A", "B"}, [Edge("A", "B", 1), Edge("B", "A", 1)])
        assert len(G.edges()) == 1

    def test_to_graph_is_identity(self, graph_cls):
        G = graph_cls({"A"}, set())
        assert G.to_graph() is G

    def test_round_trip_through_mutable(self, graph_cls, rng):
        """Test that converting to mutable and back preserves nodes and edges."""
        G = random_graph(graph_cls, rng)
        mutable = G.to_mutable_graph()
        assert isinstance(mutable, MutableGraph)
        snapshot = mutable.to_graph()
        assert snapshot.nodes() == G.nodes()
        assert snapshot.edges() == G.edges()

    def test_total_weight(self, graph_cls):
        G = graph_cls({1, 2, 3}, {Edge(1, 2, 4), Edge(2, 3, 5)})
        assert G.total_weight() == 9

    @pytest.mark.parametrize("weight", [2.5, 2**63, -(2**63) - 1])
    def test_unstorable_weight_rejected(self, graph_cls, weight):
        """Test that non-integer and out-of-range weights fail validation."""
        with pytest.raises(InvalidGraphError):
            graph_cls({"A", "B"}, {Edge("A", "B", weight)})

    @pytest.mark.parametrize("weight", [2**63 - 1, -(2**63)])
    def test_int64_bounds_round_trip(self, graph_cls, weight):
        """Test that extreme weights are returned unchanged."""
        edge = Edge("A", "B", weight)
        G = graph_cls({"A", "B"}, {edge})
        assert G.adjacent_edges("A") == {edge}
        assert G.adjacent_edges("A") <= G.edges()

    def test_nodes_with_same_string(self, graph_cls):
        """Test that 1 and "1" are distinct nodes."""
        G = graph_cls({1, "1"}, {Edge(1, "1", 2)})
        assert G.adjacent_edges(1) == {Edge("1", 1, 2)}
        assert G.adjacent_edges("1") == {Edge(1, "1", 2)}

    def test_indistinguishable_nodes_rejected(self, graph_cls):
        """Test that nodes sharing str and repr cannot form a graph."""
        with pytest.raises(InvalidGraphError):
            graph_cls({Opaque(), Opaque()}, set())


class TestRepresentationsAgree:
    """Tests comparing the two representations on the same input."""

    def test_same_adjacency(self, rng):
        nodes = list(range(10))
        edges = {Edge(i, j, int(rng.integers(0, 5))) for i in range(10) for j in range(i + 1, 10) if rng.random() < 0.3}
        matrix_graph = AdjacencyGraph(nodes, edges)
        map_graph = BasicGraph(nodes, edges)
        for node in nodes:
            assert matrix_graph.adjacent_edges(node) == map_graph.adjacent_edges(node)


class TestAdjacencyGraphIndexing:
    """Tests for the node <-> index bijection of AdjacencyGraph."""

    def test_indices_dense_and_consistent(self):
        G = AdjacencyGraph({"C", "A", "B"}, {Edge("A", "C", 2)})
        indices = sorted(G.index_of(node) for node in G.nodes())
        assert indices == [0, 1, 2]
        for node in G.nodes():
            assert G.node_at(G.index_of(node)) == node

    def test_matrix_holds_weights(self):
        G = AdjacencyGraph({"A", "B"}, {Edge("A", "B", 6)})
        assert G.matrix.get_weight(G.index_of("A"), G.index_of("B")) == 6

    def test_index_of_unknown(self):
        G = AdjacencyGraph({"A"}, set())
        with pytest.raises(NodeNotFoundError):
            G.index_of("B")


class TestGraphFactory:
    """Tests for Graph.of and Graph.empty."""

    def test_of_returns_basic_graph(self):
        G = Graph.of({"A", "B"}, {Edge("A", "B", 1)})
        assert isinstance(G, BasicGraph)
        assert G.edges() == {Edge("A", "B", 1)}

    def test_empty(self):
        G = Graph.empty()
        assert len(G) == 0
        assert G.edges() == frozenset()

    def test_abstract(self):
        with pytest.raises(TypeError):
            Graph()
