"""Unit tests for the Graph store."""

import pytest

from graph_search import Edge, Graph, InvalidSize, NodeOutOfRange


class TestConstruction:
    """Size and start-node validation."""

    def test_zero_nodes_rejected(self):
        with pytest.raises(InvalidSize):
            Graph(0, 0)

    def test_negative_nodes_rejected(self):
        with pytest.raises(InvalidSize):
            Graph(-3)

    def test_start_out_of_range_rejected(self):
        with pytest.raises(InvalidSize):
            Graph(5, 5)
        with pytest.raises(InvalidSize):
            Graph(5, -1)

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            Graph(0)

    def test_defaults(self):
        g = Graph(3)
        assert g.start == 0
        assert g.node_count == 3
        assert len(g) == 3
        assert all(g.adjacent(n) == () for n in range(3))

    def test_custom_start(self):
        assert Graph(4, start=2).start == 2


class TestEdges:
    """Edge insertion and adjacency queries."""

    def test_adjacency_keeps_insertion_order(self):
        g = Graph(4)
        g.add_edge(0, 3, 2)
        g.add_edge(0, 1, 7)
        g.add_edge(0, 2, 1)
        assert [e.target for e in g.adjacent(0)] == [3, 1, 2]
        assert g.adjacent(0)[1] == Edge(1, 7)

    def test_add_edge_out_of_range(self):
        g = Graph(5)
        with pytest.raises(NodeOutOfRange):
            g.add_edge(5, 0, 1)
        with pytest.raises(NodeOutOfRange):
            g.add_edge(0, 5, 1)

    def test_failed_add_leaves_graph_unchanged(self):
        g = Graph(2)
        with pytest.raises(NodeOutOfRange):
            g.add_edge(0, 9, 1)
        assert g.edge_count() == 0

    def test_adjacent_out_of_range(self):
        with pytest.raises(NodeOutOfRange) as info:
            Graph(3).adjacent(3)
        assert info.value.node == 3
        assert info.value.node_count == 3

    def test_node_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            Graph(3).adjacent(-1)

    def test_adjacent_is_read_only_view(self):
        g = Graph(2)
        g.add_edge(0, 1, 1)
        view = g.adjacent(0)
        assert isinstance(view, tuple)
        g.add_edge(0, 0, 4)
        assert len(view) == 1
        assert len(g.adjacent(0)) == 2

    def test_from_edges_and_iteration(self):
        triples = [(0, 1, 3), (1, 2, 4), (0, 2, 9)]
        g = Graph.from_edges(3, triples, start=1)
        assert g.start == 1
        assert list(g.edges()) == [(0, 1, 3), (0, 2, 9), (1, 2, 4)]
        assert g.edge_count() == 3

    def test_edge_weight_takes_cheapest_parallel_edge(self):
        g = Graph.from_edges(2, [(0, 1, 5), (0, 1, 2)])
        assert g.edge_weight(0, 1) == 2
        assert g.edge_weight(1, 0) is None
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)

    def test_contains(self):
        g = Graph(3)
        assert 0 in g and 2 in g
        assert 3 not in g
        assert "1" not in g

    def test_booleans_are_not_nodes(self):
        g = Graph(3)
        assert True not in g
        with pytest.raises(NodeOutOfRange):
            g.adjacent(False)
        with pytest.raises(NodeOutOfRange):
            g.add_edge(True, 0, 1)

    def test_boolean_sizes_rejected(self):
        with pytest.raises(InvalidSize):
            Graph(True)
        with pytest.raises(InvalidSize):
            Graph(3, start=False)
