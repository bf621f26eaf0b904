"""Tests for the weighted graph abstraction and its adapters."""

import math

import pytest

from pathweaver.core.exceptions import InvalidWeightError
from pathweaver.core.graph import SimpleGraph, WeightedAdjacencyGraph, WeightedGraph


def test_simple_graph_unit_weights(sample_graph):
    """Test that every SimpleGraph edge has weight 1 and keeps list order."""
    assert sample_graph.neighbours("B") == [(1, "A"), (1, "C"), (1, "D")]


def test_simple_graph_unknown_node(sample_graph):
    """Test that an unknown node has no neighbours instead of failing."""
    assert sample_graph.neighbours("missing") == []
    assert not sample_graph.has_node("missing")


def test_simple_graph_terminal_node():
    """Test that a node without outgoing edges is valid."""
    graph = SimpleGraph({"A": []})
    assert graph.neighbours("A") == []
    assert "A" in graph


def test_simple_graph_copies_input(sample_adjacency):
    """Test that later changes to the input mapping do not leak into the graph."""
    graph = SimpleGraph(sample_adjacency)
    sample_adjacency["A"].append("E")
    sample_adjacency["F"] = ["A"]

    assert graph.neighbours("A") == [(1, "B"), (1, "D")]
    assert not graph.has_node("F")


def test_simple_graph_query_helpers(sample_graph):
    """Test node membership and iteration helpers."""
    assert len(sample_graph) == 5
    assert set(sample_graph.get_nodes()) == {"A", "B", "C", "D", "E"}
    assert "C" in sample_graph
    assert repr(sample_graph) == "SimpleGraph(nodes=5)"


def test_simple_graph_from_edges_directed():
    """Test building a directed graph from edge pairs."""
    graph = SimpleGraph.from_edges([("A", "B"), ("B", "C")])
    assert graph.neighbours("A") == [(1, "B")]
    assert graph.neighbours("C") == []
    assert graph.has_node("C")


def test_simple_graph_from_edges_bidirectional():
    """Test building an undirected graph from edge pairs."""
    graph = SimpleGraph.from_edges([("A", "B"), ("B", "C")], bidirectional=True)
    assert graph.neighbours("B") == [(1, "A"), (1, "C")]
    assert graph.neighbours("C") == [(1, "B")]


def test_weighted_graph_neighbours(weighted_graph):
    """Test that explicit weights are returned unchanged."""
    assert weighted_graph.neighbours("A") == [(4, "B"), (1, "C")]
    assert weighted_graph.neighbours("nowhere") == []


def test_weighted_graph_allows_zero_weight():
    """Test that zero is a valid non-negative weight."""
    graph = WeightedAdjacencyGraph({"A": [(0, "B")]})
    assert graph.neighbours("A") == [(0, "B")]


@pytest.mark.parametrize("weight", [-1, -0.5, math.nan, math.inf, "3", None, True])
def test_weighted_graph_rejects_invalid_weight(weight):
    """Test that invalid weights are rejected at construction."""
    with pytest.raises(InvalidWeightError) as excinfo:
        WeightedAdjacencyGraph({"A": [(2, "B")], "B": [(weight, "C")]})

    assert excinfo.value.source == "B"
    assert excinfo.value.target == "C"


def test_weighted_graph_is_abstract():
    """Test that the abstract base cannot be instantiated directly."""
    with pytest.raises(TypeError):
        WeightedGraph()  # type: ignore[abstract]


def test_custom_graph_default_has_node():
    """Test the default membership check of a custom subclass."""

    class LineGraph(WeightedGraph[int]):
        def neighbours(self, node):
            return [(1, node + 1)] if 0 <= node < 3 else []

        def get_nodes(self):
            return iter(range(4))

    graph = LineGraph()
    assert graph.has_node(3)
    assert 7 not in graph
