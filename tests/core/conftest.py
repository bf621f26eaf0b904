"""Shared test fixtures."""

from typing import Dict, List

import pytest

from pathweaver.core.graph import SimpleGraph, WeightedAdjacencyGraph


@pytest.fixture
def sample_adjacency() -> Dict[str, List[str]]:
    """
    Fixture providing an undirected unit-cost adjacency mapping:
    A - B - C
    |   |
    D --+
    |
    E
    """
    return {
        "A": ["B", "D"],
        "B": ["A", "C", "D"],
        "C": ["B"],
        "D": ["B", "E", "A"],
        "E": ["D"],
    }


@pytest.fixture
def sample_graph(sample_adjacency) -> SimpleGraph:
    """Fixture providing the sample adjacency as a SimpleGraph."""
    return SimpleGraph(sample_adjacency)


@pytest.fixture
def disconnected_graph(sample_adjacency) -> SimpleGraph:
    """Fixture providing the sample graph plus an isolated node Z."""
    return SimpleGraph({**sample_adjacency, "Z": []})


@pytest.fixture
def weighted_graph() -> WeightedAdjacencyGraph:
    """
    Fixture providing a directed weighted graph where the cheapest route
    A -> C -> B -> D (cost 4) has more hops than A -> B -> D (cost 5).
    """
    return WeightedAdjacencyGraph(
        {
            "A": [(4, "B"), (1, "C")],
            "B": [(1, "D")],
            "C": [(2, "B"), (5, "D")],
            "D": [],
        }
    )
