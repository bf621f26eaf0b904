"""Core graph search functionality."""

from .config import SearchConfig, FrontierDiscipline
from .exceptions import (
    ConfigurationError,
    FrontierOverflowError,
    GraphOperationError,
    InvalidWeightError,
)
from .graph import SimpleGraph, WeightedAdjacencyGraph, WeightedGraph
from .models import SearchMetrics, ShortestPathResult, TraversalResult
from .priority import PrioritizedNode, PriorityFrontier
from .shortest_path import UniformCostIterator, dijkstra_search
from .traversal import BreadthFirstIterator, GraphIterator, breadth_first_search
from .types import WeightedGraphProtocol
from .utils import path_cost, reconstruct_path

__all__ = [
    "BreadthFirstIterator",
    "ConfigurationError",
    "FrontierDiscipline",
    "FrontierOverflowError",
    "GraphIterator",
    "GraphOperationError",
    "InvalidWeightError",
    "PrioritizedNode",
    "PriorityFrontier",
    "SearchConfig",
    "SearchMetrics",
    "ShortestPathResult",
    "SimpleGraph",
    "TraversalResult",
    "UniformCostIterator",
    "WeightedAdjacencyGraph",
    "WeightedGraph",
    "WeightedGraphProtocol",
    "breadth_first_search",
    "dijkstra_search",
    "path_cost",
    "reconstruct_path",
]
