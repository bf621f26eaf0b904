"""
Pathweaver - Generic graph traversal and shortest path search

This package provides search engines that work over any graph exposing a
``neighbours(node)`` method yielding (weight, neighbour) pairs:

- Frontier-driven traversal with early exit at a goal node
- Uniform-cost (Dijkstra) shortest path search over non-negative weights
- Adjacency-mapping graph adapters for unit-cost and weighted graphs
"""

__version__ = "0.1.0"
__author__ = "Pathweaver Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Pathweaver requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import SimpleGraph, WeightedAdjacencyGraph, WeightedGraph
from .core.shortest_path import dijkstra_search
from .core.traversal import breadth_first_search

__all__ = [
    "SimpleGraph",
    "WeightedAdjacencyGraph",
    "WeightedGraph",
    "breadth_first_search",
    "dijkstra_search",
]
