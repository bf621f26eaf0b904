"""
Data models for search results.

This module provides the containers returned by the search engines:
- TraversalResult: visitation order and goal status of a traversal
- ShortestPathResult: cost and predecessor mappings of a uniform-cost search
- SearchMetrics: performance metrics attached to every result

Example:
    >>> result = dijkstra_search(graph, "A", "D")
    >>> result.goal_reached
    True
    >>> result.path_to("D")
    ['A', 'D']
    >>> cost_so_far, came_from = result
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, Union

from .types import NodeT, Weight
from .utils import reconstruct_path


@dataclass
class SearchMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes expanded during the search
        max_memory_used: Peak process memory observed during the search (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class TraversalResult(Generic[NodeT]):
    """
    Result of a traversal.

    Attributes:
        visited: Nodes in the order they were expanded
        goal_reached: Whether the requested goal was expanded
        metrics: Performance metrics of the traversal
    """

    visited: List[NodeT]
    goal_reached: bool
    metrics: Optional[SearchMetrics] = None

    def __len__(self) -> int:
        return len(self.visited)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())

    def __contains__(self, node: object) -> bool:
        return node in self.visited

    def as_tuple(self) -> Tuple[List[NodeT], bool]:
        """Return (visited, goal_reached)."""
        return self.visited, self.goal_reached


@dataclass
class ShortestPathResult(Generic[NodeT]):
    """
    Result of a uniform-cost search.

    ``came_from[start]`` is ``start`` itself; nodes the search never reached
    have no entry in either mapping.

    Attributes:
        start: Node the search started from
        cost_so_far: Best known accumulated cost per reached node
        came_from: Predecessor of each reached node on its best known path
        visited: Nodes in the order they were settled
        goal_reached: Whether the requested goal was settled
        metrics: Performance metrics of the search
    """

    start: NodeT
    cost_so_far: Dict[NodeT, Weight] = field(default_factory=dict)
    came_from: Dict[NodeT, NodeT] = field(default_factory=dict)
    visited: List[NodeT] = field(default_factory=list)
    goal_reached: bool = False
    metrics: Optional[SearchMetrics] = None

    def cost_to(self, node: NodeT) -> Optional[Weight]:
        """Return the recorded cost of a node, or None if it was never reached."""
        return self.cost_so_far.get(node)

    def path_to(self, node: NodeT) -> List[NodeT]:
        """
        Reconstruct the best known path from start to a node.

        Returns:
            Nodes from start to node inclusive; empty if node was never reached
        """
        return reconstruct_path(self.came_from, self.start, node)

    def as_tuple(self) -> Tuple[Dict[NodeT, Weight], Dict[NodeT, NodeT]]:
        """Return (cost_so_far, came_from)."""
        return self.cost_so_far, self.came_from

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())
