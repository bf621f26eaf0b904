"""
Graph traversal using the iterator pattern.

``BreadthFirstIterator`` yields nodes lazily in expansion order, so a caller
can stop a traversal between any two expansions. ``breadth_first_search``
drives the iterator to exhaustion or until the goal is expanded and returns
a ``TraversalResult``.

The frontier discipline is configurable. The default, ``LIFO``, expands the
most recently discovered node first; ``FIFO`` gives level-by-level order.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from time import time
from typing import Any, Deque, Generic, Iterator, Optional, Set

from .config import FrontierDiscipline, SearchConfig
from .exceptions import FrontierOverflowError
from .models import SearchMetrics, TraversalResult
from .types import NodeT, WeightedGraphProtocol
from .utils import MemoryManager

logger = logging.getLogger(__name__)


class GraphIterator(ABC, Generic[NodeT]):
    """Base class for graph traversal iterators."""

    def __init__(
        self,
        graph: WeightedGraphProtocol[NodeT],
        start: NodeT,
        config: Optional[SearchConfig] = None,
    ):
        """
        Initialize iterator.

        Args:
            graph: Any object exposing ``neighbours(node)``
            start: Starting node for traversal
            config: Search limits; defaults apply when omitted
        """
        self.graph = graph
        self.start = start
        self.config = config or SearchConfig()
        self.visited: Set[NodeT] = set()
        self.nodes_explored = 0
        self.memory_manager = MemoryManager(
            self.config.max_memory_mb, self.config.memory_check_interval
        )

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Get iterator for traversal."""


class BreadthFirstIterator(GraphIterator[NodeT]):
    """
    Frontier-driven traversal iterator.

    A node enters ``visited`` when it is pushed onto the frontier, so every
    reachable node is yielded exactly once even in cyclic graphs.
    Iterating the same instance again restarts the traversal.
    """

    def __iter__(self) -> Iterator[NodeT]:
        """
        Traverse the graph from the start node.

        Yields:
            Nodes in expansion order
        """
        self.visited.clear()
        self.nodes_explored = 0
        frontier: Deque[NodeT] = deque([self.start])
        self.visited.add(self.start)
        if self.config.discipline is FrontierDiscipline.FIFO:
            pop = frontier.popleft
        else:
            pop = frontier.pop
        max_size = self.config.max_frontier_size

        while frontier:
            self.memory_manager.check_memory()
            current = pop()
            self.nodes_explored += 1
            logger.debug(f"Visiting node {current!r}")
            yield current

            for _, neighbour in self.graph.neighbours(current):
                # Only admit each connected node to the frontier once
                if neighbour in self.visited:
                    continue
                if max_size is not None and len(frontier) >= max_size:
                    raise FrontierOverflowError(
                        f"Frontier exceeded maximum size of {max_size} entries"
                    )
                self.visited.add(neighbour)
                frontier.append(neighbour)


def breadth_first_search(
    graph: WeightedGraphProtocol[NodeT],
    start: NodeT,
    goal: Optional[NodeT] = None,
    config: Optional[SearchConfig] = None,
) -> TraversalResult[NodeT]:
    """
    Visit the nodes reachable from start, stopping early at goal.

    Args:
        graph: Any object exposing ``neighbours(node)``
        start: Node to start from
        goal: Node to stop at; None visits every reachable node
        config: Search limits and frontier discipline

    Returns:
        TraversalResult with the visitation order and whether goal was reached

    Raises:
        FrontierOverflowError: If the frontier exceeds ``max_frontier_size``
        MemoryError: If memory growth exceeds ``max_memory_mb``
    """
    metrics = SearchMetrics(operation="breadth_first_search", start_time=time())
    iterator = BreadthFirstIterator(graph, start, config)
    visited = []
    goal_reached = False

    try:
        for node in iterator:
            visited.append(node)
            if goal is not None and node == goal:
                goal_reached = True
                break
    finally:
        metrics.end_time = time()
        metrics.nodes_explored = iterator.nodes_explored
        metrics.max_memory_used = iterator.memory_manager.peak_memory

    logger.info(
        f"Traversal from {start!r} visited {len(visited)} nodes "
        f"(goal reached: {goal_reached}) in {metrics.duration:.1f}ms"
    )
    return TraversalResult(visited=visited, goal_reached=goal_reached, metrics=metrics)
