"""
Uniform-cost (Dijkstra) shortest path search.

Edge weights must be non-negative. Every weight is checked the first time the
search examines its edge, and a bad weight raises ``InvalidWeightError``
instead of silently producing a wrong answer.
"""

import logging
from time import time
from typing import Dict, Iterator, Optional, Tuple

from .config import SearchConfig
from .models import SearchMetrics, ShortestPathResult
from .priority import PriorityFrontier
from .traversal import GraphIterator
from .types import NodeT, Weight, WeightedGraphProtocol
from .utils import validate_weight

# Configure logging
logger = logging.getLogger(__name__)


class UniformCostIterator(GraphIterator[NodeT]):
    """
    Iterator settling nodes in order of increasing cost from the start node.

    ``cost_so_far`` and ``came_from`` are updated as the search runs and can
    be read at any point, including after the caller stops iterating early.
    ``visited`` holds the settled nodes, whose costs are final.
    """

    def __init__(
        self,
        graph: WeightedGraphProtocol[NodeT],
        start: NodeT,
        config: Optional[SearchConfig] = None,
    ):
        super().__init__(graph, start, config)
        self.cost_so_far: Dict[NodeT, Weight] = {start: 0}
        self.came_from: Dict[NodeT, NodeT] = {start: start}

    def __iter__(self) -> Iterator[Tuple[NodeT, Weight]]:
        """
        Run the search.

        Yields:
            (node, cost) pairs in the order nodes are settled

        Raises:
            InvalidWeightError: On the first negative or non-finite edge weight
            FrontierOverflowError: If the frontier exceeds ``max_frontier_size``
        """
        # Each pass starts over; the mappings are cleared in place so results
        # holding references to them stay current
        self.visited.clear()
        self.nodes_explored = 0
        self.cost_so_far.clear()
        self.came_from.clear()
        self.cost_so_far[self.start] = 0
        self.came_from[self.start] = self.start
        frontier: PriorityFrontier[NodeT] = PriorityFrontier(self.config.max_frontier_size)
        frontier.push(self.start, 0)

        while frontier:
            self.memory_manager.check_memory()
            entry = frontier.pop()
            current = entry.node

            # Duplicates are pushed on every relaxation; only the cheapest counts
            if current in self.visited or entry.cost > self.cost_so_far[current]:
                logger.debug(f"Skipping stale entry for {current!r} at cost {entry.cost}")
                continue

            self.visited.add(current)
            self.nodes_explored += 1
            logger.debug(f"Visiting node {current!r} with cost {entry.cost}")
            yield current, entry.cost

            current_cost = self.cost_so_far[current]
            for edge_cost, neighbour in self.graph.neighbours(current):
                validate_weight(edge_cost, current, neighbour)
                if neighbour in self.visited:
                    continue

                candidate = current_cost + edge_cost
                if neighbour in self.cost_so_far and candidate > self.cost_so_far[neighbour]:
                    continue

                logger.debug(f"  Updating cost of {neighbour!r}: {candidate} via {current!r}")
                self.cost_so_far[neighbour] = candidate
                self.came_from[neighbour] = current
                frontier.push(neighbour, candidate)


def dijkstra_search(
    graph: WeightedGraphProtocol[NodeT],
    start: NodeT,
    goal: Optional[NodeT] = None,
    config: Optional[SearchConfig] = None,
) -> ShortestPathResult[NodeT]:
    """
    Find minimum-cost paths from start, stopping early once goal is settled.

    Args:
        graph: Any object exposing ``neighbours(node)`` with non-negative weights
        start: Node to start from
        goal: Node to stop at; None settles every reachable node
        config: Search limits

    Returns:
        ShortestPathResult with cost_so_far, came_from, the settle order and
        whether goal was reached. An unreachable goal is not an error; it is
        simply absent from both mappings.

    Raises:
        InvalidWeightError: If a negative or non-finite weight is encountered
        FrontierOverflowError: If the frontier exceeds ``max_frontier_size``
        MemoryError: If memory growth exceeds ``max_memory_mb``

    Example:
        >>> result = dijkstra_search(graph, "A", "D")
        >>> result.cost_so_far["D"], result.came_from["D"]
        (1, 'A')
    """
    metrics = SearchMetrics(operation="dijkstra_search", start_time=time())
    iterator = UniformCostIterator(graph, start, config)
    result: ShortestPathResult[NodeT] = ShortestPathResult(
        start=start,
        cost_so_far=iterator.cost_so_far,
        came_from=iterator.came_from,
        metrics=metrics,
    )

    try:
        for node, _ in iterator:
            result.visited.append(node)
            if goal is not None and node == goal:
                result.goal_reached = True
                break
    finally:
        metrics.end_time = time()
        metrics.nodes_explored = iterator.nodes_explored
        metrics.max_memory_used = iterator.memory_manager.peak_memory

    if result.goal_reached:
        logger.info(
            f"Shortest path {start!r} -> {goal!r} costs {result.cost_so_far[goal]} "
            f"({metrics.nodes_explored} nodes explored, {metrics.duration:.1f}ms)"
        )
    else:
        logger.info(
            f"Search from {start!r} settled {len(result.visited)} nodes without "
            f"reaching a goal ({metrics.duration:.1f}ms)"
        )
    return result
