"""
Utility functions for the search engines.
"""

import gc
import logging
import math
import os
import time
from typing import Any, Dict, List, Optional

import psutil  # type: ignore # Missing stubs

from .exceptions import InvalidWeightError
from .types import NodeT, Weight

# Configure logging
logger = logging.getLogger(__name__)


def validate_weight(weight: Any, source: Any = None, target: Any = None) -> Weight:
    """Check that an edge weight is a finite, non-negative number."""
    edge = f"{source!r} -> {target!r}"
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidWeightError(
            f"Edge weight must be numeric, got {type(weight).__name__} on edge {edge}",
            weight,
            source,
            target,
        )
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidWeightError(
            f"Edge weight must be finite number on edge {edge}", weight, source, target
        )
    if weight < 0:
        raise InvalidWeightError(
            f"Negative weight {weight} found on edge {edge}", weight, source, target
        )
    return weight


def reconstruct_path(came_from: Dict[NodeT, NodeT], start: NodeT, goal: NodeT) -> List[NodeT]:
    """
    Rebuild the node sequence from start to goal using a predecessor mapping.

    Args:
        came_from: Predecessor mapping produced by a search
        start: Node the search started from
        goal: Node to walk back from

    Returns:
        Nodes from start to goal inclusive, or an empty list when goal
        was never reached
    """
    if goal not in came_from:
        return []

    path = [goal]
    current = goal
    while current != start:
        current = came_from[current]
        path.append(current)
        if len(path) > len(came_from) + 1:
            # came_from does not lead back to start
            return []
    path.reverse()
    return path


def path_cost(graph: Any, path: List[NodeT]) -> Weight:
    """Sum the edge weights along a node path, using the cheapest parallel edge."""
    total: Weight = 0
    for source, target in zip(path, path[1:]):
        weights = [weight for weight, neighbour in graph.neighbours(source) if neighbour == target]
        if not weights:
            raise ValueError(f"No edge from {source!r} to {target!r}")
        total += min(weights)
    return total


class MemoryManager:
    """Memory management utilities for graph searches."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            logger.warning(
                f"Memory usage {current/1024/1024:.1f}MB over limit, collecting garbage"
            )
            # Try to reclaim memory
            gc.collect()
            gc.collect()  # Second collection for cyclic references
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Get peak memory usage in bytes."""
        return self._peak_memory


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    mem_info = process.memory_info()
    return int(mem_info.rss)  # Explicitly convert to int for type safety
