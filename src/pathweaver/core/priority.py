"""
Cost-ordered frontier for uniform-cost search.

``PrioritizedNode`` wraps a (node, cost) pair and orders entries by cost
alone, so the lowest accumulated cost always compares smallest. ``heapq`` is
a min-heap, which means the entry it pops first is the one with the minimum
cost. Nodes never take part in comparisons, so they do not need to be
orderable, and entries with equal cost come out in an unspecified order.
"""

from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Generic, List, Optional

from .exceptions import FrontierOverflowError
from .types import NodeT, Weight


@dataclass(order=True, frozen=True)
class PrioritizedNode(Generic[NodeT]):
    """Frontier entry compared solely on its accumulated cost."""

    cost: Weight
    node: NodeT = field(compare=False)


class PriorityFrontier(Generic[NodeT]):
    """
    Minimum-cost-first frontier.

    Duplicate entries for the same node are allowed; callers are expected to
    discard stale entries when they pop them.
    """

    def __init__(self, maxsize: Optional[int] = None):
        self._queue: List[PrioritizedNode[NodeT]] = []
        self._maxsize = maxsize

    def push(self, node: NodeT, cost: Weight) -> None:
        """Add a node with the given accumulated cost."""
        if self._maxsize is not None and len(self._queue) >= self._maxsize:
            raise FrontierOverflowError(
                f"Frontier exceeded maximum size of {self._maxsize} entries"
            )
        heappush(self._queue, PrioritizedNode(cost, node))

    def pop(self) -> PrioritizedNode[NodeT]:
        """Remove and return the entry with the lowest cost."""
        if not self._queue:
            raise IndexError("pop from an empty frontier")
        return heappop(self._queue)

    def peek(self) -> Optional[PrioritizedNode[NodeT]]:
        """Return the entry with the lowest cost without removing it."""
        return self._queue[0] if self._queue else None

    def empty(self) -> bool:
        """Return True if the frontier is empty."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
