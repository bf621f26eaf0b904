"""
Core type definitions and protocols.

This module provides the type aliases and the structural protocol shared by the
graph adapters and the search engines.
"""

from typing import Hashable, Iterable, Protocol, Tuple, TypeVar, Union

# Nodes only need to be hashable and comparable for equality
NodeT = TypeVar("NodeT", bound=Hashable)

# Type alias for edge weights
Weight = Union[int, float]


class WeightedGraphProtocol(Protocol[NodeT]):
    """Protocol defining the single operation the search engines rely on."""

    def neighbours(self, node: NodeT) -> Iterable[Tuple[Weight, NodeT]]:
        """Get (weight, neighbour) pairs for the outgoing edges of a node."""
        ...
