"""
Custom exceptions for the graph traversal engines.

This module defines the small hierarchy of exceptions raised by the search
engines. Situations that are part of normal search outcomes (an unknown node,
an unreachable goal, an isolated start node) are reported through result
values and never raise.
"""

from typing import Any, Optional


class GraphOperationError(Exception):
    """
    Raised when a graph search cannot proceed.

    This is the base class for failures detected while a search is running,
    such as malformed edge weights or exhausted resource limits.

    Examples:
        * Negative edge weight during shortest-path search
        * Frontier grew past its configured bound
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidWeightError(GraphOperationError):
    """
    Raised when an edge carries a weight the engines cannot use.

    Shortest-path search requires every weight to be a finite, non-negative
    number. The offending edge is kept on the exception so callers can
    report it.

    Examples:
        * Negative weight on an edge
        * NaN or infinite weight
        * Non-numeric weight value
    """

    def __init__(
        self,
        message: str,
        weight: Any = None,
        source: Optional[Any] = None,
        target: Optional[Any] = None,
    ):
        super().__init__(message)
        self.weight = weight
        self.source = source
        self.target = target


class FrontierOverflowError(GraphOperationError):
    """Raised when a search frontier grows past its configured maximum size."""


class ConfigurationError(Exception):
    """
    Raised when search configuration is invalid.

    Examples:
        * Non-positive memory limit
        * Negative frontier size bound
        * Unknown frontier discipline
    """
