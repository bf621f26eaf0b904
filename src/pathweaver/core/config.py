"""
Search configuration.

Defaults are module-level constants; a ``SearchConfig`` instance overrides
them for a single search call. Passing ``config=None`` to an engine is the
same as passing ``SearchConfig()``.

Example:
    >>> config = SearchConfig(discipline=FrontierDiscipline.FIFO, max_memory_mb=256)
    >>> breadth_first_search(graph, "A", config=config)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import ConfigurationError

# Constants
DEFAULT_MAX_FRONTIER_SIZE: Optional[int] = None  # Unbounded
DEFAULT_MAX_MEMORY_MB: Optional[float] = None  # No memory limit
DEFAULT_MEMORY_CHECK_INTERVAL = 0.1  # Check memory every 100ms


class FrontierDiscipline(Enum):
    """Order in which the traversal engine expands pending nodes."""

    LIFO = "lifo"  # Most recently pushed node first (stack)
    FIFO = "fifo"  # Oldest pushed node first (queue, true breadth-first)


@dataclass
class SearchConfig:
    """
    Tunable limits and behaviour shared by the search engines.

    Attributes:
        discipline: Frontier order used by the traversal engine
        max_frontier_size: Maximum pending entries before the search aborts
        max_memory_mb: Maximum RSS growth during a search, in megabytes
        memory_check_interval: Minimum seconds between memory checks
    """

    discipline: FrontierDiscipline = FrontierDiscipline.LIFO
    max_frontier_size: Optional[int] = DEFAULT_MAX_FRONTIER_SIZE
    max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB
    memory_check_interval: float = DEFAULT_MEMORY_CHECK_INTERVAL

    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.discipline, str):
            try:
                self.discipline = FrontierDiscipline(self.discipline.lower())
            except ValueError:
                raise ConfigurationError(
                    f"Unknown frontier discipline '{self.discipline}'. "
                    f"Must be one of: {', '.join(d.value for d in FrontierDiscipline)}"
                )
        if not isinstance(self.discipline, FrontierDiscipline):
            raise ConfigurationError("discipline must be a FrontierDiscipline")

        if self.max_frontier_size is not None:
            if isinstance(self.max_frontier_size, bool) or not isinstance(
                self.max_frontier_size, int
            ):
                raise ConfigurationError("max_frontier_size must be an integer")
            if self.max_frontier_size <= 0:
                raise ConfigurationError("max_frontier_size must be positive")

        if self.max_memory_mb is not None:
            if not isinstance(self.max_memory_mb, (int, float)):
                raise ConfigurationError("max_memory_mb must be a numeric value")
            if self.max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")

        if not isinstance(self.memory_check_interval, (int, float)):
            raise ConfigurationError("memory_check_interval must be a numeric value")
        if self.memory_check_interval < 0:
            raise ConfigurationError("memory_check_interval cannot be negative")
