"""
Weighted graph abstraction and adjacency-mapping adapters.

The search engines only ever call ``neighbours(node)``, so any object exposing
that method can be searched. ``WeightedGraph`` is the abstract base the
bundled adapters share:

- ``SimpleGraph``: node -> list of neighbours, every edge weighs 1
- ``WeightedAdjacencyGraph``: node -> list of (weight, neighbour) pairs

Both adapters copy their input at construction and are read-only afterwards,
which makes a single instance safe to share between searches running in
different threads.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, Iterator, List, Mapping, Tuple

from .types import NodeT, Weight
from .utils import validate_weight

UNIT_WEIGHT = 1


class WeightedGraph(ABC, Generic[NodeT]):
    """Abstract base class for graphs the search engines can traverse."""

    @abstractmethod
    def neighbours(self, node: NodeT) -> Iterable[Tuple[Weight, NodeT]]:
        """
        Get the outgoing edges of a node.

        Args:
            node: Node to expand

        Returns:
            (weight, neighbour) pairs in unspecified order; empty for nodes
            with no outgoing edges and for nodes absent from the graph
        """

    def has_node(self, node: NodeT) -> bool:
        """Check whether the node has an adjacency entry."""
        return node in self.get_nodes()

    @abstractmethod
    def get_nodes(self) -> Iterator[NodeT]:
        """Iterate the nodes that have an adjacency entry."""

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)  # type: ignore[arg-type]


class SimpleGraph(WeightedGraph[NodeT]):
    """
    Unit-cost graph backed by an adjacency mapping.

    Every edge is assigned weight 1, so shortest-path search over a
    ``SimpleGraph`` finds the path with the fewest hops.

    Example:
        >>> graph = SimpleGraph({"A": ["B"], "B": ["A", "C"]})
        >>> list(graph.neighbours("B"))
        [(1, 'A'), (1, 'C')]
    """

    def __init__(self, edges: Mapping[NodeT, Iterable[NodeT]]):
        """
        Initialize graph from an adjacency mapping.

        Args:
            edges: Mapping of node to its ordered neighbours
        """
        self._edges: Dict[NodeT, Tuple[NodeT, ...]] = {
            node: tuple(neighbours) for node, neighbours in edges.items()
        }

    @classmethod
    def from_edges(
        cls, pairs: Iterable[Tuple[NodeT, NodeT]], bidirectional: bool = False
    ) -> "SimpleGraph[NodeT]":
        """
        Build a graph from (from_node, to_node) pairs.

        Args:
            pairs: Directed edges in insertion order
            bidirectional: Also add the reverse of every pair

        Returns:
            New SimpleGraph instance
        """
        adjacency: Dict[NodeT, List[NodeT]] = {}
        for source, target in pairs:
            adjacency.setdefault(source, []).append(target)
            adjacency.setdefault(target, [])
            if bidirectional:
                adjacency[target].append(source)
        return cls(adjacency)

    def neighbours(self, node: NodeT) -> List[Tuple[Weight, NodeT]]:
        return [(UNIT_WEIGHT, neighbour) for neighbour in self._edges.get(node, ())]

    def has_node(self, node: NodeT) -> bool:
        return node in self._edges

    def get_nodes(self) -> Iterator[NodeT]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self._edges)})"


class WeightedAdjacencyGraph(WeightedGraph[NodeT]):
    """
    Graph with explicit edge weights backed by an adjacency mapping.

    Weights are validated once at construction, so a graph that builds
    successfully never makes the shortest-path engine fail on a weight.

    Raises:
        InvalidWeightError: If any weight is negative, non-finite or non-numeric
    """

    def __init__(self, edges: Mapping[NodeT, Iterable[Tuple[Weight, NodeT]]]):
        self._edges: Dict[NodeT, Tuple[Tuple[Weight, NodeT], ...]] = {}
        for node, neighbours in edges.items():
            pairs = tuple(neighbours)
            for weight, neighbour in pairs:
                validate_weight(weight, node, neighbour)
            self._edges[node] = pairs

    def neighbours(self, node: NodeT) -> List[Tuple[Weight, NodeT]]:
        return list(self._edges.get(node, ()))

    def has_node(self, node: NodeT) -> bool:
        return node in self._edges

    def get_nodes(self) -> Iterator[NodeT]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self._edges)})"
