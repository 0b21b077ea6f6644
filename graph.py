"""
Directed graph abstraction shared by the unweighted and weighted graphs.

Nodes are zero-based integer indices in [0, nodes_count).
Edges are directed: source -> destination, stored in insertion order.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class DirectedGraph(ABC):
    """Directed graph over a fixed set of integer nodes."""

    def __init__(self, nodes_count: int) -> None:
        if nodes_count < 0:
            raise ValueError(f"nodes_count must be non-negative, got {nodes_count}")
        self._nodes_count = nodes_count

    @property
    def nodes_count(self) -> int:
        return self._nodes_count

    def nodes(self) -> Iterable[int]:
        """Return all node indices in ascending order."""
        return range(self._nodes_count)

    def has_node(self, node: int) -> bool:
        return 0 <= node < self._nodes_count

    @abstractmethod
    def neighbors(self, source: int) -> List[int]:
        """
        Destinations reachable from source by one edge, in insertion order.

        Out-of-range sources have no neighbours.
        """
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, source: int, destination: int) -> bool:
        raise NotImplementedError

    def edge_count(self) -> int:
        return sum(len(self.neighbors(node)) for node in self.nodes())

    def in_degrees(self) -> List[int]:
        """Number of incoming edges per node, indexed by node."""
        degrees = [0] * self._nodes_count
        for node in self.nodes():
            for destination in self.neighbors(node):
                degrees[destination] += 1
        return degrees
