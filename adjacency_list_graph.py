"""
Concrete directed graphs backed by per-node adjacency lists.

Graph stores plain destinations; WeightedGraph stores (destination, cost)
pairs. Both keep insertion order, which traversals use as their tie-break.
"""

from typing import List, Optional, Tuple
import math

from graph import DirectedGraph


class Graph(DirectedGraph):
    """
    Unweighted directed graph with at most one edge per ordered pair.
    """

    def __init__(self, nodes_count: int) -> None:
        super().__init__(nodes_count)
        self._adj: List[List[int]] = [[] for _ in range(nodes_count)]

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, source: int, destination: int) -> bool:
        """
        Append source -> destination.

        Returns False if either index is out of range or the edge exists.
        """
        if not (self.has_node(source) and self.has_node(destination)):
            return False
        if destination in self._adj[source]:
            return False
        self._adj[source].append(destination)
        return True

    def remove_edge(self, source: int, destination: int) -> bool:
        if not self.has_edge(source, destination):
            return False
        self._adj[source].remove(destination)
        return True

    # --- Queries -------------------------------------------------------------

    def edges(self, source: int) -> List[int]:
        """Destinations of source in insertion order (empty if out of range)."""
        if not self.has_node(source):
            return []
        return list(self._adj[source])  # defensive copy

    def neighbors(self, source: int) -> List[int]:
        return self.edges(source)

    def has_edge(self, source: int, destination: int) -> bool:
        return self.has_node(source) and destination in self._adj[source]


class WeightedGraph(DirectedGraph):
    """
    Directed graph with a non-negative cost per edge.

    Re-adding an existing ordered pair is rejected and keeps the stored cost.
    """

    def __init__(self, nodes_count: int) -> None:
        super().__init__(nodes_count)
        self._adj: List[List[Tuple[int, float]]] = [[] for _ in range(nodes_count)]

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, source: int, destination: int, cost: float) -> bool:
        """
        Append source -> destination with cost.

        Returns False for out-of-range indices, an existing edge, or a cost
        that is negative or NaN.
        """
        if not (self.has_node(source) and self.has_node(destination)):
            return False
        if math.isnan(cost) or cost < 0:
            return False
        if self.has_edge(source, destination):
            return False
        self._adj[source].append((destination, float(cost)))
        return True

    def remove_edge(self, source: int, destination: int) -> bool:
        if not self.has_node(source):
            return False
        for i, (dst, _) in enumerate(self._adj[source]):
            if dst == destination:
                del self._adj[source][i]
                return True
        return False

    # --- Queries -------------------------------------------------------------

    def edges(self, source: int) -> List[Tuple[int, float]]:
        """(destination, cost) pairs of source in insertion order."""
        if not self.has_node(source):
            return []
        return list(self._adj[source])

    def neighbors(self, source: int) -> List[int]:
        return [dst for dst, _ in self.edges(source)]

    def has_edge(self, source: int, destination: int) -> bool:
        return self.cost(source, destination) is not None

    def cost(self, source: int, destination: int) -> Optional[float]:
        """Cost of source -> destination, or None if there is no such edge."""
        for dst, cost in self.edges(source):
            if dst == destination:
                return cost
        return None

    def all_edges(self) -> List[Tuple[int, int, float]]:
        """Every edge as (source, destination, cost), source-major in insertion order."""
        return [
            (source, dst, cost)
            for source in self.nodes()
            for dst, cost in self._adj[source]
        ]
