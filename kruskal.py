"""
Kruskal minimum spanning forest over the undirected reading of a WeightedGraph.
"""

from typing import List, Tuple
import logging

from algorithms import SpanningTreeEngine
from union_find import DisjointSet


logger = logging.getLogger(__name__)


class Kruskal(SpanningTreeEngine):
    """
    Accepts edges in ascending cost order whenever they join two components.

    Edges are enumerated source-major in insertion order and sorted stably by
    cost, so equal-cost edges keep that order. u -> v and v -> u are the same
    undirected candidate: whichever comes first in the sorted order is
    accepted and the other is rejected by the union-find.
    """

    def minimum_spanning_tree(self) -> List[Tuple[int, int]]:
        return [(source, destination) for source, destination, _ in self._spanning_edges()]

    def total_cost(self) -> float:
        """Summed cost of the minimum spanning forest."""
        return sum(cost for _, _, cost in self._spanning_edges())

    def _spanning_edges(self) -> List[Tuple[int, int, float]]:
        candidates = sorted(self.graph.all_edges(), key=lambda edge: edge[2])
        components = DisjointSet(self.graph.nodes_count)

        accepted: List[Tuple[int, int, float]] = []
        for source, destination, cost in candidates:
            if components.union(source, destination):
                accepted.append((source, destination, cost))

        logger.debug(
            "kruskal accepted %d of %d edges, %d components",
            len(accepted),
            len(candidates),
            components.components,
        )
        return accepted
