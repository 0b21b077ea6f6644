"""
Topological ordering of an unweighted directed graph (Kahn's algorithm).

Convention: for every edge u -> v, u is emitted before v. When several nodes
are ready at once the smallest index goes first, so the order is deterministic.
"""

from typing import Callable, List, Sequence
import heapq
import logging

from graph import DirectedGraph


logger = logging.getLogger(__name__)


class CycleDetectedError(ValueError):
    """Raised when the graph handed to TopologicalSort contains a cycle."""

    def __init__(self, unordered: Sequence[int]) -> None:
        self.unordered = tuple(unordered)
        super().__init__(
            f"graph contains a cycle; nodes that could not be ordered: {list(self.unordered)}"
        )


class TopologicalSort:
    def __init__(self, graph: DirectedGraph) -> None:
        self.graph = graph

    def order(self) -> List[int]:
        """
        Return every node exactly once in topological order.

        Raises:
            CycleDetectedError: if some nodes sit on or behind a cycle.
        """
        in_degree = self.graph.in_degrees()
        ready = [node for node in self.graph.nodes() if in_degree[node] == 0]
        heapq.heapify(ready)

        result: List[int] = []
        while ready:
            node = heapq.heappop(ready)
            result.append(node)
            for neighbor in self.graph.neighbors(node):
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    heapq.heappush(ready, neighbor)

        if len(result) < self.graph.nodes_count:
            emitted = set(result)
            unordered = [node for node in self.graph.nodes() if node not in emitted]
            logger.debug("topological sort stopped with %d unordered nodes", len(unordered))
            raise CycleDetectedError(unordered)

        return result

    def sort(self, callback: Callable[[int], None]) -> None:
        """
        Invoke callback once per node in topological order.

        The whole order is computed first, so a cyclic graph raises
        CycleDetectedError before any callback fires.
        """
        for node in self.order():
            callback(node)
