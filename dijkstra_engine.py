"""
Heap-based Dijkstra over a WeightedGraph.

Uses Python's heapq with lazy deletion: stale queue entries are skipped
when popped instead of being decreased in place.
"""

from typing import List, Optional, Tuple
import heapq
import logging
import math

from algorithms import ShortestPathEngine


logger = logging.getLogger(__name__)


class Dijkstra(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def minimum_weights(self, from_source: int) -> List[float]:
        dist, _ = self.shortest_paths(from_source)
        return dist

    def shortest_paths(
        self, from_source: int
    ) -> Tuple[List[float], List[Optional[int]]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Returns the distance list (math.inf where unreachable) plus a
        predecessor list: prev[v] is the node before v on a shortest path
        from the source, or None for the source itself and for unreachable
        nodes. An out-of-range source leaves every node unreachable.
        """
        n = self.graph.nodes_count
        dist: List[float] = [math.inf] * n
        prev: List[Optional[int]] = [None] * n
        if not self.graph.has_node(from_source):
            return dist, prev

        visited = [False] * n
        dist[from_source] = 0.0
        pq = [(0.0, from_source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)
            if visited[u]:
                continue
            visited[u] = True

            for v, w in self.graph.edges(u):
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug(
            "dijkstra from %d reached %d of %d nodes", from_source, sum(visited), n
        )
        return dist, prev

    def path(self, from_source: int, to_destination: int) -> List[int]:
        """
        Nodes of one shortest path from from_source to to_destination.

        Walks the predecessor list back from the destination. Empty when the
        destination is unreachable.
        """
        dist, prev = self.shortest_paths(from_source)
        if not self.graph.has_node(to_destination) or math.isinf(dist[to_destination]):
            return []

        nodes = [to_destination]
        while nodes[-1] != from_source:
            parent = prev[nodes[-1]]
            assert parent is not None
            nodes.append(parent)
        nodes.reverse()
        return nodes
