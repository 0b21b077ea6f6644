"""
Depth-first and breadth-first traversals.

Visited state lives inside a single visit_order() call, so one traversal
object can be reused for any number of starts.
"""

from collections import deque
from typing import Deque, Iterator, List
import logging

from algorithms import GraphTraversal


logger = logging.getLogger(__name__)


class DFSGraphTraversal(GraphTraversal):
    """
    Pre-order depth-first traversal using an explicit stack.

    Neighbours are explored in adjacency (insertion) order, matching the
    recursive formulation.
    """

    def visit_order(self, from_node: int) -> Iterator[int]:
        if not self.graph.has_node(from_node):
            logger.debug("DFS start %s is not in the graph", from_node)
            return

        visited = [False] * self.graph.nodes_count
        # One iterator of not-yet-explored neighbours per open node
        stack: List[Iterator[int]] = []

        visited[from_node] = True
        yield from_node
        stack.append(iter(self.graph.neighbors(from_node)))

        while stack:
            for neighbor in stack[-1]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    yield neighbor
                    stack.append(iter(self.graph.neighbors(neighbor)))
                    break
            else:
                stack.pop()


class BFSGraphTraversal(GraphTraversal):
    """
    Breadth-first traversal; nodes are marked visited when enqueued.
    """

    def visit_order(self, from_node: int) -> Iterator[int]:
        if not self.graph.has_node(from_node):
            logger.debug("BFS start %s is not in the graph", from_node)
            return

        visited = [False] * self.graph.nodes_count
        queue: Deque[int] = deque([from_node])
        visited[from_node] = True

        while queue:
            node = queue.popleft()
            yield node
            for neighbor in self.graph.neighbors(node):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)
