"""
Algorithm interfaces.

Each algorithm is bound to the graph it analyses at construction and never
mutates it.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Tuple

from graph import DirectedGraph
from adjacency_list_graph import WeightedGraph


Visitor = Callable[[int], None]


class GraphTraversal(ABC):
    """
    Interface for single-start traversals reporting each reachable node once.
    """

    def __init__(self, graph: DirectedGraph) -> None:
        self.graph = graph

    @abstractmethod
    def visit_order(self, from_node: int) -> Iterator[int]:
        """
        Lazily yield nodes reachable from from_node in visit order.

        Yields nothing when from_node is not a node of the graph.
        """
        raise NotImplementedError

    def traverse(self, from_node: int, callback: Visitor) -> None:
        """Invoke callback once per reachable node, in visit order."""
        for node in self.visit_order(from_node):
            callback(node)


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation over a WeightedGraph.
    """

    def __init__(self, graph: WeightedGraph) -> None:
        self.graph = graph

    @abstractmethod
    def minimum_weights(self, from_source: int) -> List[float]:
        """
        Minimum path cost from from_source to every node.

        Returns:
            List indexed by node; math.inf for unreachable nodes.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum spanning forest computation over a WeightedGraph.
    """

    def __init__(self, graph: WeightedGraph) -> None:
        self.graph = graph

    @abstractmethod
    def minimum_spanning_tree(self) -> List[Tuple[int, int]]:
        """
        Accepted (source, destination) edges, in acceptance order.
        """
        raise NotImplementedError
