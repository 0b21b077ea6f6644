"""
Unit tests for TopologicalSort.
"""

from typing import List

import pytest

from adjacency_list_graph import Graph
from topological_sort import CycleDetectedError, TopologicalSort


def make_simple_graph() -> Graph:
    g = Graph(5)
    for src, dst in [(0, 1), (1, 2), (2, 0), (0, 4), (4, 3), (3, 1)]:
        g.add_edge(src, dst)
    return g


def test_topological_after_breaking_cycle():
    g = make_simple_graph()
    assert g.remove_edge(2, 0)

    visited: List[int] = []
    TopologicalSort(g).sort(visited.append)

    # 0 -> 4 -> 3 -> 1 -> 2 is the only order respecting every edge
    assert visited == [0, 4, 3, 1, 2]


def test_order_respects_every_edge():
    g = Graph(6)
    for src, dst in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
        g.add_edge(src, dst)

    order = TopologicalSort(g).order()
    position = {node: i for i, node in enumerate(order)}

    assert sorted(order) == list(range(6))
    for src in g.nodes():
        for dst in g.edges(src):
            assert position[src] < position[dst]


def test_ties_broken_by_smallest_index():
    g = Graph(4)
    g.add_edge(3, 0)
    assert TopologicalSort(g).order() == [1, 2, 3, 0]

    assert TopologicalSort(Graph(3)).order() == [0, 1, 2]


def test_cycle_detected_before_any_callback():
    visited: List[int] = []

    with pytest.raises(CycleDetectedError) as excinfo:
        TopologicalSort(make_simple_graph()).sort(visited.append)

    assert visited == []
    assert excinfo.value.unordered == (0, 1, 2, 3, 4)


def test_cycle_error_lists_only_blocked_nodes():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 1)

    with pytest.raises(ValueError) as excinfo:
        TopologicalSort(g).order()

    assert isinstance(excinfo.value, CycleDetectedError)
    assert excinfo.value.unordered == (1, 2)


def test_self_loop_is_a_cycle():
    g = Graph(2)
    g.add_edge(0, 0)
    with pytest.raises(CycleDetectedError):
        TopologicalSort(g).order()
