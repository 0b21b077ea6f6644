"""
Unit tests for Kruskal.
"""

import itertools
import random

import pytest

from adjacency_list_graph import WeightedGraph
from kruskal import Kruskal
from union_find import DisjointSet


def make_weighted_graph() -> WeightedGraph:
    g = WeightedGraph(5)
    for src, dst, cost in [
        (0, 1, 5),
        (1, 2, 1),
        (2, 0, 7),
        (0, 2, 9),
        (4, 3, 8),
        (3, 1, 1),
        (1, 3, 15),
    ]:
        g.add_edge(src, dst, cost)
    return g


def test_kruskal_minimum_spanning_tree():
    mst = Kruskal(make_weighted_graph()).minimum_spanning_tree()
    assert mst == [(1, 2), (3, 1), (0, 1), (4, 3)]


def test_kruskal_total_cost():
    assert Kruskal(make_weighted_graph()).total_cost() == pytest.approx(15.0)


def test_kruskal_spanning_forest_on_disconnected_graph():
    g = WeightedGraph(6)
    g.add_edge(0, 1, 2.0)
    g.add_edge(1, 2, 1.0)
    g.add_edge(2, 0, 3.0)
    g.add_edge(3, 4, 1.0)
    # node 5 isolated: 3 components, so 6 - 3 edges

    mst = Kruskal(g).minimum_spanning_tree()
    assert mst == [(1, 2), (3, 4), (0, 1)]

    ds = DisjointSet(6)
    for u, v in mst:
        assert ds.union(u, v)  # no cycle
    assert ds.components == 3


def test_kruskal_uses_cheaper_direction_of_opposite_edges():
    g = WeightedGraph(2)
    g.add_edge(0, 1, 10.0)
    g.add_edge(1, 0, 2.0)

    kruskal = Kruskal(g)
    assert kruskal.minimum_spanning_tree() == [(1, 0)]
    assert kruskal.total_cost() == 2.0


def test_kruskal_equal_costs_keep_source_major_order():
    g = WeightedGraph(3)
    g.add_edge(2, 0, 1.0)
    g.add_edge(0, 1, 1.0)
    g.add_edge(1, 2, 1.0)

    assert Kruskal(g).minimum_spanning_tree() == [(0, 1), (1, 2)]


def test_kruskal_empty_graph():
    assert Kruskal(WeightedGraph(0)).minimum_spanning_tree() == []
    assert Kruskal(WeightedGraph(3)).total_cost() == 0


def brute_force_forest_cost(n, edges):
    """Cheapest acyclic subset of size n - components, by exhaustive search."""
    full = DisjointSet(n)
    for u, v, _ in edges:
        full.union(u, v)
    size = n - full.components

    best = None
    for subset in itertools.combinations(edges, size):
        ds = DisjointSet(n)
        if all(ds.union(u, v) for u, v, _ in subset):
            cost = sum(c for _, _, c in subset)
            if best is None or cost < best:
                best = cost
    return best


def test_random_graphs_match_brute_force_minimum():
    rng = random.Random(11)

    for _ in range(40):
        n = rng.randint(1, 5)
        g = WeightedGraph(n)
        for _ in range(rng.randint(0, 8)):
            g.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(0, 9))

        kruskal = Kruskal(g)
        mst = kruskal.minimum_spanning_tree()
        expected = brute_force_forest_cost(n, g.all_edges())

        assert kruskal.total_cost() == expected
        components = DisjointSet(n)
        for u, v, _ in g.all_edges():
            components.union(u, v)
        assert len(mst) == n - components.components

        ds = DisjointSet(n)
        for u, v in mst:
            assert ds.union(u, v)
