from union_find import DisjointSet


def test_union_merges_and_counts_components():
    ds = DisjointSet(5)
    assert ds.components == 5

    assert ds.union(0, 1)
    assert ds.union(3, 4)
    assert not ds.union(1, 0)
    assert ds.components == 3

    assert ds.connected(0, 1)
    assert not ds.connected(1, 3)


def test_find_after_chained_unions():
    ds = DisjointSet(6)
    for a, b in [(0, 1), (1, 2), (2, 3), (4, 5)]:
        ds.union(a, b)

    root = ds.find(3)
    assert all(ds.find(x) == root for x in range(4))
    assert ds.find(5) == ds.find(4) != root
    assert ds.components == 2
