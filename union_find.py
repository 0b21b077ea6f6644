"""
Array-backed disjoint-set forest with path compression and union by rank.
"""

from typing import List


class DisjointSet:
    def __init__(self, size: int) -> None:
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size
        self._components = size

    @property
    def components(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets holding x and y.

        Returns False if they were already in the same set.
        """
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._rank[px] < self._rank[py]:
            px, py = py, px
        self._parent[py] = px
        if self._rank[px] == self._rank[py]:
            self._rank[px] += 1
        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
