"""Points, weighted edges and a disjoint-set forest."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in three-dimensional space with integer coordinates."""

    x: int
    y: int
    z: int

    def dist(self, other):
        """Euclidean distance to ``other``, rounded down to an integer."""
        return math.isqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )


@dataclass(frozen=True)
class Edge:
    """A pair of point indices and their distance; edges order by distance alone."""

    points: tuple
    dist: int

    def __lt__(self, other):
        return self.dist < other.dist

    def __le__(self, other):
        return self.dist <= other.dist

    def __gt__(self, other):
        return self.dist > other.dist

    def __ge__(self, other):
        return self.dist >= other.dist


class DisjointSets:
    """Union by rank with path compression over the elements ``0..n-1``."""

    def __init__(self, n):
        self._parent = list(range(n))
        self._rank = [1] * n

    def __len__(self):
        return len(self._parent)

    def __repr__(self):
        return f"DisjointSets(parent={self._parent}, rank={self._rank})"

    def find_parent(self, i):
        """Return the representative of the set holding ``i``."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def unite(self, x, y):
        """Merge the sets of ``x`` and ``y``; True if they were separate."""
        x_root = self.find_parent(x)
        y_root = self.find_parent(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        elif self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True