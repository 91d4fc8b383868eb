"""
Union-Find (Disjoint Set Union) data structure.

Tracks a partition of the vertices `0..size-1` with:
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Used by Kruskal's algorithm to reject edges that would close a cycle.
"""

from errors import InvalidArgumentError, VertexOutOfRangeError
from localtypes import Vertex


class UnionFind:
    """
    Union-Find with path compression and union by rank.

    Every vertex starts as its own singleton set.

    Example:
        >>> uf = UnionFind(5)
        >>> uf.union(1, 2)
        1
        >>> uf.union(2, 3)
        1
        >>> uf.connected(1, 3)
        True
        >>> uf.connected(1, 4)
        False
    """

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or size <= 0:
            raise InvalidArgumentError("size", size, "must be a positive integer")
        self._parent: list[Vertex] = list(range(size))
        self._rank: list[int] = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, element: Vertex) -> None:
        if not 0 <= element < len(self._parent):
            raise VertexOutOfRangeError(element, len(self._parent))

    def find(self, element: Vertex) -> Vertex:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        self._check(element)

        # Find root
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, x: Vertex, y: Vertex) -> Vertex:
        """
        Merge the sets containing x and y.

        Uses union by rank: attaches the shorter tree under the taller one
        to keep trees balanced. On equal ranks, y's root goes under x's.

        Returns the representative of the merged set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        # Attach smaller tree under larger tree
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
            return root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
            return root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
            return root_x

    def connected(self, x: Vertex, y: Vertex) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def get_all_sets(self) -> dict[Vertex, set[Vertex]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[Vertex, set[Vertex]] = {}
        for element in range(len(self._parent)):
            root = self.find(element)
            if root not in sets:
                sets[root] = set()
            sets[root].add(element)
        return sets
