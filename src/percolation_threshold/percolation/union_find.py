"""
Weighted quick-union with full path compression.

Elements are the integers 0..n-1. Parent links and tree sizes are plain
Python lists.
"""


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over the elements 0..n-1.

    Union attaches the root of the smaller tree under the root of the larger
    one, so tree height stays O(log n). Find relinks every visited node
    directly to the root.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements
        """
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")

        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Return the canonical root of the set containing p.

        Args:
            p: Element index

        Returns:
            Root element of p's tree
        """
        self._validate(p)
        parent = self._parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """
        Merge the sets containing p and q.

        Args:
            p: First element
            q: Second element
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1

    def component_size(self, p: int) -> int:
        """Number of elements in the set containing p."""
        return self._size[self.find(p)]
