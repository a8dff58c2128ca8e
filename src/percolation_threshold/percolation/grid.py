"""
Site percolation on an n-by-n grid.

Sites are addressed by 1-indexed (row, col) and stored at linear index
(row - 1) * n + col. Index 0 is the virtual top node and n*n + 1 the virtual
bottom node.

Two union-find structures are maintained. The first only knows the virtual
top and answers is_full(); the second also links the virtual bottom and
answers percolates(). A single structure wired to both virtual nodes would
report bottom-row sites as full through the bottom node once the system
percolates (backwash).
"""

import numpy as np

from .union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n-by-n grid of open/blocked sites.

    All sites start blocked. Opening is idempotent and a site is never
    blocked again once opened.
    """

    def __init__(self, n: int):
        """
        Initialize a grid with every site blocked.

        Args:
            n: Number of rows (and columns)
        """
        if n <= 0:
            raise ValueError(f"Grid size must be greater than 0, got {n}")

        self._n = n
        self._top = 0
        self._bottom = n * n + 1
        self._open_count = 0

        self._is_open = [False] * (n * n + 2)
        self._is_open[self._top] = True
        self._is_open[self._bottom] = True

        self._full_uf = WeightedQuickUnionUF(n * n + 1)
        self._percolate_uf = WeightedQuickUnionUF(n * n + 2)

    @property
    def n(self) -> int:
        return self._n

    def _index(self, row: int, col: int) -> int:
        n = self._n
        if row < 1 or row > n or col < 1 or col > n:
            raise ValueError(
                f"Site ({row}, {col}) is outside the grid; row and col must be in [1, {n}]"
            )
        return (row - 1) * n + col

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Args:
            row: Row in [1, n]
            col: Column in [1, n]
        """
        site = self._index(row, col)
        if self._is_open[site]:
            return

        self._is_open[site] = True
        self._open_count += 1

        if row == 1:
            self._full_uf.union(site, self._top)
            self._percolate_uf.union(site, self._top)
        if row == self._n:
            self._percolate_uf.union(site, self._bottom)

        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            self._union_if_open(site, r, c)

    def _union_if_open(self, site: int, row: int, col: int) -> None:
        n = self._n
        if row < 1 or row > n or col < 1 or col > n:
            return
        neighbor = (row - 1) * n + col
        if self._is_open[neighbor]:
            self._full_uf.union(site, neighbor)
            self._percolate_uf.union(site, neighbor)

    def is_open(self, row: int, col: int) -> bool:
        return self._is_open[self._index(row, col)]

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) connected to the top row by a path of open sites?

        Uses the top-only structure, so a path through the virtual bottom
        never makes a site full.
        """
        site = self._index(row, col)
        return self._full_uf.connected(self._top, site)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def open_fraction(self) -> float:
        """Fraction of the n*n sites that are open."""
        return self._open_count / (self._n * self._n)

    def percolates(self) -> bool:
        return self._percolate_uf.connected(self._top, self._bottom)

    def open_sites(self) -> np.ndarray:
        """
        Get the open/blocked state of every site.

        Returns:
            Boolean array of shape (n, n); element [row - 1, col - 1] is True
            when site (row, col) is open
        """
        return np.array(self._is_open[1:-1], dtype=bool).reshape(self._n, self._n)
