"""Tests for the weighted quick-union structure."""

import pytest

from percolation_threshold.percolation.union_find import WeightedQuickUnionUF


class TestWeightedQuickUnionUF:
    """Tests for union/find/connected."""

    def test_initial_singletons(self):
        """Every element starts in its own set."""
        uf = WeightedQuickUnionUF(5)

        assert len(uf) == 5
        assert uf.count == 5
        for p in range(5):
            assert uf.find(p) == p
            assert uf.component_size(p) == 1

    def test_union_connects(self):
        """Union merges sets and connectivity is transitive."""
        uf = WeightedQuickUnionUF(6)
        uf.union(0, 1)
        uf.union(1, 2)

        assert uf.connected(0, 2)
        assert not uf.connected(0, 3)
        assert uf.count == 4
        assert uf.component_size(2) == 3

    def test_union_is_noop_when_connected(self):
        """Union of already-connected elements leaves the count unchanged."""
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(1, 0)

        assert uf.count == 3

    def test_smaller_tree_goes_under_larger(self):
        """The root of the larger tree survives a union."""
        uf = WeightedQuickUnionUF(5)
        uf.union(0, 1)
        uf.union(0, 2)
        root = uf.find(0)

        uf.union(3, 0)

        assert uf.find(3) == root

    def test_equal_sizes_attach_second_root_under_first(self):
        """With equal tree sizes q's root goes under p's root."""
        uf = WeightedQuickUnionUF(2)
        uf.union(0, 1)

        assert uf.find(1) == 0

    def test_path_compression_links_to_root(self):
        """After find, every node on the path points directly at the root."""
        uf = WeightedQuickUnionUF(8)
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(0, 2)
        uf.union(4, 5)
        uf.union(6, 7)
        uf.union(4, 6)
        uf.union(0, 4)

        root = uf.find(7)

        assert uf._parent[7] == root
        assert uf._parent[6] == root

    @pytest.mark.parametrize("p", [-1, 3, 100])
    def test_find_out_of_range(self, p):
        """Indices outside [0, n) raise IndexError."""
        uf = WeightedQuickUnionUF(3)

        with pytest.raises(IndexError):
            uf.find(p)

    def test_connected_out_of_range(self):
        uf = WeightedQuickUnionUF(3)

        with pytest.raises(IndexError):
            uf.connected(0, 3)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(-1)

    def test_returns_python_ints(self):
        """Roots and sizes come back as plain ints, not numpy scalars."""
        uf = WeightedQuickUnionUF(4)
        uf.union(1, 2)

        assert type(uf.find(2)) is int
        assert type(uf.component_size(2)) is int
