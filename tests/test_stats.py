"""Tests for the Monte Carlo stats driver."""

import warnings

import numpy as np
import pytest

from percolation_threshold.percolation.stats import (
    CONFIDENCE_95, PercolationStats, run_trial
)


class TestRunTrial:
    """Tests for a single trial."""

    def test_fraction_in_unit_interval(self):
        rng = np.random.default_rng(0)
        for n in (1, 2, 5, 10):
            fraction = run_trial(n, rng)
            assert 0 < fraction <= 1

    def test_single_site_grid_always_full(self):
        """A 1x1 grid percolates only once its one site is open."""
        assert run_trial(1, np.random.default_rng(1)) == 1.0

    def test_two_by_two_needs_at_least_two_sites(self):
        rng = np.random.default_rng(2)
        for _ in range(20):
            assert run_trial(2, rng) >= 0.5


class TestPercolationStats:
    """Tests for PercolationStats aggregation."""

    def test_statistics_for_small_grid(self):
        stats = PercolationStats(2, 100, rng=11)

        assert 0 < stats.mean() <= 1
        assert stats.stddev() >= 0
        assert stats.confidence_lo() <= stats.mean() <= stats.confidence_hi()

    def test_results_length_and_range(self):
        stats = PercolationStats(4, 25, rng=5)
        results = stats.results

        assert results.shape == (25,)
        assert np.all(results > 0)
        assert np.all(results <= 1)

    def test_results_is_a_copy(self):
        stats = PercolationStats(3, 5, rng=5)
        stats.results[:] = -1

        assert np.all(stats.results > 0)

    def test_formulas(self):
        stats = PercolationStats(5, 30, rng=8)
        results = stats.results

        mean = results.mean()
        stddev = results.std(ddof=1)
        half = CONFIDENCE_95 * stddev / np.sqrt(30)

        assert stats.mean() == pytest.approx(mean)
        assert stats.stddev() == pytest.approx(stddev)
        assert stats.confidence_lo() == pytest.approx(mean - half)
        assert stats.confidence_hi() == pytest.approx(mean + half)

    def test_single_trial_stddev_is_nan(self):
        """One trial leaves the sample standard deviation undefined."""
        stats = PercolationStats(3, 1, rng=0)

        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            assert np.isnan(stats.stddev())
            assert np.isnan(stats.confidence_lo())
        assert 0 < stats.mean() <= 1

    def test_seed_is_reproducible(self):
        a = PercolationStats(6, 10, rng=42)
        b = PercolationStats(6, 10, rng=42)

        assert np.array_equal(a.results, b.results)

    def test_accepts_generator(self):
        stats = PercolationStats(3, 4, rng=np.random.default_rng(9))

        assert len(stats.results) == 4

    def test_threshold_estimate_near_known_value(self):
        """Site percolation on the square lattice has p* close to 0.593."""
        stats = PercolationStats(20, 200, rng=2024)

        assert stats.mean() == pytest.approx(0.593, abs=0.04)

    @pytest.mark.parametrize("n, trials", [(0, 10), (-1, 10), (10, 0), (10, -5), (0, 0)])
    def test_invalid_arguments(self, n, trials):
        with pytest.raises(ValueError):
            PercolationStats(n, trials)

    def test_summary(self):
        stats = PercolationStats(3, 10, rng=1)
        summary = stats.summary()

        assert summary['n'] == 3
        assert summary['trials'] == 10
        assert summary['mean'] == pytest.approx(stats.mean())
        assert summary['confidence_hi'] == pytest.approx(stats.confidence_hi())

    def test_save_and_load(self, tmp_path):
        stats = PercolationStats(4, 12, rng=3)
        path = tmp_path / "n_4.npz"
        stats.save(path)

        loaded = PercolationStats.load(path)

        assert loaded.n == 4
        assert loaded.trials == 12
        assert np.array_equal(loaded.results, stats.results)
        assert loaded.mean() == pytest.approx(stats.mean())

    def test_load_closes_file(self, tmp_path):
        """Loaded results stay valid after the .npz file is replaced."""
        path = tmp_path / "n_3.npz"
        original = PercolationStats(3, 6, rng=1)
        original.save(path)

        loaded = PercolationStats.load(path)
        path.unlink()
        PercolationStats(3, 2, rng=2).save(path)

        assert loaded.trials == 6
        assert np.array_equal(loaded.results, original.results)
