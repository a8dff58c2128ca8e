"""
Monte Carlo estimation of the percolation threshold.

Each trial opens uniformly random sites of a fresh n-by-n grid until the
system percolates and records the fraction of open sites. The threshold
estimate is the mean over trials, reported with a 95% confidence interval
under the normal approximation.
"""

import numpy as np
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .grid import Percolation

CONFIDENCE_95 = 1.96

RngLike = Optional[Union[int, np.random.Generator]]


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run a single percolation trial on an n-by-n grid.

    Every draw is uniform over all n*n sites, including sites that are
    already open; those draws are no-ops. This is rejection sampling of the
    blocked sites.

    Args:
        n: Grid size
        rng: Random generator used for the site draws

    Returns:
        Fraction of sites open at the moment the system percolates
    """
    perc = Percolation(n)
    while not perc.percolates():
        rows = rng.integers(1, n + 1, size=n)
        cols = rng.integers(1, n + 1, size=n)
        for row, col in zip(rows, cols):
            perc.open(int(row), int(col))
            if perc.percolates():
                break
    return perc.open_fraction()


class PercolationStats:
    """
    Repeated independent percolation trials on an n-by-n grid.

    All trials run at construction. The recorded samples are read-only
    afterwards.

    Example:
        stats = PercolationStats(200, 100, rng=42)
        print(stats.mean(), stats.confidence_lo(), stats.confidence_hi())
    """

    def __init__(self, n: int, trials: int, rng: RngLike = None):
        """
        Run the trials.

        Args:
            n: Grid size
            trials: Number of independent trials
            rng: numpy Generator or integer seed (default: fresh OS entropy)
        """
        if n <= 0 or trials <= 0:
            raise ValueError(
                f"Grid size and trial count must both be greater than 0, got n={n}, trials={trials}"
            )

        self.n = n
        self.trials = trials

        generator = np.random.default_rng(rng)
        self._results = np.empty(trials, dtype=np.float64)
        for i in range(trials):
            self._results[i] = run_trial(n, generator)

    @property
    def results(self) -> np.ndarray:
        """Per-trial open-site fractions (copy)."""
        return self._results.copy()

    def mean(self) -> float:
        return float(np.mean(self._results))

    def stddev(self) -> float:
        """
        Sample standard deviation of the open-site fractions.

        Divides by trials - 1, so a single trial yields NaN.
        """
        return float(np.std(self._results, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }

    def save(self, filename: Union[str, Path]) -> None:
        """
        Save trial results to file.

        Args:
            filename: Path to output .npz file
        """
        np.savez(filename, n=self.n, trials=self.trials, results=self._results)

    @classmethod
    def load(cls, filename: Union[str, Path]) -> 'PercolationStats':
        """
        Load trial results saved with save() without re-running any trials.

        Args:
            filename: Path to input .npz file
        """
        stats = cls.__new__(cls)
        with np.load(filename) as dump:
            stats.n = int(dump['n'])
            stats.trials = int(dump['trials'])
            stats._results = np.array(dump['results'], dtype=np.float64)
        return stats
