"""
Percolation Threshold - Monte Carlo estimation of the site-percolation threshold.

This package provides tools for:
- Weighted quick-union connectivity with path compression
- Site percolation on an n-by-n grid without backwash
- Monte Carlo trials with mean, stddev and 95% confidence interval
- Deque and randomized queue containers
- YAML-driven sweeps over grid sizes and CSV aggregation of results
"""

__version__ = "1.0.0"
