"""Site percolation and Monte Carlo threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid import Percolation
from .stats import PercolationStats
from .analysis import aggregate_score_files_to_csv, results_table

__all__ = [
    'WeightedQuickUnionUF',
    'Percolation',
    'PercolationStats',
    'aggregate_score_files_to_csv',
    'results_table',
]
