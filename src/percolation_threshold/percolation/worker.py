"""
Sweep worker for running threshold estimates over several grid sizes.

For every grid size the worker runs PercolationStats and saves the full
trial results (.npz) plus a one-line summary (.score) next to it.
"""

import numpy as np
from pathlib import Path
from typing import Iterable, Optional, Union

from .stats import PercolationStats

SCORE_COLUMNS = ['mean', 'stddev', 'confidence_lo', 'confidence_hi']


def result_stem(n: int) -> str:
    return f"n_{n}"


def write_score_file(stats: PercolationStats, score_file: Union[str, Path]) -> None:
    """Write mean, stddev and confidence bounds as one tab-separated line."""
    summary = stats.summary()
    with open(score_file, 'w') as f:
        f.write("\t".join(f"{summary[col]}" for col in SCORE_COLUMNS) + "\n")


def process_sweep(
    grid_sizes: Iterable[int],
    trials: int,
    output_dir: Union[str, Path],
    seed: Optional[int] = None,
) -> int:
    """
    Run the Monte Carlo driver for each grid size and save results.

    Each grid size draws from its own child of a single SeedSequence, so a
    seeded sweep is reproducible and sizes do not share a random stream.

    Args:
        grid_sizes: Grid sizes to simulate
        trials: Trials per grid size
        output_dir: Output directory for n_{N}.npz and n_{N}.score files
        seed: Root seed (default: fresh OS entropy)

    Returns:
        Number of grid sizes processed
    """
    grid_sizes = list(grid_sizes)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Processing {len(grid_sizes)} grid sizes with {trials} trials each...")

    children = np.random.SeedSequence(seed).spawn(len(grid_sizes))

    processed = 0
    for n, child in zip(grid_sizes, children):
        stats = PercolationStats(n, trials, rng=np.random.default_rng(child))

        output_npz = output_dir / f"{result_stem(n)}.npz"
        stats.save(output_npz)
        write_score_file(stats, output_npz.with_suffix('.score'))

        print(f"  n={n}: mean={stats.mean():.6f} stddev={stats.stddev():.6f}")
        processed += 1

    print(f"✓ Processed {processed}/{len(grid_sizes)} grid sizes")
    return processed
