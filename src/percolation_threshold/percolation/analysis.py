"""
Aggregation of sweep results.

Collects the per-size .score files written by the sweep worker into one
CSV, or rebuilds the same table from the .npz trial results.
"""

import re
import pandas as pd
from pathlib import Path
from typing import Optional, Union

from .stats import PercolationStats
from .worker import SCORE_COLUMNS

_STEM_RE = re.compile(r'^n_(\d+)$')


def parse_grid_size(path: Union[str, Path]) -> Optional[int]:
    """Extract the grid size from an n_{N}.score / n_{N}.npz filename."""
    match = _STEM_RE.match(Path(path).stem)
    if match is None:
        return None
    return int(match.group(1))


def _write_table(df: pd.DataFrame, output_csv: Union[str, Path]) -> pd.DataFrame:
    df = df.sort_values('n').reset_index(drop=True)
    output_csv = Path(output_csv)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)
    return df


def aggregate_score_files_to_csv(
    results_dir: Union[str, Path],
    output_csv: Union[str, Path],
) -> pd.DataFrame:
    """
    Aggregate .score files into a CSV with one row per grid size.

    .score files hold only the four summary numbers, so aggregation never
    loads the per-trial arrays.

    Args:
        results_dir: Directory containing n_{N}.score files
        output_csv: Output CSV file path

    Returns:
        DataFrame with columns n, mean, stddev, confidence_lo, confidence_hi, file_path
    """
    results_dir = Path(results_dir)

    score_files = sorted(results_dir.rglob("*.score"))
    print(f"Found {len(score_files)} .score files")

    if not score_files:
        print("No .score files found")
        return pd.DataFrame()

    results = []
    failed_count = 0

    for score_file in score_files:
        n = parse_grid_size(score_file)
        if n is None:
            failed_count += 1
            continue

        with open(score_file, 'r') as f:
            parts = f.read().strip().split('\t')

        if len(parts) != len(SCORE_COLUMNS):
            failed_count += 1
            continue

        try:
            values = [float(p) for p in parts]
        except ValueError:
            failed_count += 1
            continue

        row = {'n': n}
        row.update(zip(SCORE_COLUMNS, values))
        row['file_path'] = str(score_file.relative_to(results_dir))
        results.append(row)

    if not results:
        print(f"No valid scores extracted (failed: {failed_count})")
        return pd.DataFrame()

    df = _write_table(pd.DataFrame(results), output_csv)

    print(f"\n=== AGGREGATION SUMMARY ===")
    print(f"Total files processed: {len(score_files)}")
    print(f"Successfully extracted: {len(df)}")
    print(f"Failed to extract: {failed_count}")
    print(f"\nSaved to: {output_csv}")

    return df


def results_table(results_dir: Union[str, Path]) -> pd.DataFrame:
    """
    Build the threshold table from the saved .npz trial results.

    Unlike the .score files this includes the trial count per grid size.

    Args:
        results_dir: Directory containing n_{N}.npz files

    Returns:
        DataFrame with one row per grid size, sorted by n
    """
    results_dir = Path(results_dir)
    rows = []
    for npz_file in sorted(results_dir.rglob("*.npz")):
        if parse_grid_size(npz_file) is None:
            continue
        rows.append(PercolationStats.load(npz_file).summary())

    if not rows:
        return pd.DataFrame()

    return pd.DataFrame(rows).sort_values('n').reset_index(drop=True)
