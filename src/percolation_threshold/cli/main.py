"""
Command-line interface for percolation_threshold.

Commands:
    percolation stats N TRIALS [--seed S]
    percolation simulate N [--seed S]
    percolation permutation K < words.txt
    percolation run sweep --config run.yaml
    percolation results aggregate --results-dir trials/ --output thresholds.csv
"""

import click
import numpy as np
from pathlib import Path


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte Carlo estimation of the site-percolation threshold."""
    pass


# ============================================================================
# Simulation Commands
# ============================================================================

@cli.command('stats')
@click.argument('n', type=click.IntRange(min=1))
@click.argument('trials', type=click.IntRange(min=1))
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed (default: OS entropy)')
def stats_command(n, trials, seed):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    from ..percolation.stats import PercolationStats

    stats = PercolationStats(n, trials, rng=seed)

    click.echo(f"mean                    = {stats.mean()}")
    click.echo(f"stddev                  = {stats.stddev()}")
    click.echo(f"95% confidence interval = [{stats.confidence_lo()}, {stats.confidence_hi()}]")


@cli.command('simulate')
@click.argument('n', type=click.IntRange(min=1))
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed (default: OS entropy)')
def simulate_command(n, seed):
    """Open random sites of one N-by-N grid until it percolates."""
    from ..percolation.grid import Percolation

    rng = np.random.default_rng(seed)
    perc = Percolation(n)
    while not perc.percolates():
        row, col = rng.integers(1, n + 1, size=2)
        perc.open(int(row), int(col))

    click.echo(f"The total number of open sites is {perc.number_of_open_sites()}")


@cli.command('permutation')
@click.argument('k', type=click.IntRange(min=0))
@click.option('--input', '-i', 'input_file', type=click.File('r'), default='-',
              help='Whitespace-separated strings (default: stdin)')
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed (default: OS entropy)')
def permutation_command(k, input_file, seed):
    """Print K of the input strings, chosen uniformly at random."""
    from ..containers import RandomizedQueue

    queue = RandomizedQueue(rng=seed)
    for line in input_file:
        for token in line.split():
            queue.enqueue(token)

    if k > len(queue):
        raise click.UsageError(f"K={k} exceeds the number of input strings ({len(queue)})")

    for _ in range(k):
        click.echo(queue.dequeue())


# ============================================================================
# Run Commands
# ============================================================================

@cli.group()
def run():
    """Threshold sweeps over several grid sizes."""
    pass


@run.command('sweep')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def run_sweep(config_path):
    """Run PercolationStats for every configured grid size and aggregate the results."""
    from ..run import RunConfig
    from ..percolation.worker import process_sweep
    from ..percolation.analysis import aggregate_score_files_to_csv

    try:
        config = RunConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.UsageError(f"Invalid run config {config_path}: {e}")

    click.echo(f"Run: {config.run_name}")
    click.echo(f"  grid sizes: {config.grid_sizes}")
    click.echo(f"  trials: {config.trials}, seed: {config.seed}")

    process_sweep(config.grid_sizes, config.trials, config.results_dir, seed=config.seed)
    aggregate_score_files_to_csv(config.results_dir, config.scores_csv)

    click.echo(f"✓ Sweep complete: {config.scores_csv}")


# ============================================================================
# Results Commands
# ============================================================================

@cli.group()
def results():
    """Result aggregation commands."""
    pass


@results.command('aggregate')
@click.option('--results-dir', '-r', required=True, type=click.Path(exists=True),
              help='Directory containing n_{N}.score files')
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(),
              help='Output CSV file')
def results_aggregate(results_dir, output_file):
    """Aggregate .score files into one CSV."""
    from ..percolation.analysis import aggregate_score_files_to_csv

    df = aggregate_score_files_to_csv(results_dir, output_file)
    if df.empty:
        click.echo(f"No results found in {results_dir}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ Aggregated {len(df)} grid sizes into {Path(output_file)}")


if __name__ == '__main__':
    cli()
