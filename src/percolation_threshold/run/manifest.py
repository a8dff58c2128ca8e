"""
Run configuration for threshold sweeps.

The RunConfig loads a YAML run definition: which grid sizes to simulate,
how many trials per size, the random seed and where results go.

Example YAML:

    run_name: square_lattice
    output:
      base_dir: results/square_lattice
      scores_csv: thresholds.csv
    steps:
      sweep:
        grid_sizes: [16, 32, 64, 128]
        trials: 100
        seed: 7
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/square_lattice.yaml')
        print(config.run_name)
        print(config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and sweep values."""
        if not isinstance(self._data, dict):
            raise ValueError("Run config must be a mapping")

        required_sections = ['run_name', 'output', 'steps']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        for section in ['output', 'steps']:
            if not isinstance(self._data[section], dict):
                raise ValueError(f"Config section '{section}' must be a mapping")

        if 'base_dir' not in self._data['output']:
            raise ValueError("Missing required config value: 'output.base_dir'")

        sweep = self._data['steps'].get('sweep')
        if sweep is not None and not isinstance(sweep, dict):
            raise ValueError("Config section 'steps.sweep' must be a mapping")

        raw_sizes = self.sweep_config.get('grid_sizes', [])
        if not isinstance(raw_sizes, list):
            raise ValueError(f"steps.sweep.grid_sizes must be a list, got {raw_sizes!r}")

        sizes = self.grid_sizes
        if not sizes:
            raise ValueError("steps.sweep.grid_sizes must list at least one grid size")
        for n in sizes:
            if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
                raise ValueError(f"Grid sizes must be positive integers, got {n!r}")

        trials = self.trials
        if not isinstance(trials, int) or isinstance(trials, bool) or trials <= 0:
            raise ValueError(f"steps.sweep.trials must be a positive integer, got {trials!r}")

        seed = self.seed
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ValueError(f"steps.sweep.seed must be a non-negative integer, got {seed!r}")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data['output']['base_dir'])

    @property
    def results_dir(self) -> Path:
        return self.base_dir / self._data['output'].get('results_dir', 'trials')

    @property
    def scores_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('scores_csv', 'percolation_thresholds.csv')

    # --- Steps ---

    @property
    def sweep_config(self) -> Dict[str, Any]:
        return self._data['steps'].get('sweep') or {}

    @property
    def grid_sizes(self) -> List[int]:
        return list(self.sweep_config.get('grid_sizes', []))

    @property
    def trials(self) -> int:
        return self.sweep_config.get('trials', 100)

    @property
    def seed(self) -> Optional[int]:
        return self.sweep_config.get('seed')

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)
