"""
Experiment: timing the three sieves.

Runs the benchmark table and writes benchmark_timings.csv.
"""

import pandas as pd
from pathlib import Path
from typing import Iterable, List, Optional

from ..benchmark import bench_primes, parse_cases, select_implementations


def run_benchmark_experiment(cases: Iterable, output_dir: Path,
                             implementations: Optional[List[str]] = None) -> pd.DataFrame:
    """
    Time every selected implementation on every case.

    Parameters
    ----------
    cases : iterable
        Rows of [limit, measurement_seconds, samples].
    output_dir : Path
        Directory for benchmark_timings.csv.
    implementations : list of str, optional
        Implementation names. Defaults to all.

    Returns
    -------
    pd.DataFrame
        One row per (implementation, limit).
    """
    cases = parse_cases(cases)
    selected = select_implementations(implementations)

    print(f"  Timing {len(selected)} implementations on {len(cases)} cases...")
    df = bench_primes(cases, selected, verbose=True)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'benchmark_timings.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    import yaml

    with open('config/default.yaml') as f:
        config = yaml.safe_load(f)

    output_dir = Path(config.get('output_dir', 'data/results'))
    df = run_benchmark_experiment(config['cases'], output_dir, config.get('implementations'))
    print("\nSummary:")
    print(df.to_string(index=False))
