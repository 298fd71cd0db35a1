#!/usr/bin/env python3
"""
Verify and benchmark the three sieves.

Usage:
    python run_all.py
    python run_all.py --config config/quick.yaml
    python run_all.py --cases 5:        # only the two largest limits
"""

import argparse
import sys
import yaml
from pathlib import Path
import time

from sieves.experiments.exp_benchmark import run_benchmark_experiment
from sieves.experiments.verify_sieves import verify_all
from sieves.benchmark import select_implementations
from sieves.plotting import plot_timings


def parse_slice(text: str) -> slice:
    """Parse 'start:stop' (either side optional) into a slice."""
    parts = text.split(':')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected start:stop, got {text!r}")
    start, stop = (int(p) if p else None for p in parts)
    return slice(start, stop)


def main():
    parser = argparse.ArgumentParser(description='Verify and benchmark the prime sieves')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--cases', type=parse_slice, default=slice(None),
                        help='Slice of the case table to run, e.g. 0:3 or 5:')
    parser.add_argument('--skip-verify', action='store_true',
                        help='Skip the correctness checks')
    parser.add_argument('--no-plot', action='store_true',
                        help='Do not write the timing figure')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f)

    cases = config['cases'][args.cases]
    names = config.get('implementations')
    output_dir = Path(config.get('output_dir', 'data/results'))

    print("=" * 60)
    print("Sieve of Eratosthenes - Verification and Benchmark")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  implementations = {names or 'all'}")
    print(f"  cases = {cases}")
    print(f"  output_dir = {output_dir}")
    print()

    total_start = time.time()

    # 1. Correctness
    if not args.skip_verify:
        print("-" * 60)
        print("1. Verification")
        print("-" * 60)
        start = time.time()
        passed = verify_all(select_implementations(names))
        print(f"   Completed in {time.time() - start:.1f}s")
        print()
        if not passed:
            print("VERIFICATION FAILED - not benchmarking")
            sys.exit(1)

    # 2. Timings
    print("-" * 60)
    print("2. Benchmark")
    print("-" * 60)
    start = time.time()
    df = run_benchmark_experiment(cases, output_dir, names)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Figure
    if not args.no_plot:
        print("-" * 60)
        print("3. Generating Figure")
        print("-" * 60)
        figures_dir = output_dir / 'figures'
        figures_dir.mkdir(parents=True, exist_ok=True)
        print("  - Timings...")
        plot_timings(df, figures_dir / 'timings.png')
        print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    print("\n" + "=" * 60)
    print("MEAN TIME PER CALL (us)")
    print("=" * 60)
    table = df.pivot(index='limit', columns='implementation', values='mean_s') * 1e6
    print(table.round(1).to_string())


if __name__ == '__main__':
    main()
