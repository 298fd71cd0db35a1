"""
Visualization utilities.

Responsibility: plots only. No timing, no sieving.
"""

import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_timings(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot mean time per call against limit for each implementation.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from bench_primes with columns implementation, limit,
        mean_s, min_s, max_s.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    for name, group in df.groupby('implementation', sort=False):
        # log axes cannot show limit 0
        group = group[group['limit'] > 0].sort_values('limit')
        if group.empty:
            continue
        ax.errorbar(
            group['limit'], group['mean_s'],
            yerr=[(group['mean_s'] - group['min_s']).clip(lower=0),
                  (group['max_s'] - group['mean_s']).clip(lower=0)],
            fmt='o-', capsize=3, label=name,
        )

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('limit')
    ax.set_ylabel('time per call (s)')
    ax.set_title('primes(limit)')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
