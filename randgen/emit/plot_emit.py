"""Bar chart of expected versus observed outcome frequencies."""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")                     # headless backend for servers/CI
import matplotlib.pyplot as plt
import numpy as np

from randgen.profiler.summary import Summarizer


def write_frequency_plot(path: str | Path, summarizer: Summarizer) -> None:
    """
    Write a PNG comparing each outcome's probability with its observed frequency.

    Observed frequencies are all zero when nothing has been drawn.
    """

    rows = summarizer.rows
    count = summarizer.count
    labels = [str(row.value) for row in rows]
    expected = np.array([row.probability for row in rows], dtype=float)
    observed = np.array(
        [row.occurrences / count if count > 0 else 0.0 for row in rows], dtype=float
    )

    x = np.arange(len(rows))
    width = 0.4
    fig, ax = plt.subplots(figsize=(max(6.0, 0.6 * len(rows)), 4.0))
    try:
        ax.bar(x - width / 2, expected, width, label="probability", color="#4C72B0")
        ax.bar(x + width / 2, observed, width, label="observed", color="#DD8452")
        ax.set_xticks(x)
        ax.set_xticklabels(labels)
        ax.set_xlabel("Random number")
        ax.set_ylabel("Frequency")
        ax.set_title(f"k={len(rows)}, n={count}, chi2={summarizer.total_chi_squared():.3f}")
        ax.legend()
        fig.tight_layout()
        fig.savefig(Path(path), dpi=120)
    finally:
        plt.close(fig)
