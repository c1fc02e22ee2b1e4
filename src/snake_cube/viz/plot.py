from __future__ import annotations

import matplotlib.pyplot as plt


def plot_survey(stats: dict, *, ax=None, title: str | None = None):
    """Grouped bars per segment count: candidates, checksum hits, solvable.

    Candidate counts grow as 3**n, so the y-axis is symlog.
    """
    if ax is None:
        fig = plt.figure(figsize=(7.5, 4.5))
        ax = fig.add_subplot(111)

    series = [
        ("candidates", stats["candidates_by_length"]),
        ("checksum hits", stats["checksum_hits_by_length"]),
        ("solvable", stats["solvable_by_length"]),
    ]
    xs = sorted(stats["candidates_by_length"])
    width = 0.8 / len(series)
    for i, (label, counts) in enumerate(series):
        offsets = [x + (i - 1) * width for x in xs]
        ax.bar(offsets, [counts.get(x, 0) for x in xs], width=width, label=label)

    ax.set_yscale("symlog", linthresh=1)
    ax.set_xlabel("segment count")
    ax.set_ylabel("sequences")
    ax.set_title(title or f"Survey of {stats['steps']} candidates (target sum {stats['expected_sum']})")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax
