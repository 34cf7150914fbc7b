"""Generate a min/avg/max bar chart from simulation statistics."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from snakes_sim.render import LABELS
from snakes_sim.stats import METRICS, MultiSimResult

COLORS = {"min": "#9BC53D", "avg": "#4A90D9", "max": "#E55934"}


def make_summary_chart(
    result: MultiSimResult,
    output_path: str = "simulation_summary.png",
    title: str = "Snakes & Ladders Simulation",
) -> str:
    """Create a grouped bar chart with min/avg/max for each metric.

    Returns the path to the saved PNG.
    """
    names = [LABELS[name] for name in METRICS]
    width = 0.27

    fig, ax = plt.subplots(figsize=(11, 5))
    for offset, stat in enumerate(("min", "avg", "max")):
        values = [getattr(result, f"{stat}_{name}") for name in METRICS]
        positions = [i + (offset - 1) * width for i in range(len(METRICS))]
        bars = ax.bar(positions, values, width, label=stat, color=COLORS[stat])

        # Annotate bars with their values
        for bar, value in zip(bars, values):
            ax.text(
                bar.get_x() + bar.get_width() / 2, bar.get_height(),
                f"{value:.1f}" if stat == "avg" else f"{value}",
                ha="center", va="bottom", fontsize=8,
            )

    ax.set_xticks(range(len(METRICS)))
    ax.set_xticklabels(names)
    ax.set_title(f"{title} ({result.games} games)", fontsize=14, fontweight="bold")
    ax.legend()

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
