from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def distribution_within(distribution: Dict[int, int], max_degree: int) -> Dict[int, int]:
    return {d: c for d, c in distribution.items() if d <= max_degree}


def write_degree_chart(
    distribution: Dict[int, int],
    out_dir: str,
    max_degree: int,
    filename: str = "degree_distribution.png",
) -> str:
    """
    Bar chart of node count per degree, limited to degrees <= max_degree.
    """
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename
    shown = distribution_within(distribution, max_degree)

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        ax.bar(list(shown.keys()), list(shown.values()), color="steelblue", edgecolor="black")
        ax.set_title(f"Degree distribution (degree <= {max_degree})")
        ax.set_xlabel("Degree")
        ax.set_ylabel("Number of nodes")
        if not shown:
            ax.text(0.5, 0.5, "No nodes in range", ha="center", va="center", transform=ax.transAxes)
        fig.tight_layout()
        fig.savefig(out_path, dpi=150)
    finally:
        plt.close(fig)

    return str(out_path)
