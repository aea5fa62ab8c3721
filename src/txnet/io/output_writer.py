from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from txnet.core.models import AnalysisReport
from txnet.io.schemas import report_to_dict


def write_report_json(report: AnalysisReport, out_dir: str, filename: str = "report.json") -> str:
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(report_to_dict(report), f, indent=2)

    return str(out_path)


def format_average(avg: Optional[float]) -> str:
    if avg is None:
        return "undefined (no connected pairs sampled)"
    return f"{avg:.4f}"


def format_path(path) -> str:
    if path is None:
        return "no path"
    return " -> ".join(path)


def write_summary_md(
    report: AnalysisReport,
    out_dir: str,
    filename: str = "summary.md",
    source: Optional[str] = None,
) -> str:
    """
    Minimal, human-readable summary of the network statistics.
    """
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename

    def short(node: str) -> str:
        return node if len(node) <= 24 else f"{node[:20]}..."

    def interpretation() -> str:
        s = report.sample
        if s is None or s.average is None:
            return "Not enough connected pairs were sampled to estimate path lengths."
        if s.average <= 6:
            return (
                "Randomly chosen connected transactions are on average within six hops "
                "of each other, consistent with a small-world network."
            )
        return (
            "Connected transactions are on average more than six hops apart, which "
            "suggests long chains rather than a tightly knit network."
        )

    lines = []
    lines.append("# Network Summary\n")
    if source:
        lines.append(f"- Source: **{source}**\n")
    lines.append(f"- Nodes: **{report.node_count}**\n")
    lines.append(f"- Edges: **{report.edge_count}**\n")
    lines.append("\n")

    lines.append(f"## Top {len(report.top_nodes)} Nodes (by degree)\n\n")
    if not report.top_nodes:
        lines.append("_The network has no nodes._\n\n")
    else:
        for node, degree in report.top_nodes:
            lines.append(f"- **{degree}** | {short(node)}\n")
        lines.append("\n")

    lines.append("## Shortest Paths\n\n")
    if not report.paths:
        lines.append("_No path queries were requested._\n\n")
    else:
        for q in report.paths:
            hops = "-" if q.length is None else str(q.length)
            lines.append(f"- {q.start} -> {q.goal} | hops: {hops} | {format_path(q.path)}\n")
        lines.append("\n")

    lines.append("## Six Degrees Estimate\n\n")
    s = report.sample
    if s is None:
        lines.append("_Sampling was not run._\n\n")
    else:
        lines.append(f"- Average shortest path: **{format_average(s.average)}**\n")
        lines.append(
            f"- Draws: {s.attempted} (connected {s.connected}, "
            f"disconnected {s.disconnected}, identical {s.identical})\n\n"
        )
    lines.append(f"{interpretation()}\n\n")

    lines.append("## Degree Distribution\n\n")
    if not report.degree_distribution:
        lines.append("_No degrees to report._\n")
    else:
        lines.append("| Degree | Nodes |\n")
        lines.append("|---:|---:|\n")
        for degree, count in report.degree_distribution.items():
            lines.append(f"| {degree} | {count} |\n")

    with out_path.open("w", encoding="utf-8") as f:
        f.writelines(lines)

    return str(out_path)
