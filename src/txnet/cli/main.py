from __future__ import annotations

import argparse
import datetime as dt
import sys
import time

from txnet.config import settings
from txnet.core.models import AnalysisConfig, AnalysisReport
from txnet.services.analysis_service import AnalysisService
from txnet.adapters.source.csv_edge_adapter import CsvEdgeAdapter
from txnet.io.output_writer import format_average, format_path, write_report_json, write_summary_md
from txnet.io.chart_writer import write_degree_chart


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="txnet", description="Transaction network statistics (degrees, paths, six degrees)")
    p.add_argument("--input", default=settings.EDGELIST_PATH, help="Edge list CSV")
    p.add_argument("--source-column", default=settings.SOURCE_COLUMN, help="Column holding the first transaction id")
    p.add_argument("--target-column", default=settings.TARGET_COLUMN, help="Column holding the second transaction id")
    p.add_argument("--out", default=settings.OUTPUT_DIR, help="Output folder")
    p.add_argument("--top-k", type=int, default=settings.TOP_K, help="Number of most connected nodes to list")
    p.add_argument("--sample-size", type=int, default=settings.SAMPLE_SIZE, help="Node pairs drawn for the average path estimate")
    p.add_argument("--seed", type=int, default=settings.RANDOM_SEED, help="Random seed for reproducible sampling")
    p.add_argument("--path", nargs=2, action="append", default=[], metavar=("START", "GOAL"), help="Shortest path query (repeatable)")
    p.add_argument("--plot", action="store_true", help="Write degree_distribution.png")
    p.add_argument("--max-degree", type=int, default=settings.PLOT_MAX_DEGREE, help="Largest degree shown in the plot")
    p.add_argument("--no-summary", action="store_true", help="Skip summary.md")
    return p


def _make_progress_reporter(source: str):
    start_time = time.time()
    last_print = 0.0
    is_tty = sys.stdout.isatty()

    def _ts() -> str:
        return dt.datetime.now().strftime("%H:%M:%S")

    def _print_line(message: str) -> None:
        if is_tty:
            sys.stdout.write("\r" + message.ljust(88))
            sys.stdout.flush()
        else:
            print(message)

    def _clear_line() -> None:
        if is_tty:
            sys.stdout.write("\r" + (" " * 88) + "\r")
            sys.stdout.flush()

    def progress(event: str, data: dict) -> None:
        nonlocal last_print
        now = time.time()
        if event == "start":
            print(f"[{_ts()}] Loading {source}")
            return
        if event == "ingest":
            if is_tty and now - last_print < 0.2:
                return
            _print_line(f"Read {data['records']} record(s) • {data['nodes']} nodes")
            last_print = now
            return
        if event == "ingest_done":
            _clear_line()
            print(
                f"[{_ts()}] Graph built from {data['records']} record(s) • "
                f"{data['nodes']} nodes • {data['edges']} edges"
            )
            return
        if event == "paths_done":
            print(f"[{_ts()}] Resolved {data['count']} path query(ies)")
            return
        if event == "sample":
            if is_tty and now - last_print < 0.2:
                return
            if not is_tty and data["done"] % 1000 != 0:
                return
            _print_line(
                f"Sampling pairs {data['done']}/{data['total']} • "
                f"connected {data['connected']}"
            )
            last_print = now
            return
        if event == "done":
            _clear_line()
            elapsed = time.time() - start_time
            print(f"[{_ts()}] Done in {elapsed:.1f}s")
            return
        if event == "error":
            _clear_line()
            print(f"[{_ts()}] Error: {data.get('message', 'Unknown error')}", file=sys.stderr)

    return progress


def print_report(report: AnalysisReport) -> None:
    print(f"Nodes: {report.node_count}")
    print(f"Edges: {report.edge_count}")

    print("Degree distribution:")
    for degree, count in report.degree_distribution.items():
        print(f"  degree {degree}: {count} node(s)")

    print(f"Top {len(report.top_nodes)} nodes by degree:")
    for node, degree in report.top_nodes:
        print(f"  {node}: {degree}")

    for q in report.paths:
        print(f"Shortest path {q.start} -> {q.goal}: {format_path(q.path)}")

    if report.sample is not None:
        print("Average shortest path (sampled):", format_average(report.sample.average))


def main() -> int:
    args = build_arg_parser().parse_args()

    if args.top_k < 0:
        print("--top-k must be >= 0", file=sys.stderr)
        return 2
    if args.sample_size < 0:
        print("--sample-size must be >= 0", file=sys.stderr)
        return 2

    cfg = AnalysisConfig(
        top_k=args.top_k,
        sample_size=args.sample_size,
        seed=args.seed,
        path_pairs=tuple((start, goal) for start, goal in args.path),
    )
    progress = _make_progress_reporter(args.input)

    source = CsvEdgeAdapter(
        path=args.input,
        source_column=args.source_column,
        target_column=args.target_column,
    )
    svc = AnalysisService(source=source)
    try:
        report = svc.analyze(cfg, on_progress=progress)
    except Exception as exc:
        progress("error", {"message": f"{exc.__class__.__name__}: {exc}"})
        return 1

    print_report(report)

    # Outputs
    print("Writing outputs...")
    report_path = write_report_json(report, args.out)
    print(f"Wrote: {report_path}")
    if not args.no_summary:
        summary_path = write_summary_md(report, args.out, source=args.input)
        print(f"Wrote: {summary_path}")
    if args.plot:
        chart_path = write_degree_chart(report.degree_distribution, args.out, args.max_degree)
        print(f"Wrote: {chart_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
