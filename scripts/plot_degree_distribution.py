from __future__ import annotations

import argparse
from txnet.adapters.source.csv_edge_adapter import CsvEdgeAdapter
from txnet.io.chart_writer import write_degree_chart
from txnet.services.analysis_service import AnalysisService


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", required=True, help="Edge list CSV")
    parser.add_argument("--output", required=True, help="Output folder for the PNG")
    parser.add_argument("--max-degree", type=int, default=50, help="Largest degree shown")
    args = parser.parse_args()
    graph = AnalysisService(CsvEdgeAdapter(path=args.input)).build_graph()
    print("Wrote:", write_degree_chart(graph.degree_distribution(), args.output, args.max_degree))


if __name__ == "__main__":
    main()
