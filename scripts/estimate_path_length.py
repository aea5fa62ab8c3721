from __future__ import annotations

import argparse
import random

from txnet.adapters.source.csv_edge_adapter import CsvEdgeAdapter
from txnet.io.output_writer import format_average
from txnet.services.analysis_service import AnalysisService
from txnet.services.network_sampler import average_path_length


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", required=True, help="Edge list CSV")
    parser.add_argument("--sample-size", type=int, default=1000, help="Node pairs to draw")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    graph = AnalysisService(CsvEdgeAdapter(path=args.input)).build_graph()
    avg = average_path_length(graph, args.sample_size, random.Random(args.seed))
    print("Average shortest path:", format_average(avg))


if __name__ == "__main__":
    main()
