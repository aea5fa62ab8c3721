from __future__ import annotations

import random
from typing import Callable, Optional

from txnet.core.graph import Graph
from txnet.core.models import AnalysisConfig, AnalysisReport, PathQuery
from txnet.ports.edge_source_port import EdgeSourcePort
from txnet.services.network_sampler import NetworkSampler
from txnet.services.path_finder import shortest_path


ProgressFn = Callable[[str, dict], None]

INGEST_PROGRESS_EVERY = 50_000


class AnalysisService:
    """
    Builds the transaction network from an edge source and computes its
    structural statistics.

    - Ingestion: every record becomes one undirected edge
    - Queries: counts, degree distribution, top-k, path queries
    - Estimate: sampled average shortest-path length
    """

    def __init__(self, source: EdgeSourcePort) -> None:
        self.source = source

    def build_graph(self, on_progress: Optional[ProgressFn] = None) -> Graph:
        graph = Graph()
        records = 0

        for rec in self.source.iter_edges():
            graph.add_edge(rec.tx_id1, rec.tx_id2)
            records += 1
            if on_progress and records % INGEST_PROGRESS_EVERY == 0:
                on_progress("ingest", {"records": records, "nodes": graph.node_count()})

        if on_progress:
            on_progress(
                "ingest_done",
                {"records": records, "nodes": graph.node_count(), "edges": graph.edge_count()},
            )
        return graph

    def analyze(
        self,
        cfg: AnalysisConfig,
        on_progress: Optional[ProgressFn] = None,
    ) -> AnalysisReport:
        if on_progress:
            on_progress("start", {})

        graph = self.build_graph(on_progress)
        report = self.report(graph, cfg, on_progress)

        if on_progress:
            on_progress("done", {"nodes": report.node_count, "edges": report.edge_count})
        return report

    def report(
        self,
        graph: Graph,
        cfg: AnalysisConfig,
        on_progress: Optional[ProgressFn] = None,
    ) -> AnalysisReport:
        report = AnalysisReport(
            node_count=graph.node_count(),
            edge_count=graph.edge_count(),
            degree_distribution=graph.degree_distribution(),
            top_nodes=graph.top_k_nodes(int(cfg.top_k)),
        )

        for start, goal in cfg.path_pairs:
            report.paths.append(PathQuery(start, goal, shortest_path(graph, start, goal)))
        if on_progress and cfg.path_pairs:
            on_progress("paths_done", {"count": len(report.paths)})

        sampler = NetworkSampler(graph, random.Random(cfg.seed))
        report.sample = sampler.estimate(int(cfg.sample_size), on_progress=on_progress)
        return report
