from __future__ import annotations

import random
from typing import Callable, Optional

from txnet.core.graph import Graph
from txnet.core.models import SampleEstimate
from txnet.services.path_finder import path_length, shortest_path


ProgressFn = Callable[[str, dict], None]


class NetworkSampler:
    """
    Monte Carlo estimate of the average shortest-path length
    ("six degrees" estimate).

    - Draws node pairs uniformly, with replacement across draws
    - Identical pairs are discarded, disconnected pairs are skipped
    - Reproducible only when `rng` is seeded
    """

    def __init__(self, graph: Graph, rng: Optional[random.Random] = None) -> None:
        self.graph = graph
        self.rng = rng if rng is not None else random.Random()

    def estimate(
        self,
        sample_size: int,
        on_progress: Optional[ProgressFn] = None,
        progress_every: int = 100,
    ) -> SampleEstimate:
        if sample_size < 0:
            raise ValueError("sample_size must be >= 0")
        if progress_every <= 0:
            raise ValueError("progress_every must be > 0")

        result = SampleEstimate()
        nodes = self.graph.nodes()
        if not nodes:
            return result

        for i in range(sample_size):
            a = self.rng.choice(nodes)
            b = self.rng.choice(nodes)
            result.attempted += 1

            if a == b:
                result.identical += 1
            else:
                path = shortest_path(self.graph, a, b)
                if path is None:
                    result.disconnected += 1
                else:
                    result.connected += 1
                    result.total_length += path_length(path)

            if on_progress and (i + 1) % progress_every == 0:
                on_progress(
                    "sample",
                    {"done": i + 1, "total": sample_size, "connected": result.connected},
                )

        return result


def average_path_length(
    graph: Graph,
    sample_size: int,
    rng: Optional[random.Random] = None,
) -> Optional[float]:
    return NetworkSampler(graph, rng).estimate(sample_size).average
