from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from txnet.services.path_finder import path_length



# Configuration model

@dataclass(frozen=True)
class AnalysisConfig:
    """
    Run configuration for a network analysis.
    """

    top_k: int = 10
    sample_size: int = 1000
    seed: Optional[int] = None                          # None = unseeded
    path_pairs: Tuple[Tuple[str, str], ...] = ()        # (start, goal) queries



# Result models

@dataclass(frozen=True)
class PathQuery:

    start: str
    goal: str
    path: Optional[List[str]]      # None = no path

    @property
    def length(self) -> Optional[int]:
        return path_length(self.path)


@dataclass
class SampleEstimate:

    attempted: int = 0
    identical: int = 0             # draws discarded because both ends matched
    disconnected: int = 0
    connected: int = 0
    total_length: int = 0

    @property
    def average(self) -> Optional[float]:
        # None means "no data", never 0.0
        if self.connected == 0:
            return None
        return self.total_length / self.connected


@dataclass
class AnalysisReport:

    node_count: int
    edge_count: int
    degree_distribution: Dict[int, int] = field(default_factory=dict)
    top_nodes: List[Tuple[str, int]] = field(default_factory=list)
    paths: List[PathQuery] = field(default_factory=list)
    sample: Optional[SampleEstimate] = None
