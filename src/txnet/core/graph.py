from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple


@dataclass
class Graph:
    """
    Undirected, unweighted transaction network over string node ids.

    Built once by repeated add_edge calls, then only queried.
    """

    adjacency: Dict[str, Set[str]] = field(default_factory=dict)

    def add_edge(self, a: str, b: str) -> None:
        # a == b is accepted and records a self-loop
        self.adjacency.setdefault(a, set()).add(b)
        self.adjacency.setdefault(b, set()).add(a)

    def add_edges(self, pairs: Iterable[Tuple[str, str]]) -> None:
        for a, b in pairs:
            self.add_edge(a, b)

    def node_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        """
        Number of distinct undirected edges.

        A self-loop counts as one edge, so with loops present this is
        (sum of neighbor-set sizes + loops) // 2 rather than the plain half-sum.
        """
        total = 0
        loops = 0
        for node, neighbors in self.adjacency.items():
            total += len(neighbors)
            if node in neighbors:
                loops += 1
        # a self-loop shows up once in a single set, every other edge twice
        return (total + loops) // 2

    def neighbors(self, node: str) -> Optional[Set[str]]:
        """
        Neighbor set of `node`, or None if it was never inserted.

        The returned set is the live one; treat it as read-only.
        """
        return self.adjacency.get(node)

    def degree(self, node: str) -> int:
        return len(self.adjacency.get(node, ()))

    def degree_distribution(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for neighbors in self.adjacency.values():
            d = len(neighbors)
            counts[d] = counts.get(d, 0) + 1
        return dict(sorted(counts.items()))

    def top_k_nodes(self, k: int) -> List[Tuple[str, int]]:
        if k <= 0:
            return []
        node_degrees = [(node, len(neighbors)) for node, neighbors in self.adjacency.items()]
        # stable sort: ties keep insertion order
        node_degrees.sort(key=lambda x: x[1], reverse=True)
        return node_degrees[:k]

    def nodes(self) -> List[str]:
        return list(self.adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)
