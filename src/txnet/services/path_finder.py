from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Set

from txnet.core.graph import Graph


def shortest_path(graph: Graph, start: str, goal: str) -> Optional[List[str]]:
    """
    Breadth-first shortest path (by edge count) from `start` to `goal`.

    Returns the node sequence start..goal inclusive, or None when `goal` is
    not reachable. `start == goal` yields [start] even for unknown nodes.
    Neighbors are expanded in sorted order, so ties between equally short
    paths resolve the same way on every run.
    """
    if start == goal:
        return [start]

    visited: Set[str] = {start}
    q: Deque[str] = deque([start])
    came_from: Dict[str, str] = {}

    while q:
        current = q.popleft()
        neighbors = graph.neighbors(current)
        if not neighbors:
            continue

        for n in sorted(neighbors):
            if n in visited:
                continue
            visited.add(n)
            came_from[n] = current

            if n == goal:
                return _reconstruct(came_from, start, goal)

            q.append(n)

    return None


def path_length(path: Optional[List[str]]) -> Optional[int]:
    if path is None:
        return None
    return len(path) - 1


def _reconstruct(came_from: Dict[str, str], start: str, goal: str) -> List[str]:
    path = [goal]
    node = goal
    while node != start:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path
