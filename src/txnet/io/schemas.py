from __future__ import annotations

from typing import Any, Dict, Optional

from txnet.core.models import AnalysisReport, SampleEstimate


def _sample_to_dict(s: Optional[SampleEstimate]) -> Optional[Dict[str, Any]]:
    if s is None:
        return None
    return {
        "attempted": s.attempted,
        "identical": s.identical,
        "disconnected": s.disconnected,
        "connected": s.connected,
        # null when undefined, never 0.0
        "average_path_length": s.average,
    }


def report_to_dict(r: AnalysisReport) -> Dict[str, Any]:
    return {
        "node_count": r.node_count,
        "edge_count": r.edge_count,
        # JSON keys are strings; keep ascending degree order
        "degree_distribution": {str(d): c for d, c in r.degree_distribution.items()},
        "top_nodes": [
            {"node": node, "degree": degree}
            for node, degree in r.top_nodes
        ],
        "paths": [
            {
                "start": q.start,
                "goal": q.goal,
                "path": q.path,
                "length": q.length,
            }
            for q in r.paths
        ],
        "sample": _sample_to_dict(r.sample),
    }
