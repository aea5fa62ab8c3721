from txnet.ports.edge_source_port import EdgeSourcePort
from txnet.core.dto import EdgeRecord
from typing import Iterable, List, Optional, Tuple

class StaticEdgeAdapter(EdgeSourcePort):
    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None):
        self._records: List[EdgeRecord] = [EdgeRecord(a, b) for a, b in (pairs or [])]

    def iter_edges(self):
        return list(self._records)
