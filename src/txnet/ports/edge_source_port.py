from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from txnet.core.dto import EdgeRecord

class EdgeSourcePort(ABC):
    """
    Abstract Class for supplying transaction edges to the graph builder.
    """

    @abstractmethod
    def iter_edges(self) -> Iterable[EdgeRecord]:
        raise NotImplementedError
