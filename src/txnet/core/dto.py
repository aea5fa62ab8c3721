from dataclasses import dataclass


@dataclass(frozen=True)
class EdgeRecord:
    tx_id1: str
    tx_id2: str
