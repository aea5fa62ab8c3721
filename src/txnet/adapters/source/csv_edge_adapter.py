from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd

from txnet.config import settings
from txnet.core.dto import EdgeRecord
from txnet.core.errors import DataSourceError, MalformedRecordError
from txnet.ports.edge_source_port import EdgeSourcePort


class CsvEdgeAdapter(EdgeSourcePort):
    """
    Reads a headered edge list CSV (one transaction pair per row).

    The file is streamed in chunks so large edge lists never have to fit
    in a single DataFrame. Header and column problems are raised before
    the first record is yielded. Rows with more fields than the header are
    rejected rather than re-aligned.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        source_column: Optional[str] = None,
        target_column: Optional[str] = None,
        chunk_size: Optional[int] = None,
    ) -> None:
        self.path = path or settings.EDGELIST_PATH
        self.source_column = source_column or settings.SOURCE_COLUMN
        self.target_column = target_column or settings.TARGET_COLUMN
        self.chunk_size = int(chunk_size or settings.CSV_CHUNK_SIZE)
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")

    def iter_edges(self) -> Iterator[EdgeRecord]:
        reader = self._open_reader()
        return self._iter_records(reader)

    def _open_reader(self):
        p = Path(self.path)
        if not p.is_file():
            raise DataSourceError(f"Edge list not found: {self.path}")

        try:
            header = pd.read_csv(p, nrows=0, index_col=False)
        except pd.errors.EmptyDataError as exc:
            raise DataSourceError(f"Edge list is empty: {self.path}") from exc
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
            raise DataSourceError(f"Could not read edge list {self.path}: {exc}") from exc

        columns = [str(c).strip() for c in header.columns]
        missing = [c for c in (self.source_column, self.target_column) if c not in columns]
        if missing:
            raise DataSourceError(
                f"Edge list {self.path} is missing column(s) {', '.join(missing)} "
                f"(found: {', '.join(columns) or 'none'})"
            )

        # no usecols: the C tokenizer only checks field counts on full rows
        return pd.read_csv(
            p,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            engine="c",
            on_bad_lines="error",
            chunksize=self.chunk_size,
        )

    def _next_chunk(self, reader) -> Optional[pd.DataFrame]:
        # an over-long first data row only surfaces as a ParserWarning
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            try:
                return next(reader)
            except StopIteration:
                return None
            except (pd.errors.ParserError, pd.errors.ParserWarning) as exc:
                raise MalformedRecordError(f"{self.path}: {exc}") from exc
            except UnicodeDecodeError as exc:
                raise DataSourceError(f"Could not decode edge list {self.path}: {exc}") from exc

    def _iter_records(self, reader) -> Iterator[EdgeRecord]:
        record_no = 0
        with reader:
            while True:
                chunk = self._next_chunk(reader)
                if chunk is None:
                    break
                chunk.columns = [str(c).strip() for c in chunk.columns]
                sources = chunk[self.source_column]
                targets = chunk[self.target_column]
                for a, b in zip(sources, targets):
                    record_no += 1
                    # short rows come back as NaN
                    a = a.strip() if isinstance(a, str) else ""
                    b = b.strip() if isinstance(b, str) else ""
                    if not a or not b:
                        raise MalformedRecordError(
                            f"{self.path}: record {record_no} has an empty transaction id"
                        )
                    yield EdgeRecord(a, b)
