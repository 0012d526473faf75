"""
DataStore — In-memory audit dataset backed by pandas.

Seeded once at startup, appended to by CSV imports, queried on every request.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Sequence

import pandas as pd

from darpan.config import SEED_SAMPLE_DATA
from darpan.data.loader import load_csv_file, parse_audit_text
from darpan.data.normalize import display_value, normalize_record, records_to_frame
from darpan.data.schemas import AuditRecord, DateRange, ImportResult
from darpan.data.seed import SAMPLE_AUDITS


class DataStore:
    """Append-only audit records with filtered accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = records_to_frame([])
        self._next_id = 1
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, seed: bool = SEED_SAMPLE_DATA) -> "DataStore":
        """Reset to the startup dataset (sample audits unless seeding is off)."""
        print("Loading audit data...")
        self.df = records_to_frame([])
        self._next_id = 1
        if seed:
            self.append([normalize_record(row, row["id"]) for row in SAMPLE_AUDITS])
            print(f"  Seeded {self.row_count():,} sample audits")
        else:
            print("  Seeding disabled — starting with empty dataset")
        self._loaded = True
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _id_sequence(self) -> Iterator[int]:
        """Session-wide id source handed to the parser."""
        while True:
            record_id = self._next_id
            self._next_id += 1
            yield record_id

    # ------------------------------------------------------------------
    # Mutation (append only)
    # ------------------------------------------------------------------

    def append(self, records: Iterable[AuditRecord]) -> int:
        """Concatenate records onto the dataset. No dedup. Returns rows added."""
        frame = records_to_frame(records)
        if frame.empty:
            return 0
        if self.df.empty:
            self.df = frame
        else:
            self.df = pd.concat([self.df, frame], ignore_index=True)
        self._next_id = max(self._next_id, int(frame["id"].max()) + 1)
        return len(frame)

    def import_text(self, text: str) -> ImportResult:
        """Parse CSV text and append the accepted rows."""
        result = parse_audit_text(text, ids=self._id_sequence())
        self._finish_import(result)
        return result

    def import_file(self, filepath: Path) -> ImportResult:
        result = load_csv_file(filepath, ids=self._id_sequence())
        self._finish_import(result)
        return result

    def _finish_import(self, result: ImportResult) -> None:
        if result.count == 0:
            print("  Import: no valid rows — dataset unchanged")
            return
        self.append(result.records)
        print(f"  Import: +{result.count:,} rows → {self.row_count():,} rows")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def records(self) -> list[AuditRecord]:
        return [AuditRecord.from_row(row) for row in self.df.to_dict("records")]

    def get(self, record_id: int) -> Optional[AuditRecord]:
        match = self.df[self.df["id"] == record_id]
        if match.empty:
            return None
        return AuditRecord.from_row(match.iloc[0].to_dict())

    def get_filtered(
        self,
        selections: Mapping[str, Sequence[str]] | None = None,
        date_range: DateRange | None = None,
        search: str | None = None,
    ) -> pd.DataFrame:
        """Rows passing the column filters, date range and free-text search.

        Returns a filtered view (not a copy).
        """
        from darpan.analytics.filters import filter_frame
        return filter_frame(self.df, selections, date_range, search)

    def filter_options(self, column: str) -> list[str]:
        """Distinct non-empty values of a column, in first-seen order."""
        if column not in self.df.columns or self.df.empty:
            return []
        values = self.df[column].map(display_value)
        return [v for v in pd.unique(values) if v]

    def row_count(self) -> int:
        return len(self.df)
