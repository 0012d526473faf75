"""
Typed audit record, date-range filter, and import result schemas.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from darpan.config import AUDIT_HEADERS, COLUMN_MAP, NUMERIC_COLS


class ViewName(str, Enum):
    DASHBOARD = "dashboard"
    AUDIT_LOGS = "audit_logs"


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    AREA = "area"
    PIE = "pie"


class Metric(str, Enum):
    COUNT = "count"
    DEFECTS = "defects"
    SAMPLES = "samples"


@dataclass(frozen=True)
class AuditRecord:
    """One row of the market audit sheet plus its synthetic id."""
    id: int
    city: str = ""
    zone: str = ""
    serial_no: str = ""
    outlet_name: str = ""
    location: str = ""
    survey_date: str = ""            # DD-MM-YYYY
    brand: str = ""
    sku: float = 0.0
    category: str = ""
    business_unit: str = ""
    unit: str = ""
    batch_no: str = ""
    mfg_date: str = ""
    exp_date: str = ""
    unit_name: str = ""
    mfg_type: str = ""
    sample_checked: float = 0.0
    defect_count: float = 0.0
    defect_type: str = ""
    freshness: float = 0.0
    defect_source: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AuditRecord":
        """Build from a header-keyed mapping (already normalized)."""
        kwargs: dict[str, Any] = {"id": int(row["id"])}
        for header, attr in COLUMN_MAP.items():
            if header not in row:
                continue
            value = row[header]
            if header in NUMERIC_COLS:
                kwargs[attr] = float(value)
            else:
                kwargs[attr] = "" if value is None else str(value)
        return cls(**kwargs)

    def to_row(self) -> dict[str, Any]:
        """Header-keyed mapping in sheet column order, id first."""
        row: dict[str, Any] = {"id": self.id}
        for header in AUDIT_HEADERS:
            row[header] = getattr(self, COLUMN_MAP[header])
        return row

    def get(self, header: str, default: Any = None) -> Any:
        attr = COLUMN_MAP.get(header)
        if header == "id":
            return self.id
        if attr is None:
            return default
        return getattr(self, attr)


@dataclass
class DateRange:
    """Inclusive start/end bounds applied to the survey date."""
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None

    @classmethod
    def from_strings(cls, start: Optional[str], end: Optional[str]) -> "DateRange":
        """Parse YYYY-MM-DD inputs; blank strings mean "no bound"."""
        s = dt.date.fromisoformat(start) if start else None
        e = dt.date.fromisoformat(end) if end else None
        return cls(s, e)

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None

    @property
    def label(self) -> str:
        if self.is_open:
            return "All Dates"
        s = self.start.isoformat() if self.start else "?"
        e = self.end.isoformat() if self.end else "?"
        return f"{s} to {e}"


@dataclass
class ImportResult:
    """Accepted rows from one CSV import."""
    records: list[AuditRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def message(self) -> str:
        if self.count > 0:
            return f"Successfully imported {self.count} records!"
        return "No valid data found."
