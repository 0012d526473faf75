"""
Field normalization: numeric coercion, string cleanup, record ↔ frame conversion.
"""
from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from darpan.config import AUDIT_HEADERS, NUMERIC_COLS
from darpan.data.schemas import AuditRecord

FRAME_COLUMNS = ["id"] + AUDIT_HEADERS


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------

def to_number(value: Any) -> float:
    """Best-effort numeric parse. Blank, garbage, NaN and ±inf all become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, np.number)):
        num = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        num = float(pd.to_numeric(text, errors="coerce"))
    return num if math.isfinite(num) else 0.0


def display_value(value: Any) -> str:
    """Text form of a cell as shown in the table (26.0 → "26", NaN → "")."""
    if value is None:
        return ""
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return ""
        if math.isfinite(value) and float(value).is_integer():
            return str(int(value))
        return str(float(value))
    if isinstance(value, (np.integer,)):
        return str(int(value))
    return str(value)


def compact_number(value: float) -> int | float:
    """Integral floats → int, for JSON output."""
    value = float(value)
    return int(value) if value.is_integer() else value


# ---------------------------------------------------------------------------
# Row normalisation
# ---------------------------------------------------------------------------

def normalize_fields(raw: Mapping[str, str], headers: Iterable[str] = AUDIT_HEADERS) -> dict[str, Any]:
    """Coerce numeric columns, trim the rest. Missing columns default to ""."""
    out: dict[str, Any] = {}
    for header in headers:
        value = raw.get(header, "")
        value = "" if value is None else str(value).strip()
        out[header] = to_number(value) if header in NUMERIC_COLS else value
    return out


def normalize_record(raw: Mapping[str, str], record_id: int) -> AuditRecord:
    """Normalize one parsed row and stamp it with its id."""
    row = normalize_fields(raw)
    row["id"] = record_id
    return AuditRecord.from_row(row)


# ---------------------------------------------------------------------------
# Frame normalisation
# ---------------------------------------------------------------------------

def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure every sheet column exists and has the right type."""
    df = df.copy()
    for col in AUDIT_HEADERS:
        if col not in df.columns:
            df[col] = ""

    for col in AUDIT_HEADERS:
        if col in NUMERIC_COLS:
            cleaned = df[col].astype(str).str.strip()
            nums = pd.to_numeric(cleaned, errors="coerce").replace([np.inf, -np.inf], np.nan)
            df[col] = nums.fillna(0.0).astype("float64")
        else:
            df[col] = df[col].fillna("").astype(str).str.strip()
    return df


def records_to_frame(records: Iterable[AuditRecord]) -> pd.DataFrame:
    """Build the store's DataFrame (id + sheet columns) from typed records."""
    rows = [r.to_row() for r in records]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["id"] = df["id"].astype("int64")
    for col in NUMERIC_COLS:
        df[col] = df[col].astype("float64")
    return df
