"""
JSON helpers used across analytics and report modules.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd

from darpan.config import NUMERIC_COLS
from darpan.data.normalize import compact_number
from darpan.data.schemas import AuditRecord


def frame_to_records(df: pd.DataFrame) -> list[dict]:
    """DataFrame rows → JSON-ready dicts (integral floats become ints)."""
    rows = df.to_dict("records")
    for row in rows:
        row["id"] = int(row["id"])
        for col in NUMERIC_COLS:
            if col in row:
                row[col] = compact_number(row[col])
    return rows


def record_payload(record: AuditRecord) -> dict:
    """One AuditRecord as a JSON-ready, header-keyed dict."""
    row = record.to_row()
    for col in NUMERIC_COLS:
        row[col] = compact_number(row[col])
    return row


def sanitize_for_json(obj):
    """Recursively turn numpy scalars into plain Python; NaN/inf floats become 0.0."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple, np.ndarray)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        value = float(obj)
        return value if math.isfinite(value) else 0.0
    if obj is pd.NaT:
        return None
    return obj
