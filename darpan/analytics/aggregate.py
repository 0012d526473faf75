"""
Group-by aggregation feeding the chart widgets.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

from darpan.config import DEFECT_COL, NUMERIC_COLS, SAMPLE_COL, UNKNOWN_LABEL
from darpan.data.normalize import compact_number, display_value
from darpan.data.schemas import AuditRecord, Metric

_METRIC_COLUMNS = {
    Metric.DEFECTS: DEFECT_COL,
    Metric.SAMPLES: SAMPLE_COL,
}


def _as_frame(records: pd.DataFrame | Iterable[Mapping[str, Any] | AuditRecord]) -> pd.DataFrame:
    if isinstance(records, pd.DataFrame):
        return records
    rows = [r.to_row() if isinstance(r, AuditRecord) else dict(r) for r in records]
    return pd.DataFrame(rows)


def group_labels(df: pd.DataFrame, group_by: str) -> pd.Series:
    """Text label per row; missing or empty values become "Unknown".

    A numeric column zeroed by the normalizer (blank or unparseable cell)
    counts as missing too.
    """
    if group_by not in df.columns:
        return pd.Series(UNKNOWN_LABEL, index=df.index)
    labels = df[group_by].map(display_value)
    missing = labels == ""
    if group_by in NUMERIC_COLS:
        missing |= pd.to_numeric(df[group_by], errors="coerce") == 0
    return labels.where(~missing, UNKNOWN_LABEL)


def aggregate(
    records: pd.DataFrame | Iterable[Mapping[str, Any] | AuditRecord],
    group_by: str,
    metric: Metric | str,
) -> list[dict[str, Any]]:
    """Group records by one column and reduce with a metric.

    Returns [{"name": label, "value": number}, ...] in first-seen group order,
    with no truncation.
    """
    metric = Metric(metric)
    df = _as_frame(records)
    if df.empty:
        return []

    labels = group_labels(df, group_by)
    if metric == Metric.COUNT:
        values = pd.Series(1, index=df.index)
    else:
        col = _METRIC_COLUMNS[metric]
        if col in df.columns:
            values = pd.to_numeric(df[col], errors="coerce").fillna(0)
        else:
            values = pd.Series(0, index=df.index)

    grouped = values.groupby(labels, sort=False).sum()
    return [
        {"name": str(name), "value": compact_number(value)}
        for name, value in grouped.items()
    ]
