"""
View analytics — compute functions for the Executive Dashboard and Audit Records pages.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import pandas as pd

from darpan.admin.widgets import ChartWidget
from darpan.analytics.aggregate import aggregate
from darpan.analytics.common import frame_to_records, sanitize_for_json
from darpan.config import DEFECT_COL, SAMPLE_COL
from darpan.data.normalize import compact_number
from darpan.data.schemas import DateRange, Metric
from darpan.data.store import DataStore


def kpi_summary(df: pd.DataFrame) -> dict:
    """Stat cards: audits, defects, samples checked, distinct cities."""
    if df.empty:
        return {"total_audits": 0, "total_defects": 0, "total_samples": 0, "active_cities": 0}
    return {
        "total_audits": len(df),
        "total_defects": compact_number(pd.to_numeric(df[DEFECT_COL], errors="coerce").fillna(0).sum()),
        "total_samples": compact_number(pd.to_numeric(df[SAMPLE_COL], errors="coerce").fillna(0).sum()),
        "active_cities": df["City"].nunique(),
    }


def widget_series(df: pd.DataFrame, widgets: Iterable[ChartWidget]) -> list[dict]:
    """One data series per widget, all over the same filtered rows."""
    return [
        {**w.to_dict(), "data": aggregate(df, w.group_by, w.metric)}
        for w in widgets
    ]


def dashboard_view(
    store: DataStore,
    widgets: Iterable[ChartWidget] = (),
    selections: Mapping[str, Sequence[str]] | None = None,
    date_range: DateRange | None = None,
) -> dict:
    """KPIs, the fixed Defects-by-Brand chart, and every custom widget."""
    filtered = store.get_filtered(selections, date_range)
    return sanitize_for_json({
        "date_range": (date_range or DateRange()).label,
        "kpis": kpi_summary(filtered),
        "defects_by_brand": aggregate(filtered, "Brand", Metric.DEFECTS),
        "widgets": widget_series(filtered, widgets),
    })


def audit_listing(
    store: DataStore,
    selections: Mapping[str, Sequence[str]] | None = None,
    date_range: DateRange | None = None,
    search: str | None = None,
) -> dict:
    """Rows for the Audit Records table."""
    filtered = store.get_filtered(selections, date_range, search)
    return sanitize_for_json({
        "count": len(filtered),
        "total": store.row_count(),
        "records": frame_to_records(filtered),
    })
