"""
Audit Records export — filtered record table + KPIs + Defects by Brand, as JSON or Excel.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Mapping, Sequence

from darpan.analytics.aggregate import aggregate
from darpan.analytics.common import frame_to_records, sanitize_for_json
from darpan.analytics.dashboard import kpi_summary
from darpan.config import AUDIT_HEADERS, DEFECT_COL, NUMERIC_COLS
from darpan.data.schemas import DateRange, Metric
from darpan.data.store import DataStore
from darpan.excel import Column, ExcelWriter


AUDIT_COLS = [Column("id", "ID", numeric=True)] + [
    Column(h, h, numeric=h in NUMERIC_COLS) for h in AUDIT_HEADERS
]

BRAND_COLS = [
    Column("name", "Brand"),
    Column("value", "Defects (Cr.+Ma.)", numeric=True),
]


def generate_json(
    store: DataStore,
    selections: Mapping[str, Sequence[str]] | None = None,
    date_range: DateRange | None = None,
    search: str | None = None,
) -> dict:
    filtered = store.get_filtered(selections, date_range, search)
    return sanitize_for_json({
        "date_range": (date_range or DateRange()).label,
        "kpis": kpi_summary(filtered),
        "defects_by_brand": aggregate(filtered, "Brand", Metric.DEFECTS),
        "records": frame_to_records(filtered),
    })


def _has_defect(row: dict) -> bool:
    return row.get(DEFECT_COL, 0) > 0


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    selections: Mapping[str, Sequence[str]] | None = None,
    date_range: DateRange | None = None,
    search: str | None = None,
) -> Path:
    data = generate_json(store, selections, date_range, search)
    k = data["kpis"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Audit Records")
    subtitle = f"{data['date_range']} | {len(data['records'])} records | exported {dt.date.today():%d-%m-%Y}"
    row = ew.write_title(ws, "Market Darpan — Audit Records", subtitle)
    row = ew.write_kpi_row(ws, row, [
        (k["total_audits"], "Total Audits"),
        (k["total_defects"], "Defects Found"),
        (k["total_samples"], "Samples Checked"),
        (k["active_cities"], "Active Cities"),
    ])
    ew.write_table(ws, row, AUDIT_COLS, data["records"], is_defect=_has_defect)

    ws2 = ew.add_sheet("Defects by Brand")
    row = ew.write_section(ws2, 1, "Defects by Brand")
    ew.write_table(ws2, row, BRAND_COLS, data["defects_by_brand"])

    return ew.save(output_path)
