"""
Audit Records endpoints — filtered listing, detail, Excel export.
"""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from darpan.analytics.dashboard import audit_listing
from darpan.config import EXPORTS_FOLDER
from darpan.data.schemas import ViewName
from darpan.data.store import DataStore
from darpan.analytics.common import record_payload
from darpan.api.dependencies import AppState, get_state, get_store, parse_filters
from darpan.api.response_models import FilterRequest
from darpan.reports import audit_report

router = APIRouter(prefix="/api/audits", tags=["audits"])


@router.post("/query")
def query_audits(req: FilterRequest, state: AppState = Depends(get_state)):
    """Search + multi-select filters + date range, ANDed."""
    store = get_store(state)
    selections, date_range = parse_filters(req, ViewName.AUDIT_LOGS, state)
    return audit_listing(store, selections, date_range, req.search)


@router.post("/export")
def export_audits(req: FilterRequest, state: AppState = Depends(get_state)):
    """Download the filtered Audit Records table as .xlsx."""
    store = get_store(state)
    selections, date_range = parse_filters(req, ViewName.AUDIT_LOGS, state)
    out_path = EXPORTS_FOLDER / f"Audit_Records_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    audit_report.generate_excel(store, out_path, selections, date_range, req.search)
    return FileResponse(
        path=str(out_path),
        filename=out_path.name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


@router.get("/{record_id}")
def get_audit(record_id: int, store: DataStore = Depends(get_store)):
    record = store.get(record_id)
    if record is None:
        raise HTTPException(404, f"Audit not found: {record_id}")
    return record_payload(record)
