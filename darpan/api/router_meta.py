"""
Meta endpoints: health, sheet columns, filter options.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from darpan.config import AUDIT_HEADERS, DATE_COL, NUMERIC_COLS
from darpan.data.store import DataStore
from darpan.api.dependencies import AppState, get_state, get_store
from darpan.api.response_models import ColumnsResponse, FilterOptionsResponse, HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(state: AppState = Depends(get_state)):
    return HealthResponse(
        status="ok" if state.store.is_loaded else "loading",
        rows=state.store.row_count(),
        widgets=len(state.widgets.list()),
        users=len(state.users.list()),
        surveys=len(state.surveys.list()),
        authenticated=state.auth.is_authenticated,
    )


@router.get("/columns", response_model=ColumnsResponse)
def list_columns():
    return ColumnsResponse(columns=AUDIT_HEADERS, numeric=NUMERIC_COLS, date_column=DATE_COL)


@router.get("/filter-options/{column}", response_model=FilterOptionsResponse)
def filter_options(column: str, store: DataStore = Depends(get_store)):
    """Distinct values offered by a filter bar multi-select."""
    if column not in AUDIT_HEADERS:
        raise HTTPException(404, f"Unknown column: {column}")
    return FilterOptionsResponse(column=column, options=store.filter_options(column))
