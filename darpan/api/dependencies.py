"""
FastAPI dependencies — session state singleton, filter parsing.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Depends, HTTPException

from darpan.admin import FilterSettings, SessionAuth, SurveyCatalog, UserDirectory, WidgetBoard
from darpan.api.response_models import FilterRequest
from darpan.data.schemas import DateRange, ViewName
from darpan.data.store import DataStore


@dataclass
class AppState:
    """Everything the admin panel holds in memory for the life of the process."""
    store: DataStore = field(default_factory=DataStore)
    widgets: WidgetBoard = field(default_factory=WidgetBoard)
    filters: FilterSettings = field(default_factory=FilterSettings)
    users: UserDirectory = field(default_factory=UserDirectory)
    surveys: SurveyCatalog = field(default_factory=SurveyCatalog)
    auth: SessionAuth = field(default_factory=SessionAuth)


# ---------------------------------------------------------------------------
# Global state singleton (set during startup)
# ---------------------------------------------------------------------------
_state: AppState | None = None


def set_state(state: AppState | None) -> None:
    global _state
    _state = state


def get_state() -> AppState:
    if _state is None:
        raise HTTPException(503, "Server not initialized yet")
    return _state


def get_store(state: AppState = Depends(get_state)) -> DataStore:
    if not state.store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return state.store


# ---------------------------------------------------------------------------
# Filter parsing from request bodies
# ---------------------------------------------------------------------------

def parse_date_range(req: FilterRequest) -> DateRange:
    try:
        return DateRange.from_strings(req.start_date, req.end_date)
    except ValueError:
        raise HTTPException(400, f"Invalid date bound: {req.start_date!r} / {req.end_date!r} (expected YYYY-MM-DD)")


def parse_filters(
    req: FilterRequest,
    view: ViewName,
    state: AppState,
) -> tuple[dict[str, list[str]], DateRange]:
    """Validate selections against the view's filter bar and parse the date bounds."""
    try:
        state.filters.check_selections(view, req.filters)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return dict(req.filters), parse_date_range(req)
