"""
Dashboard endpoints — Executive Dashboard view and the Widget Builder.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from darpan.analytics.dashboard import dashboard_view
from darpan.data.schemas import ViewName
from darpan.api.dependencies import AppState, get_state, get_store, parse_filters
from darpan.api.response_models import FilterRequest, WidgetCreateRequest

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.post("/dashboard")
def dashboard(req: FilterRequest, state: AppState = Depends(get_state)):
    """KPIs, Defects by Brand, and every custom widget over the filtered rows."""
    store = get_store(state)
    selections, date_range = parse_filters(req, ViewName.DASHBOARD, state)
    return dashboard_view(store, state.widgets.list(), selections, date_range)


@router.get("/widgets")
def list_widgets(state: AppState = Depends(get_state)):
    return {"widgets": [w.to_dict() for w in state.widgets.list()]}


@router.post("/widgets", status_code=201)
def create_widget(req: WidgetCreateRequest, state: AppState = Depends(get_state)):
    try:
        widget = state.widgets.add(req.title, req.kind, req.group_by, req.metric, req.color)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return widget.to_dict()


@router.delete("/widgets/{widget_id}")
def delete_widget(widget_id: int, state: AppState = Depends(get_state)):
    try:
        state.widgets.remove(widget_id)
    except KeyError:
        raise HTTPException(404, f"Widget not found: {widget_id}")
    return {"status": "deleted", "id": widget_id}
