"""
Chart widgets built from the Widget Builder form. Session-only, never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass

from darpan.config import AUDIT_HEADERS, CHART_COLORS, DEFAULT_WIDGET
from darpan.data.schemas import ChartKind, Metric


@dataclass(frozen=True)
class ChartWidget:
    """One chart: what to group by, how to reduce, and how to draw it."""
    id: int
    title: str
    kind: ChartKind
    group_by: str
    metric: Metric
    color: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "kind": self.kind.value,
            "group_by": self.group_by,
            "metric": self.metric.value,
            "color": self.color,
        }


class WidgetBoard:
    """Ordered list of dashboard widgets."""

    def __init__(self) -> None:
        self._widgets: list[ChartWidget] = []
        self._next_id = 1

    def add(
        self,
        title: str = DEFAULT_WIDGET["title"],
        kind: ChartKind | str = DEFAULT_WIDGET["kind"],
        group_by: str = DEFAULT_WIDGET["group_by"],
        metric: Metric | str = DEFAULT_WIDGET["metric"],
        color: str = DEFAULT_WIDGET["color"],
    ) -> ChartWidget:
        """Validate and append a widget. Raises ValueError on bad input."""
        kind = ChartKind(kind)
        metric = Metric(metric)
        if group_by not in AUDIT_HEADERS:
            raise ValueError(f"Unknown group_by column: {group_by}")
        if color not in CHART_COLORS:
            raise ValueError(f"Invalid color: {color}. Valid: {CHART_COLORS}")

        widget = ChartWidget(self._next_id, title, kind, group_by, metric, color)
        self._next_id += 1
        self._widgets.append(widget)
        return widget

    def remove(self, widget_id: int) -> ChartWidget:
        for i, widget in enumerate(self._widgets):
            if widget.id == widget_id:
                return self._widgets.pop(i)
        raise KeyError(widget_id)

    def list(self) -> list[ChartWidget]:
        return list(self._widgets)
