"""
Per-view filter bar configuration (System Settings page).
"""
from __future__ import annotations

from typing import Mapping, Sequence

from darpan.config import AUDIT_HEADERS, DEFAULT_FILTER_CONFIG
from darpan.data.schemas import ViewName


class FilterSettings:
    """Which columns each view offers as multi-select filters."""

    def __init__(self, config: Mapping[str, Sequence[str]] | None = None) -> None:
        config = DEFAULT_FILTER_CONFIG if config is None else config
        self._config: dict[ViewName, list[str]] = {
            ViewName(view): list(columns) for view, columns in config.items()
        }
        for view in ViewName:
            self._config.setdefault(view, [])

    def columns(self, view: ViewName | str) -> list[str]:
        return list(self._config[ViewName(view)])

    def toggle(self, view: ViewName | str, column: str) -> list[str]:
        """Enable the column if it is off, disable it if it is on."""
        if column not in AUDIT_HEADERS:
            raise ValueError(f"Unknown column: {column}")
        current = self._config[ViewName(view)]
        if column in current:
            current.remove(column)
        else:
            current.append(column)
        return list(current)

    def check_selections(self, view: ViewName | str, selections: Mapping[str, Sequence[str]]) -> None:
        """Raise ValueError if a non-empty selection targets a column the view does not offer."""
        allowed = self._config[ViewName(view)]
        extra = [col for col, selected in selections.items() if selected and col not in allowed]
        if extra:
            raise ValueError(f"Columns not filterable in {ViewName(view).value}: {extra}")

    def as_dict(self) -> dict[str, list[str]]:
        return {view.value: list(cols) for view, cols in self._config.items()}
