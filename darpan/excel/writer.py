"""
ExcelWriter — builds the styled export workbook sheet by sheet.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, NamedTuple, Sequence

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from darpan.excel import styles
from darpan.excel.formatters import fit_columns, kpi_card, style_header, write_cell


class Column(NamedTuple):
    key: str
    label: str
    numeric: bool = False


class ExcelWriter:
    """Each write_* method returns the next free row."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def add_sheet(self, title: str) -> Worksheet:
        # The workbook starts with one blank sheet; use it for the first call
        if self._fresh:
            self._fresh = False
            ws = self.wb.active
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    def write_title(self, ws: Worksheet, title: str, subtitle: str, span: int = 8) -> int:
        for row, text, font in ((1, title, styles.TITLE_FONT), (2, subtitle, styles.SUBTITLE_FONT)):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=span)
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = styles.SECTION_FONT
        return row + 2

    def write_kpi_row(self, ws: Worksheet, row: int, kpis: Sequence[tuple[Any, str]], spacing: int = 2) -> int:
        """kpis: [(value, label), ...] laid out left to right."""
        for i, (value, label) in enumerate(kpis):
            kpi_card(ws, row, 1 + i * spacing, value, label)
        return row + 3

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: Sequence[Column],
        rows: Sequence[dict],
        is_defect: Callable[[dict], bool] | None = None,
    ) -> int:
        """Header plus one line per row dict; freezes the header."""
        style_header(ws, start_row, [c.label for c in columns])
        row = start_row + 1
        for data in rows:
            defect = bool(is_defect and is_defect(data))
            for col, column in enumerate(columns, 1):
                write_cell(ws, row, col, data.get(column.key, ""), column.numeric, defect)
            row += 1
        fit_columns(ws, start_row)
        ws.freeze_panes = ws.cell(row=start_row + 1, column=1)
        return row

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
