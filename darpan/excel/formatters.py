"""
Cell-level helpers shared by the workbook builder.
"""
from __future__ import annotations

from typing import Any

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from darpan.excel import styles


def style_header(ws: Worksheet, row: int, labels: list[str]) -> None:
    for col, label in enumerate(labels, 1):
        cell = ws.cell(row=row, column=col, value=label)
        cell.font = styles.HEADER_FONT
        cell.fill = styles.HEADER_FILL
        cell.alignment = styles.CENTERED
        cell.border = styles.HEADER_BORDER


def write_cell(ws: Worksheet, row: int, col: int, value: Any, numeric: bool, defect: bool = False) -> None:
    """Write one table cell. Defect rows are filled red, the rest alternate."""
    cell = ws.cell(row=row, column=col, value=value)
    cell.font = styles.CELL_FONT
    cell.border = styles.CELL_BORDER
    if numeric:
        cell.alignment = styles.NUMBER_ALIGN
        cell.number_format = styles.NUMBER_FORMAT
    else:
        cell.alignment = styles.TEXT_ALIGN

    if defect:
        cell.fill = styles.DEFECT_FILL
    elif row % 2 == 0:
        cell.fill = styles.ZEBRA_FILL


def kpi_card(ws: Worksheet, row: int, col: int, value: Any, label: str) -> None:
    """Big number with a caption underneath."""
    top = ws.cell(row=row, column=col, value=value)
    top.font = styles.KPI_VALUE_FONT
    top.alignment = styles.CENTERED
    top.number_format = styles.NUMBER_FORMAT

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = styles.KPI_LABEL_FONT
    caption.alignment = styles.CENTERED


def fit_columns(ws: Worksheet, first_row: int, min_width: int = 8, max_width: int = 40) -> None:
    """Size each column to its longest value from first_row down (title rows excluded)."""
    widths: dict[int, int] = {}
    for cells in ws.iter_rows(min_row=first_row):
        for cell in cells:
            if cell.value is None:
                continue
            widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
    for col, width in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = min(max(width + 2, min_width), max_width)
