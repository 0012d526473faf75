"""
Workbook look: emerald headers, zebra rows, red fill for rows with defects.
"""
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

EMERALD = "059669"
DARK_EMERALD = "064E3B"
ZEBRA = "F5F5F5"
DEFECT_RED = "FEE2E2"
MUTED = "666666"
GRID = "CCCCCC"


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _box(color: str, bottom: str = "thin") -> Border:
    edge = Side(style="thin", color=color)
    return Border(left=edge, right=edge, top=edge, bottom=Side(style=bottom, color=color))


# Fonts
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=DARK_EMERALD)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=MUTED)
SECTION_FONT = Font(name="Calibri", size=14, bold=True, color=EMERALD)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color="FFFFFF")
CELL_FONT = Font(name="Calibri", size=10)
KPI_VALUE_FONT = Font(name="Calibri", size=26, bold=True, color=DARK_EMERALD)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=MUTED)

# Fills and borders
HEADER_FILL = _solid(DARK_EMERALD)
ZEBRA_FILL = _solid(ZEBRA)
DEFECT_FILL = _solid(DEFECT_RED)
CELL_BORDER = _box(GRID)
HEADER_BORDER = _box(DARK_EMERALD, bottom="medium")

# Alignment
CENTERED = Alignment(horizontal="center", vertical="center", wrap_text=True)
TEXT_ALIGN = Alignment(horizontal="left", vertical="center")
NUMBER_ALIGN = Alignment(horizontal="right", vertical="center")

NUMBER_FORMAT = "#,##0.##"
