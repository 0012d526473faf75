"""
Market Darpan — Configuration: schema, defaults, paths.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with DARPAN_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("DARPAN_DATA_DIR", str(Path.home() / "Market Darpan")))
BASE_FOLDER = _data_dir
EXPORTS_FOLDER = _data_dir / "exports"

# ---------------------------------------------------------------------------
# Audit sheet schema (column order of the field team's Excel export)
# ---------------------------------------------------------------------------
AUDIT_HEADERS = [
    "City", "Zone", "S No.", "Outlet Name", "Location", "Survey Date", "Brand", "SKU", "Category",
    "BU", "Unit", "Batch No.", "MFG Date", "Exp. Date", "Unit Name", "MFG Type",
    "Sample Checked", "Defect (Cr.+Ma.)", "Defect Type", "Freshness", "Defect generation from",
]

NUMERIC_COLS = ["Sample Checked", "Defect (Cr.+Ma.)", "Freshness", "SKU"]

DATE_COL = "Survey Date"
DEFECT_COL = "Defect (Cr.+Ma.)"
SAMPLE_COL = "Sample Checked"
DATE_FORMAT = "%d-%m-%Y"

UNKNOWN_LABEL = "Unknown"

# ---------------------------------------------------------------------------
# Column mapping from sheet header → AuditRecord attribute
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "City": "city",
    "Zone": "zone",
    "S No.": "serial_no",
    "Outlet Name": "outlet_name",
    "Location": "location",
    "Survey Date": "survey_date",
    "Brand": "brand",
    "SKU": "sku",
    "Category": "category",
    "BU": "business_unit",
    "Unit": "unit",
    "Batch No.": "batch_no",
    "MFG Date": "mfg_date",
    "Exp. Date": "exp_date",
    "Unit Name": "unit_name",
    "MFG Type": "mfg_type",
    "Sample Checked": "sample_checked",
    "Defect (Cr.+Ma.)": "defect_count",
    "Defect Type": "defect_type",
    "Freshness": "freshness",
    "Defect generation from": "defect_source",
}

# ---------------------------------------------------------------------------
# Filter bar defaults (per view; editable from System Settings)
# ---------------------------------------------------------------------------
DEFAULT_FILTER_CONFIG = {
    "dashboard": ["Zone", "City", "Brand"],
    "audit_logs": ["Zone", "Brand", "Defect Type"],
}

# ---------------------------------------------------------------------------
# Chart widgets
# ---------------------------------------------------------------------------
CHART_COLORS = [
    "#10B981", "#F59E0B", "#EF4444", "#3B82F6",
    "#8B5CF6", "#ec4899", "#6366f1", "#14b8a6",
]
DEFAULT_WIDGET = {
    "title": "",
    "kind": "bar",
    "group_by": "Brand",
    "metric": "defects",
    "color": "#10B981",
}

# ---------------------------------------------------------------------------
# Admin side-entities
# ---------------------------------------------------------------------------
USER_ROLES = ["Admin", "Editor", "Viewer"]
DEFAULT_ZONE = "North"
NO_ASSIGNMENT = "None"
SURVEY_STATUSES = ["Active", "Draft"]
NEW_SURVEY_TITLE = "New Untitled Survey"
NEW_QUESTION_TEXT = "New Question"
NEW_QUESTION_TYPE = "Text"

# ---------------------------------------------------------------------------
# Startup switches
# ---------------------------------------------------------------------------
SEED_SAMPLE_DATA = os.environ.get("DARPAN_SEED_SAMPLE_DATA", "1").lower() not in ("0", "false", "no")

# SSO login is mocked: it "succeeds" after this many seconds
LOGIN_DELAY_SECONDS = float(os.environ.get("DARPAN_LOGIN_DELAY", "1.5"))
