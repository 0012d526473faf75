"""
tests/test_audit_report.py

Audit Records export: JSON payload and the styled .xlsx workbook.
"""
from __future__ import annotations

from openpyxl import load_workbook

from darpan.analytics.dashboard import audit_listing, dashboard_view, kpi_summary
from darpan.admin import WidgetBoard
from darpan.config import AUDIT_HEADERS
from darpan.reports import audit_report


class TestKpis:
    def test_seeded_kpis(self, store) -> None:
        assert kpi_summary(store.df) == {
            "total_audits": 2,
            "total_defects": 1,
            "total_samples": 44,
            "active_cities": 1,
        }

    def test_empty(self, empty_store) -> None:
        assert kpi_summary(empty_store.df)["total_audits"] == 0


class TestViews:
    def test_dashboard_view(self, store) -> None:
        board = WidgetBoard()
        board.add(title="By zone", kind="pie", group_by="Zone", metric="count")
        view = dashboard_view(store, board.list())
        assert view["date_range"] == "All Dates"
        assert view["defects_by_brand"] == [{"name": "Honey", "value": 1}]
        assert view["widgets"][0]["data"] == [{"name": "West", "value": 2}]
        assert view["widgets"][0]["kind"] == "pie"

    def test_audit_listing(self, store) -> None:
        listing = audit_listing(store, search="torn")
        assert listing["count"] == 1
        assert listing["total"] == 2
        record = listing["records"][0]
        assert record["id"] == 102
        assert record["SKU"] == 1300
        assert isinstance(record["SKU"], int)


class TestGenerateJson:
    def test_filtered_payload(self, store) -> None:
        data = audit_report.generate_json(store, {"Defect Type": ["Torn Label"]})
        assert data["kpis"]["total_audits"] == 1
        assert [r["id"] for r in data["records"]] == [102]


class TestGenerateExcel:
    def test_workbook_sheets_and_rows(self, store, tmp_path) -> None:
        out = audit_report.generate_excel(store, tmp_path / "out" / "audits.xlsx")
        assert out.exists()

        wb = load_workbook(out)
        assert wb.sheetnames == ["Audit Records", "Defects by Brand"]

        ws = wb["Audit Records"]
        assert ws.cell(row=1, column=1).value == "Market Darpan — Audit Records"
        assert ws.cell(row=4, column=1).value == 2
        header = [ws.cell(row=7, column=c).value for c in range(1, len(AUDIT_HEADERS) + 2)]
        assert header == ["ID"] + AUDIT_HEADERS
        assert ws.cell(row=8, column=1).value == 101
        assert ws.cell(row=9, column=1).value == 102
        assert ws.cell(row=10, column=1).value is None

        brands = wb["Defects by Brand"]
        assert brands.cell(row=4, column=1).value == "Honey"
        assert brands.cell(row=4, column=2).value == 1

    def test_empty_selection_still_writes(self, store, tmp_path) -> None:
        out = audit_report.generate_excel(store, tmp_path / "none.xlsx", {"Zone": ["East"]})
        ws = load_workbook(out)["Audit Records"]
        assert ws.cell(row=4, column=1).value == 0
        assert ws.cell(row=8, column=1).value is None
