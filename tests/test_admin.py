"""
tests/test_admin.py

Session-scoped admin entities: widget board, filter settings, users, surveys, sign-in.
"""
from __future__ import annotations

import asyncio

import pytest

from darpan.admin import (
    FilterSettings, LastSurveyError, SessionAuth, SurveyCatalog, UserDirectory, WidgetBoard,
)
from darpan.data.schemas import ChartKind, Metric, ViewName


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

class TestWidgetBoard:
    def test_add_defaults(self) -> None:
        board = WidgetBoard()
        widget = board.add()
        assert widget.id == 1
        assert widget.kind is ChartKind.BAR
        assert widget.metric is Metric.DEFECTS
        assert widget.group_by == "Brand"
        assert widget.to_dict()["kind"] == "bar"

    def test_ids_increase_and_order_kept(self) -> None:
        board = WidgetBoard()
        board.add(title="A", kind="pie", group_by="Zone", metric="count")
        board.add(title="B", kind="line", group_by="City", metric="samples", color="#3B82F6")
        assert [w.title for w in board.list()] == ["A", "B"]
        assert [w.id for w in board.list()] == [1, 2]

    @pytest.mark.parametrize("kwargs", [
        {"kind": "scatter"},
        {"metric": "median"},
        {"group_by": "Not A Column"},
        {"color": "#000000"},
    ])
    def test_invalid_input_rejected(self, kwargs) -> None:
        board = WidgetBoard()
        with pytest.raises(ValueError):
            board.add(**kwargs)
        assert board.list() == []

    def test_remove(self) -> None:
        board = WidgetBoard()
        first = board.add(title="A")
        board.add(title="B")
        assert board.remove(first.id) == first
        assert [w.title for w in board.list()] == ["B"]
        with pytest.raises(KeyError):
            board.remove(first.id)


# ---------------------------------------------------------------------------
# Filter settings
# ---------------------------------------------------------------------------

class TestFilterSettings:
    def test_defaults(self) -> None:
        settings = FilterSettings()
        assert settings.columns("dashboard") == ["Zone", "City", "Brand"]
        assert settings.columns(ViewName.AUDIT_LOGS) == ["Zone", "Brand", "Defect Type"]

    def test_toggle_on_and_off(self) -> None:
        settings = FilterSettings()
        assert settings.toggle("dashboard", "Defect Type") == ["Zone", "City", "Brand", "Defect Type"]
        assert settings.toggle("dashboard", "City") == ["Zone", "Brand", "Defect Type"]

    def test_views_are_independent(self) -> None:
        settings = FilterSettings()
        settings.toggle("dashboard", "Zone")
        assert "Zone" in settings.columns("audit_logs")

    def test_unknown_column_or_view(self) -> None:
        settings = FilterSettings()
        with pytest.raises(ValueError):
            settings.toggle("dashboard", "Colour")
        with pytest.raises(ValueError):
            settings.columns("reports")

    def test_check_selections(self) -> None:
        settings = FilterSettings()
        settings.check_selections("dashboard", {"Zone": ["West"]})
        with pytest.raises(ValueError, match="Defect Type"):
            settings.check_selections("dashboard", {"Defect Type": ["Torn Label"]})

    def test_cleared_selection_on_disabled_column_is_allowed(self) -> None:
        settings = FilterSettings()
        settings.toggle("dashboard", "Zone")
        settings.check_selections("dashboard", {"Zone": [], "City": ["Pune"]})

    def test_as_dict(self) -> None:
        assert FilterSettings({"dashboard": ["City"]}).as_dict() == {"dashboard": ["City"], "audit_logs": []}


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class TestUserDirectory:
    def test_seeded(self) -> None:
        users = UserDirectory()
        assert [u.name for u in users.list()] == ["Nikunj", "Amit Verma"]

    def test_invite(self) -> None:
        users = UserDirectory()
        user = users.add("Priya", "priya@example.com", role="Viewer", zone="South")
        assert user.id == 3
        assert user.status == "Active"
        assert user.assigned_survey == "None"
        assert users.get(3) == user

    def test_invite_bad_role(self) -> None:
        with pytest.raises(ValueError):
            UserDirectory(seed=False).add("X", "x@example.com", role="Owner")

    def test_update_merges(self) -> None:
        users = UserDirectory()
        updated = users.update(2, zone="East", status="Inactive")
        assert updated.zone == "East"
        assert updated.status == "Inactive"
        assert updated.name == "Amit Verma"

    def test_update_errors(self) -> None:
        users = UserDirectory()
        with pytest.raises(KeyError):
            users.update(42, zone="East")
        with pytest.raises(ValueError):
            users.update(1, role="Superuser")
        with pytest.raises(ValueError):
            users.update(1, id=9)

    def test_remove(self) -> None:
        users = UserDirectory()
        removed = users.remove(2)
        assert removed.name == "Amit Verma"
        assert [u.id for u in users.list()] == [1]
        assert users.get(2) is None
        with pytest.raises(KeyError):
            users.remove(2)

    def test_ids_not_reused_after_remove(self) -> None:
        users = UserDirectory()
        users.remove(2)
        assert users.add("Priya", "priya@example.com").id == 3


# ---------------------------------------------------------------------------
# Surveys
# ---------------------------------------------------------------------------

class TestSurveyCatalog:
    def test_seeded(self) -> None:
        catalog = SurveyCatalog()
        survey = catalog.get("S1")
        assert survey.title == "Q4 Market Sweep"
        assert [q.id for q in survey.questions] == [1, 2]

    def test_seed_is_not_shared(self) -> None:
        SurveyCatalog().rename("S1", "Changed")
        assert SurveyCatalog().get("S1").title == "Q4 Market Sweep"

    def test_add_draft(self) -> None:
        catalog = SurveyCatalog()
        survey = catalog.add()
        assert survey.id == "S2"
        assert survey.title == "New Untitled Survey"
        assert survey.status == "Draft"
        assert survey.questions == []

    def test_cannot_delete_last(self) -> None:
        catalog = SurveyCatalog()
        with pytest.raises(LastSurveyError):
            catalog.delete("S1")
        assert len(catalog.list()) == 1

    def test_delete(self) -> None:
        catalog = SurveyCatalog()
        catalog.add()
        remaining = catalog.delete("S1")
        assert [s.id for s in remaining] == ["S2"]
        with pytest.raises(KeyError):
            catalog.delete("S1")

    def test_rename_and_toggle(self) -> None:
        catalog = SurveyCatalog()
        assert catalog.rename("S1", "Diwali Sweep").title == "Diwali Sweep"
        assert catalog.toggle_status("S1").status == "Draft"
        assert catalog.toggle_status("S1").status == "Active"

    def test_questions(self) -> None:
        catalog = SurveyCatalog()
        question = catalog.add_question("S1")
        assert question.id == 3
        assert question.text == "New Question"
        assert question.type == "Text"

        catalog.update_question("S1", 3, "type", "Rating")
        assert catalog.get("S1").questions[-1].type == "Rating"

        survey = catalog.delete_question("S1", 1)
        assert [q.id for q in survey.questions] == [2, 3]

    def test_question_errors(self) -> None:
        catalog = SurveyCatalog()
        with pytest.raises(ValueError):
            catalog.update_question("S1", 1, "id", "7")
        with pytest.raises(KeyError):
            catalog.update_question("S1", 99, "text", "x")
        with pytest.raises(KeyError):
            catalog.delete_question("S1", 99)
        with pytest.raises(KeyError):
            catalog.add_question("S9")


# ---------------------------------------------------------------------------
# Sign-in
# ---------------------------------------------------------------------------

class TestSessionAuth:
    def test_sso_login(self) -> None:
        auth = SessionAuth(delay=0)
        user = asyncio.run(auth.login_sso())
        assert user.name == "Azure User"
        assert auth.is_authenticated

    def test_dev_login_and_logout(self) -> None:
        auth = SessionAuth(delay=0)
        assert not auth.is_authenticated
        assert auth.login_dev().email == "dev@local"
        auth.logout()
        assert auth.current_user is None
