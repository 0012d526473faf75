"""
Shared fixtures. Environment is pinned before any darpan module is imported
so config picks up a throwaway data dir and an instant SSO login.
"""
from __future__ import annotations

import os
import tempfile

os.environ.setdefault("DARPAN_DATA_DIR", tempfile.mkdtemp(prefix="darpan-tests-"))
os.environ.setdefault("DARPAN_LOGIN_DELAY", "0")
os.environ.setdefault("DARPAN_SEED_SAMPLE_DATA", "1")

import pytest

from darpan.config import AUDIT_HEADERS
from darpan.data.store import DataStore


HEADER_LINE = ",".join(AUDIT_HEADERS)


def make_line(**values) -> str:
    """One CSV data line; keyword names are headers with spaces/punctuation dropped.

    e.g. make_line(City="Pune", Zone="West", SurveyDate="01-08-2024", Defect=2)
    """
    aliases = {
        "SurveyDate": "Survey Date",
        "OutletName": "Outlet Name",
        "Samples": "Sample Checked",
        "Defect": "Defect (Cr.+Ma.)",
        "DefectType": "Defect Type",
    }
    row = {aliases.get(k, k): v for k, v in values.items()}
    return ",".join(str(row.get(h, "")) for h in AUDIT_HEADERS)


def make_csv(*lines: str, newline: str = "\n") -> str:
    return newline.join([HEADER_LINE, *lines]) + newline


@pytest.fixture()
def store() -> DataStore:
    """Store seeded with the two sample Honey audits (ids 101, 102)."""
    return DataStore().load(seed=True)


@pytest.fixture()
def empty_store() -> DataStore:
    return DataStore().load(seed=False)
