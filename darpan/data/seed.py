"""
Sample audits, users and surveys the admin panel starts with.
"""
from __future__ import annotations

_OUTLET = {
    "City": "Ahmedabad", "Zone": "West", "S No.": "1", "Outlet Name": "D Mart",
    "Location": "Bandu Nagar", "Survey Date": "22-10-2024", "Brand": "Honey", "SKU": 1300,
    "Category": "Health Supplement", "BU": "Health Care", "Unit": "Gm",
    "Unit Name": "Baddi Manakpur", "MFG Type": "DIL Unit",
}

SAMPLE_AUDITS = [
    {
        **_OUTLET, "id": 101,
        "Batch No.": "BM5592", "MFG Date": "20-07-2024", "Exp. Date": "19-01-2026",
        "Sample Checked": 26, "Defect (Cr.+Ma.)": 0, "Defect Type": "",
        "Freshness": 94, "Defect generation from": "",
    },
    {
        **_OUTLET, "id": 102,
        "Batch No.": "BM5595", "MFG Date": "23-07-2024", "Exp. Date": "22-01-2026",
        "Sample Checked": 18, "Defect (Cr.+Ma.)": 1, "Defect Type": "Torn Label",
        "Freshness": 91, "Defect generation from": "Manufacturing",
    },
]

SAMPLE_USERS = [
    {"id": 1, "name": "Nikunj", "email": "nc14842@gmail.com", "role": "Admin",
     "status": "Active", "zone": "North", "assigned_survey": "None"},
    {"id": 2, "name": "Amit Verma", "email": "amit@dabur.com", "role": "Editor",
     "status": "Active", "zone": "West", "assigned_survey": "Q4 Audit"},
]

SAMPLE_SURVEYS = [
    {
        "id": "S1", "title": "Q4 Market Sweep", "status": "Active",
        "questions": [
            {"id": 1, "text": "Is the branding visible?", "type": "Yes/No"},
            {"id": 2, "text": "Rate the shelf hygiene (1-5)", "type": "Rating"},
        ],
    },
]
