"""
Filter engine — multi-select column filters, survey-date range, free-text search.

The scalar functions (matches / matches_search) and the vectorized
filter_frame apply the same rules; the API uses the vectorized form.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from darpan.config import DATE_COL, DATE_FORMAT
from darpan.data.normalize import display_value
from darpan.data.schemas import AuditRecord, DateRange

Selections = Mapping[str, Sequence[Any]]


# ---------------------------------------------------------------------------
# Scalar (one record)
# ---------------------------------------------------------------------------

def parse_survey_date(value: Any) -> Optional[dt.date]:
    """DD-MM-YYYY → date, or None when blank/malformed."""
    text = display_value(value).strip()
    if not text:
        return None
    try:
        return dt.datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def matches(
    record: Mapping[str, Any] | AuditRecord,
    selections: Selections | None = None,
    date_range: DateRange | None = None,
) -> bool:
    """True when the record passes every column filter and the date range.

    An empty selection list puts no constraint on its column. A survey date
    that cannot be parsed passes the date range whatever the bounds are.
    """
    for column, selected in (selections or {}).items():
        if not selected:
            continue
        allowed = {display_value(v) for v in selected}
        if display_value(record.get(column)) not in allowed:
            return False

    if date_range is None or date_range.is_open:
        return True
    survey_date = parse_survey_date(record.get(DATE_COL))
    if survey_date is None:
        return True
    if date_range.start is not None and survey_date < date_range.start:
        return False
    if date_range.end is not None and survey_date > date_range.end:
        return False
    return True


def matches_search(record: Mapping[str, Any] | AuditRecord, term: str | None) -> bool:
    """True when any field (id included) contains the term, case-insensitively."""
    if not term:
        return True
    needle = term.lower()
    row = record.to_row() if isinstance(record, AuditRecord) else record
    return any(needle in display_value(v).lower() for v in row.values())


# ---------------------------------------------------------------------------
# Vectorized (whole frame)
# ---------------------------------------------------------------------------

def column_mask(df: pd.DataFrame, selections: Selections | None) -> pd.Series:
    mask = pd.Series(True, index=df.index)
    for column, selected in (selections or {}).items():
        if not selected:
            continue
        allowed = {display_value(v) for v in selected}
        if column in df.columns:
            values = df[column].map(display_value)
        else:
            values = pd.Series("", index=df.index)
        mask &= values.isin(allowed)
    return mask


def date_mask(df: pd.DataFrame, date_range: DateRange | None) -> pd.Series:
    if date_range is None or date_range.is_open or DATE_COL not in df.columns:
        return pd.Series(True, index=df.index)

    raw = df[DATE_COL].map(display_value).str.strip()
    dates = pd.to_datetime(raw, format=DATE_FORMAT, errors="coerce")

    inside = pd.Series(True, index=df.index)
    if date_range.start is not None:
        inside &= dates >= pd.Timestamp(date_range.start)
    if date_range.end is not None:
        inside &= dates <= pd.Timestamp(date_range.end)
    # Unparseable dates fail open
    return dates.isna() | inside


def search_mask(df: pd.DataFrame, term: str | None) -> pd.Series:
    if not term:
        return pd.Series(True, index=df.index)
    needle = term.lower()
    mask = pd.Series(False, index=df.index)
    for column in df.columns:
        text = df[column].map(display_value).str.lower()
        mask |= text.str.contains(needle, regex=False)
    return mask


def filter_frame(
    df: pd.DataFrame,
    selections: Selections | None = None,
    date_range: DateRange | None = None,
    search: str | None = None,
) -> pd.DataFrame:
    """Rows of df passing column filters AND date range AND search."""
    if df.empty:
        return df
    mask = column_mask(df, selections) & date_mask(df, date_range) & search_mask(df, search)
    return df[mask]
