"""
CSV import: quote-aware line splitting and row → AuditRecord parsing.
"""
from __future__ import annotations

import itertools
import re
from pathlib import Path
from typing import Iterator

from darpan.config import AUDIT_HEADERS
from darpan.data.normalize import normalize_record
from darpan.data.schemas import ImportResult


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

_LINE_BREAK_RE = re.compile(r"\r\n|\n")

# A comma is a delimiter only when an even number of quotes follow it on the line
_DELIMITER_RE = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')

_EDGE_QUOTE_RE = re.compile(r'^"|"$')


def split_csv_line(line: str) -> list[str]:
    """Split one line on unquoted commas and clean each field.

    No escaping beyond double-quote wrapping; embedded newlines are not supported.
    """
    return [_EDGE_QUOTE_RE.sub("", cell).strip() for cell in _DELIMITER_RE.split(line)]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_audit_text(
    text: str,
    ids: Iterator[int] | None = None,
) -> ImportResult:
    """Parse an exported audit sheet into typed records.

    The first line is treated as the header and skipped without validation.
    Blank lines and lines whose fields are all empty are dropped. Short rows
    are padded with "" and extra fields are ignored.
    """
    if ids is None:
        ids = itertools.count(1)

    result = ImportResult()
    lines = _LINE_BREAK_RE.split(text)
    for line in lines[1:]:
        row_text = line.strip()
        if not row_text:
            continue
        cells = split_csv_line(row_text)
        if all(cell == "" for cell in cells):
            continue
        raw = {header: (cells[i] if i < len(cells) else "") for i, header in enumerate(AUDIT_HEADERS)}
        result.records.append(normalize_record(raw, next(ids)))
    return result


def load_csv_file(filepath: Path, ids: Iterator[int] | None = None) -> ImportResult:
    """Read a UTF-8 CSV from disk and parse it. Undecodable files yield no rows."""
    try:
        text = Path(filepath).read_bytes().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"  Warning: skipping {Path(filepath).name}: {exc}")
        return ImportResult()
    return parse_audit_text(text, ids=ids)
