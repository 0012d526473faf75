"""Audit CSV parsing, normalization, and the in-memory dataset."""
from .loader import parse_audit_text, split_csv_line, load_csv_file
from .store import DataStore
from .schemas import AuditRecord, DateRange, ImportResult
from .normalize import normalize_fields, normalize_columns, to_number, display_value
