"""Styled .xlsx output for the Audit Records export."""
from .writer import Column, ExcelWriter
