"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    rows: int
    widgets: int
    users: int
    surveys: int
    authenticated: bool


class ColumnsResponse(BaseModel):
    columns: list[str]
    numeric: list[str]
    date_column: str


class FilterOptionsResponse(BaseModel):
    column: str
    options: list[str]


class ImportResponse(BaseModel):
    status: str          # "imported" | "empty"
    count: int
    message: str
    rows: int


class FilterRequest(BaseModel):
    """Multi-select column filters + survey-date bounds (+ search on Audit Records)."""
    filters: dict[str, list[str]] = Field(default_factory=dict)
    start_date: Optional[str] = None     # YYYY-MM-DD
    end_date: Optional[str] = None       # YYYY-MM-DD
    search: Optional[str] = None


class WidgetCreateRequest(BaseModel):
    title: str = ""
    kind: str = "bar"
    group_by: str = "Brand"
    metric: str = "defects"
    color: str = "#10B981"


class UserCreateRequest(BaseModel):
    name: str
    email: str
    role: str = "Admin"
    zone: str = "North"
    assigned_survey: str = "None"


class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    zone: Optional[str] = None
    assigned_survey: Optional[str] = None
    status: Optional[str] = None


class SurveyTitleRequest(BaseModel):
    title: str


class QuestionUpdateRequest(BaseModel):
    field: str           # "text" | "type"
    value: str


class FilterToggleRequest(BaseModel):
    column: str


class SessionUserResponse(BaseModel):
    name: str
    email: str
    role: str
