"""Pydantic models for query state, pages and the rendered directory view."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from app.models.auth import UserInfo
from app.models.employee import Employee, EmployeeFields


class SortField(str, Enum):
    NAME = "name"
    DEPARTMENT = "department"
    POSITION = "position"
    EMAIL = "email"
    PHONE = "phone"
    EMPLOYMENT_TYPE = "employment_type"
    HIRE_DATE = "hire_date"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class QueryState(BaseModel):
    """Search term, facets, sort and page of the directory table."""

    search: str = ""
    department: str = ""
    status: str = ""
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)


class FilterUpdate(BaseModel):
    """Partial filter change; omitted fields keep their current value."""

    search: str | None = Field(default=None, max_length=200)
    department: str | None = None
    status: str | None = None


class PageRequest(BaseModel):
    page: int = Field(..., ge=1)


class EmployeePage(BaseModel):
    items: list[Employee]
    page: int
    page_size: int
    total_items: int
    total_pages: int


class EmployeeRow(Employee):
    """Employee as shown in the table; hire date formatted for display."""

    hire_date_display: str = ""


class FormState(BaseModel):
    is_open: bool = False
    mode: str = Field(default="create", pattern=r"^(create|edit)$")
    editing_id: str | None = None
    values: EmployeeFields = Field(default_factory=EmployeeFields)


class Capabilities(BaseModel):
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_import: bool = False
    can_export: bool = True


class HeaderInfo(BaseModel):
    user: UserInfo
    role_label: str


class DirectoryView(BaseModel):
    """Everything the directory screen needs to render one frame."""

    header: HeaderInfo
    query: QueryState
    rows: list[EmployeeRow]
    total_items: int
    total_pages: int
    page_size: int
    form: FormState
    capabilities: Capabilities


class ImportResult(BaseModel):
    imported: int
    message: str
