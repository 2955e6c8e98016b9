from __future__ import annotations

import math
from collections.abc import Callable

from app.models.employee import Employee
from app.models.view import EmployeePage, SortDirection, SortField

SORT_KEYS: dict[SortField, Callable[[Employee], str]] = {
    SortField.NAME: lambda e: e.name,
    SortField.DEPARTMENT: lambda e: e.department,
    SortField.POSITION: lambda e: e.position,
    SortField.EMAIL: lambda e: e.email,
    SortField.PHONE: lambda e: e.phone,
    SortField.EMPLOYMENT_TYPE: lambda e: e.employment_type,
    # ISO-8601 dates order chronologically as plain strings
    SortField.HIRE_DATE: lambda e: e.hire_date,
    SortField.STATUS: lambda e: e.status,
}


def matches_search(employee: Employee, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in employee.name.lower() or needle in employee.email.lower() or search in employee.phone


def filter_employees(
    employees: list[Employee],
    search: str = "",
    department: str = "",
    status: str = "",
) -> list[Employee]:
    return [
        e
        for e in employees
        if matches_search(e, search)
        and (not department or e.department == department)
        and (not status or e.status == status)
    ]


def sort_employees(
    employees: list[Employee],
    field: SortField | None,
    direction: SortDirection = SortDirection.ASC,
) -> list[Employee]:
    """Stable sort; equal keys keep their insertion order in either direction."""
    if field is None:
        return list(employees)
    return sorted(employees, key=SORT_KEYS[field], reverse=direction == SortDirection.DESC)


def total_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size) if page_size > 0 else 0


def paginate(employees: list[Employee], page: int, page_size: int) -> EmployeePage:
    start = (page - 1) * page_size
    items = employees[start : start + page_size] if page >= 1 else []
    return EmployeePage(
        items=items,
        page=page,
        page_size=page_size,
        total_items=len(employees),
        total_pages=total_pages(len(employees), page_size),
    )


def run_query(
    employees: list[Employee],
    search: str = "",
    department: str = "",
    status: str = "",
    sort_field: SortField | None = None,
    sort_direction: SortDirection = SortDirection.ASC,
) -> list[Employee]:
    filtered = filter_employees(employees, search=search, department=department, status=status)
    return sort_employees(filtered, sort_field, sort_direction)


def toggle_sort(
    current_field: SortField | None,
    current_direction: SortDirection,
    selected: SortField,
) -> tuple[SortField, SortDirection]:
    if current_field == selected:
        flipped = SortDirection.DESC if current_direction == SortDirection.ASC else SortDirection.ASC
        return selected, flipped
    return selected, SortDirection.ASC
