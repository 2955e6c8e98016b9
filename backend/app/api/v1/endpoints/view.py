"""Directory screen state: filters, sort, paging and the employee form."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user, get_session, require_role
from app.models.auth import UserInfo
from app.models.employee import EmployeeInput
from app.models.view import DirectoryView, FilterUpdate, FormState, PageRequest, SortField
from app.services.directory_session import DirectorySession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/view", tags=["view"])


@router.get("", response_model=DirectoryView)
async def render_view(
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    return session.render()


@router.put("/filters", response_model=DirectoryView)
async def update_filters(
    request: FilterUpdate,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    session.set_filters(request)
    return session.render()


@router.post("/sort/{field}", response_model=DirectoryView)
async def toggle_sort(
    field: SortField,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    session.toggle_sort(field)
    return session.render()


@router.put("/page", response_model=DirectoryView)
async def change_page(
    request: PageRequest,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    session.set_page(request.page)
    return session.render()


@router.post("/form", response_model=FormState)
async def open_create_form(
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    return session.open_create_form()


@router.post("/form/submit", response_model=DirectoryView)
async def submit_form(
    request: EmployeeInput,
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    if not session.form.is_open:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Employee form is not open",
        )

    editing_id = session.form.editing_id
    saved = session.submit_form(request)
    if saved is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{editing_id}' not found",
        )

    logger.info("Form saved employee %s user=%s", saved.id, user.name)
    return session.render()


@router.post("/form/{employee_id}", response_model=FormState)
async def open_edit_form(
    employee_id: str,
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    form = session.open_edit_form(employee_id)
    if form is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    return form


@router.delete("/form", response_model=FormState)
async def cancel_form(
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    return session.cancel_form()
