from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile, status

from app.core.dependencies import get_current_user, get_session, require_role
from app.models.auth import UserInfo
from app.models.employee import Employee, EmployeeInput
from app.models.view import EmployeePage, ImportResult, SortDirection, SortField
from app.services import query_pipeline
from app.services.csv_codec import CSV_MEDIA_TYPE, CsvImportError
from app.services.directory_session import DirectorySession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

IMPORT_FAILED_DETAIL = "Failed to import CSV file"


@router.get("", response_model=EmployeePage)
async def list_employees(
    search: str = "",
    department: str = "",
    status_filter: str = Query("", alias="status"),
    sort: SortField | None = None,
    direction: SortDirection = SortDirection.ASC,
    page: int = 1,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    try:
        results = query_pipeline.run_query(
            session.store.get_all(),
            search=search,
            department=department,
            status=status_filter,
            sort_field=sort,
            sort_direction=direction,
        )
        return query_pipeline.paginate(results, page, session.page_size)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get("/export")
async def export_employees(
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    filename, content = session.export_csv()
    logger.info("CSV export: %s by user=%s", filename, user.name)
    return Response(
        content=content.encode("utf-8"),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_employees(
    file: UploadFile | None = File(None),  # noqa: B008
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    file_bytes = await file.read() if file is not None else None

    try:
        imported = session.import_csv(file_bytes)
    except CsvImportError as e:
        if file_bytes is None:
            logger.warning("CSV import cancelled by user=%s: %s", user.name, e)
            detail = str(e)
        else:
            logger.error("CSV import failed for user=%s: %s", user.name, e)
            detail = IMPORT_FAILED_DETAIL
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        ) from e
    except Exception as err:
        logger.exception("CSV import failed for user=%s", user.name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=IMPORT_FAILED_DETAIL,
        ) from err

    logger.info("CSV import: %d employees from %s user=%s", len(imported), file.filename, user.name)
    return ImportResult(
        imported=len(imported),
        message=f"Imported {len(imported)} employee records.",
    )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    employee = session.store.get(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: EmployeeInput,
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    employee = session.store.add(request)
    logger.info("Employee %s created by user=%s", employee.id, user.name)
    return employee


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    request: EmployeeInput,
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    employee = session.store.update(employee_id, request)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    logger.info("Employee %s updated by user=%s", employee_id, user.name)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    user: UserInfo = Depends(require_role("admin")),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    if not session.delete(employee_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    logger.info("Employee %s deleted by user=%s", employee_id, user.name)
