"""Single in-process directory session: logged-in user plus table/form state.

The role is self-asserted and only decides which actions the directory
screen offers. It is not an access-control mechanism.
"""

from __future__ import annotations

import logging
from datetime import datetime

from app.core.config import Settings
from app.models.auth import ROLE_LABELS, UserInfo
from app.models.employee import Employee, EmployeeFields
from app.models.view import (
    Capabilities,
    DirectoryView,
    EmployeeRow,
    FilterUpdate,
    FormState,
    HeaderInfo,
    QueryState,
    SortField,
)
from app.services import query_pipeline
from app.services.csv_codec import csv_codec
from app.services.employee_store import EmployeeStore, employee_store

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_MAX_IMPORT_SIZE = 10 * 1024 * 1024


def format_hire_date(value: str) -> str:
    """Render an ISO date as YYYY/MM/DD; anything unparseable is shown as is."""
    if not value:
        return ""
    try:
        parsed = datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return value
    return parsed.strftime("%Y/%m/%d")


class DirectorySession:
    def __init__(self, store: EmployeeStore) -> None:
        self.store = store
        self.user: UserInfo | None = None
        self.query = QueryState()
        self.form = FormState()
        self.page_size: int = DEFAULT_PAGE_SIZE
        self.max_import_size: int = DEFAULT_MAX_IMPORT_SIZE

    async def initialize(self, settings: Settings) -> None:
        self.page_size = settings.PAGE_SIZE
        self.max_import_size = settings.MAX_IMPORT_SIZE

    async def close(self) -> None:
        self.logout()

    # -- user ---------------------------------------------------------------

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, name: str, role: str) -> UserInfo:
        self.user = UserInfo(name=name, role=role)
        logger.info("Login name=%s role=%s", name, role)
        return self.user

    def logout(self) -> None:
        if self.user:
            logger.info("Logout name=%s", self.user.name)
        self.user = None
        # Sort field and direction survive a logout.
        self.query = self.query.model_copy(update={"search": "", "department": "", "status": "", "page": 1})
        self.form = FormState()

    def change_role(self, role: str) -> UserInfo | None:
        if not self.user:
            return None
        self.user = self.user.model_copy(update={"role": role})
        logger.info("Role switched name=%s role=%s", self.user.name, role)
        return self.user

    # -- query state --------------------------------------------------------

    def set_filters(self, update: FilterUpdate) -> QueryState:
        changes = update.model_dump(exclude_none=True)
        self.query = self.query.model_copy(update=changes)
        return self.query

    def toggle_sort(self, field: SortField) -> QueryState:
        sort_field, sort_direction = query_pipeline.toggle_sort(
            self.query.sort_field,
            self.query.sort_direction,
            field,
        )
        self.query = self.query.model_copy(
            update={"sort_field": sort_field, "sort_direction": sort_direction, "page": 1}
        )
        return self.query

    def set_page(self, page: int) -> QueryState:
        self.query = self.query.model_copy(update={"page": page})
        return self.query

    def results(self) -> list[Employee]:
        return query_pipeline.run_query(
            self.store.get_all(),
            search=self.query.search,
            department=self.query.department,
            status=self.query.status,
            sort_field=self.query.sort_field,
            sort_direction=self.query.sort_direction,
        )

    # -- form ---------------------------------------------------------------

    def open_create_form(self) -> FormState:
        self.form = FormState(is_open=True, mode="create")
        return self.form

    def open_edit_form(self, employee_id: str) -> FormState | None:
        employee = self.store.get(employee_id)
        if not employee:
            return None
        self.form = FormState(is_open=True, mode="edit", editing_id=employee.id, values=employee.fields())
        return self.form

    def cancel_form(self) -> FormState:
        self.form = FormState()
        return self.form

    def submit_form(self, fields: EmployeeFields) -> Employee | None:
        editing_id = self.form.editing_id
        if editing_id:
            saved = self.store.update(editing_id, fields)
        else:
            saved = self.store.add(fields)
        self.form = FormState()
        return saved

    # -- records ------------------------------------------------------------

    def delete(self, employee_id: str) -> bool:
        deleted = self.store.delete(employee_id)
        if deleted and self.form.editing_id == employee_id:
            self.form = FormState()
        return deleted

    def import_csv(self, file_bytes: bytes | None) -> list[Employee]:
        employees = csv_codec.read(file_bytes, self.max_import_size)
        return self.store.bulk_import(employees)

    def export_csv(self) -> tuple[str, str]:
        """Return (filename, content) for the filtered and sorted list."""
        return csv_codec.export_filename(), csv_codec.encode(self.results())

    # -- rendering ----------------------------------------------------------

    def capabilities(self) -> Capabilities:
        is_admin = bool(self.user and self.user.is_admin)
        return Capabilities(
            can_create=is_admin,
            can_edit=is_admin,
            can_delete=is_admin,
            can_import=is_admin,
            can_export=self.user is not None,
        )

    def render(self) -> DirectoryView:
        if not self.user:
            raise RuntimeError("DirectorySession has no logged-in user")

        results = self.results()
        page = query_pipeline.paginate(results, self.query.page, self.page_size)
        rows = [EmployeeRow(**e.model_dump(), hire_date_display=format_hire_date(e.hire_date)) for e in page.items]

        return DirectoryView(
            header=HeaderInfo(user=self.user, role_label=ROLE_LABELS.get(self.user.role, self.user.role)),
            query=self.query,
            rows=rows,
            total_items=page.total_items,
            total_pages=page.total_pages,
            page_size=page.page_size,
            form=self.form,
            capabilities=self.capabilities(),
        )


directory_session = DirectorySession(employee_store)
