"""In-memory employee record store."""

from __future__ import annotations

import logging
import uuid

from app.core.config import Settings
from app.models.employee import Employee, EmployeeFields

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES: list[dict[str, str]] = [
    {
        "name": "Taro Yamada",
        "department": "Sales",
        "position": "Director",
        "email": "taro.yamada@example.com",
        "phone": "090-1234-5678",
        "employment_type": "full-time",
        "hire_date": "2015-04-01",
        "status": "active",
    },
    {
        "name": "Hanako Sato",
        "department": "Development",
        "position": "Engineer",
        "email": "hanako.sato@example.com",
        "phone": "080-2345-6789",
        "employment_type": "full-time",
        "hire_date": "2019-10-01",
        "status": "active",
    },
    {
        "name": "Ichiro Suzuki",
        "department": "General Affairs",
        "position": "Section Manager",
        "email": "ichiro.suzuki@example.com",
        "phone": "070-3456-7890",
        "employment_type": "contract",
        "hire_date": "2012-07-15",
        "status": "retired",
    },
    {
        "name": "Yuki Tanaka",
        "department": "Marketing",
        "position": "Specialist",
        "email": "yuki.tanaka@example.com",
        "phone": "090-4567-8901",
        "employment_type": "part-time",
        "hire_date": "2021-01-12",
        "status": "active",
    },
    {
        "name": "Kenji Watanabe",
        "department": "Quality Assurance",
        "position": "Team Leader",
        "email": "kenji.watanabe@example.com",
        "phone": "080-5678-9012",
        "employment_type": "temporary",
        "hire_date": "2023-06-05",
        "status": "active",
    },
]


def _new_id() -> str:
    return uuid.uuid4().hex


class EmployeeStore:
    def __init__(self) -> None:
        self._employees: list[Employee] = []
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if settings.SEED_SAMPLE_DATA and not self._employees:
            for raw in SAMPLE_EMPLOYEES:
                self.add(EmployeeFields(**raw))

        self.initialized = True
        logger.info("EmployeeStore initialized (records=%d)", len(self._employees))

    async def close(self) -> None:
        self.clear()
        self.initialized = False

    def _ids(self) -> set[str]:
        return {employee.id for employee in self._employees}

    def _index_of(self, employee_id: str) -> int | None:
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return index
        return None

    def get_all(self) -> list[Employee]:
        return list(self._employees)

    def count(self) -> int:
        return len(self._employees)

    def get(self, employee_id: str) -> Employee | None:
        index = self._index_of(employee_id)
        if index is None:
            return None
        return self._employees[index]

    def add(self, fields: EmployeeFields) -> Employee:
        existing = self._ids()
        employee_id = _new_id()
        while employee_id in existing:
            employee_id = _new_id()

        employee = Employee(id=employee_id, **fields.model_dump(exclude={"id"}))
        self._employees.append(employee)
        return employee

    def update(self, employee_id: str, fields: EmployeeFields) -> Employee | None:
        index = self._index_of(employee_id)
        if index is None:
            logger.warning("Update skipped, employee %s not found", employee_id)
            return None

        updated = Employee(id=employee_id, **fields.model_dump(exclude={"id"}))
        self._employees[index] = updated
        return updated

    def delete(self, employee_id: str) -> bool:
        index = self._index_of(employee_id)
        if index is None:
            logger.warning("Delete skipped, employee %s not found", employee_id)
            return False

        del self._employees[index]
        return True

    def bulk_import(self, employees: list[Employee]) -> list[Employee]:
        """Append records after the existing ones.

        Identifiers from the input are kept unless empty or already taken,
        either by the store or by an earlier record of the same batch.
        """
        taken = self._ids()
        imported: list[Employee] = []

        for employee in employees:
            employee_id = employee.id
            if not employee_id or employee_id in taken:
                employee_id = _new_id()
                while employee_id in taken:
                    employee_id = _new_id()
            taken.add(employee_id)

            stored = employee.model_copy(update={"id": employee_id})
            self._employees.append(stored)
            imported.append(stored)

        logger.info("Bulk import appended %d employees (total=%d)", len(imported), len(self._employees))
        return imported

    def clear(self) -> None:
        self._employees.clear()


employee_store = EmployeeStore()
