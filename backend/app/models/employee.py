"""Employee record models for the in-memory directory."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEPARTMENTS: tuple[str, ...] = (
    "Sales",
    "Development",
    "General Affairs",
    "Marketing",
    "Human Resources",
    "Accounting",
    "Planning",
    "Quality Assurance",
)

POSITIONS: tuple[str, ...] = (
    "Director",
    "Section Manager",
    "Chief",
    "Supervisor",
    "Team Leader",
    "Manager",
    "Engineer",
    "Specialist",
    "Assistant",
    "Staff",
)

EMPLOYMENT_TYPES: tuple[str, ...] = ("full-time", "contract", "part-time", "temporary")

STATUSES: tuple[str, ...] = ("active", "retired")

DEFAULT_EMPLOYMENT_TYPE = "full-time"
DEFAULT_STATUS = "active"


def _choice_pattern(values: tuple[str, ...]) -> str:
    return "^(" + "|".join(values) + ")$"


class EmployeeFields(BaseModel):
    """All employee attributes except the identifier.

    Values are not checked against the enumerations here: records decoded from
    CSV keep whatever the file contained.
    """

    name: str = ""
    department: str = ""
    position: str = ""
    email: str = ""
    phone: str = ""
    employment_type: str = DEFAULT_EMPLOYMENT_TYPE
    hire_date: str = ""
    status: str = DEFAULT_STATUS


class EmployeeInput(EmployeeFields):
    """Create/update payload submitted from the employee form."""

    name: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., pattern=_choice_pattern(DEPARTMENTS))
    position: str = Field(..., pattern=_choice_pattern(POSITIONS))
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(default="", max_length=50)
    employment_type: str = Field(default=DEFAULT_EMPLOYMENT_TYPE, pattern=_choice_pattern(EMPLOYMENT_TYPES))
    hire_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    status: str = Field(default=DEFAULT_STATUS, pattern=_choice_pattern(STATUSES))


class Employee(EmployeeFields):
    """A stored employee record."""

    id: str

    def fields(self) -> EmployeeFields:
        return EmployeeFields(**self.model_dump(exclude={"id"}))
