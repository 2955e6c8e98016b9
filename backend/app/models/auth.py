"""Session models for the self-asserted directory login."""

from __future__ import annotations

from pydantic import BaseModel, Field

ROLES: tuple[str, ...] = ("admin", "employee")

ROLE_LABELS: dict[str, str] = {
    "admin": "Administrator",
    "employee": "Employee",
}

ROLE_PATTERN = "^(" + "|".join(ROLES) + ")$"


class LoginRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(..., pattern=ROLE_PATTERN)


class RoleChangeRequest(BaseModel):
    role: str = Field(..., pattern=ROLE_PATTERN)


class UserInfo(BaseModel):
    name: str
    role: str = "employee"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
