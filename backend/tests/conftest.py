from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_current_user
from app.main import app
from app.models.auth import UserInfo
from app.models.employee import Employee, EmployeeFields
from app.models.view import QueryState
from app.services.directory_session import directory_session
from app.services.employee_store import EmployeeStore, employee_store


@pytest.fixture(autouse=True)
def _directory_settings():
    from app.core.config import settings

    original_seed = settings.SEED_SAMPLE_DATA
    settings.SEED_SAMPLE_DATA = False
    employee_store.clear()
    employee_store.initialized = False
    directory_session.logout()
    directory_session.query = QueryState()
    yield
    settings.SEED_SAMPLE_DATA = original_seed
    employee_store.clear()
    employee_store.initialized = False
    directory_session.logout()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_fields(**overrides: str) -> EmployeeFields:
    data = {
        "name": "Taro Yamada",
        "department": "Sales",
        "position": "Manager",
        "email": "taro@example.com",
        "phone": "090-1111-2222",
        "employment_type": "full-time",
        "hire_date": "2020-04-01",
        "status": "active",
    }
    data.update(overrides)
    return EmployeeFields(**data)


def make_employee(employee_id: str, **overrides: str) -> Employee:
    return Employee(id=employee_id, **make_fields(**overrides).model_dump())


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def mock_user_admin():
    return UserInfo(name="Admin User", role="admin")


@pytest.fixture
def mock_user_employee():
    return UserInfo(name="Regular User", role="employee")


@pytest.fixture
def admin_client(client):
    directory_session.login("Admin User", "admin")
    return client


@pytest.fixture
def employee_client(client):
    directory_session.login("Regular User", "employee")
    return client


@pytest.fixture
def overridden_admin_client(mock_user_admin):
    app.dependency_overrides[get_current_user] = lambda: mock_user_admin
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def overridden_employee_client(mock_user_employee):
    app.dependency_overrides[get_current_user] = lambda: mock_user_employee
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
