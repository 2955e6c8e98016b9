from __future__ import annotations

from app.services.directory_session import directory_session
from app.services.employee_store import employee_store
from tests.conftest import make_fields

FORM_PAYLOAD = {
    "name": "Kenji Watanabe",
    "department": "Quality Assurance",
    "position": "Team Leader",
    "email": "kenji@example.com",
    "phone": "",
    "employment_type": "temporary",
    "hire_date": "2023-06-05",
    "status": "active",
}


def _seed(count: int) -> None:
    for i in range(count):
        employee_store.add(
            make_fields(
                name=f"Employee {i:02d}",
                email=f"e{i}@example.com",
                department="Sales" if i % 2 else "Development",
            )
        )


def test_view_requires_login(client):
    assert client.get("/api/v1/view").status_code == 401


def test_view_renders_first_page(employee_client):
    _seed(23)

    data = employee_client.get("/api/v1/view").json()

    assert len(data["rows"]) == 10
    assert data["total_items"] == 23
    assert data["total_pages"] == 3
    assert data["query"]["page"] == 1
    assert data["header"]["user"]["name"] == "Regular User"
    assert data["header"]["role_label"] == "Employee"
    assert data["rows"][0]["hire_date_display"] == "2020/04/01"


def test_view_capabilities_follow_role(employee_client):
    caps = employee_client.get("/api/v1/view").json()["capabilities"]
    assert caps == {
        "can_create": False,
        "can_edit": False,
        "can_delete": False,
        "can_import": False,
        "can_export": True,
    }

    employee_client.put("/api/v1/session/role", json={"role": "admin"})
    data = employee_client.get("/api/v1/view").json()
    assert data["header"]["role_label"] == "Administrator"
    assert all(data["capabilities"].values())


def test_filters_narrow_rows(employee_client):
    _seed(6)

    data = employee_client.put("/api/v1/view/filters", json={"department": "Sales"}).json()
    assert data["total_items"] == 3
    assert {row["department"] for row in data["rows"]} == {"Sales"}

    data = employee_client.put("/api/v1/view/filters", json={"search": "E5@EXAMPLE"}).json()
    assert [row["name"] for row in data["rows"]] == ["Employee 05"]
    assert data["query"]["department"] == "Sales"


def test_clearing_filter_with_empty_string(employee_client):
    _seed(4)
    employee_client.put("/api/v1/view/filters", json={"department": "Sales"})

    data = employee_client.put("/api/v1/view/filters", json={"department": ""}).json()
    assert data["total_items"] == 4


def test_sort_toggle_flips_direction_and_resets_page(employee_client):
    _seed(15)
    employee_client.put("/api/v1/view/page", json={"page": 2})

    data = employee_client.post("/api/v1/view/sort/name").json()
    assert data["query"]["sort_field"] == "name"
    assert data["query"]["sort_direction"] == "asc"
    assert data["query"]["page"] == 1
    assert data["rows"][0]["name"] == "Employee 00"

    data = employee_client.post("/api/v1/view/sort/name").json()
    assert data["query"]["sort_direction"] == "desc"
    assert data["rows"][0]["name"] == "Employee 14"


def test_sort_unknown_field(employee_client):
    assert employee_client.post("/api/v1/view/sort/salary").status_code == 422


def test_page_out_of_range_renders_empty(employee_client):
    _seed(5)
    data = employee_client.put("/api/v1/view/page", json={"page": 9}).json()

    assert data["rows"] == []
    assert data["query"]["page"] == 9
    assert data["total_pages"] == 1


def test_page_must_be_positive(employee_client):
    assert employee_client.put("/api/v1/view/page", json={"page": 0}).status_code == 422


def test_create_through_form(admin_client):
    form = admin_client.post("/api/v1/view/form").json()
    assert form["is_open"] is True
    assert form["mode"] == "create"

    data = admin_client.post("/api/v1/view/form/submit", json=FORM_PAYLOAD).json()

    assert data["form"]["is_open"] is False
    assert data["total_items"] == 1
    assert data["rows"][0]["name"] == "Kenji Watanabe"


def test_edit_through_form(admin_client):
    existing = employee_store.add(make_fields(name="Before"))

    form = admin_client.post(f"/api/v1/view/form/{existing.id}").json()
    assert form["mode"] == "edit"
    assert form["editing_id"] == existing.id
    assert form["values"]["name"] == "Before"

    admin_client.post("/api/v1/view/form/submit", json=FORM_PAYLOAD)

    assert employee_store.count() == 1
    assert employee_store.get(existing.id).name == "Kenji Watanabe"


def test_edit_form_unknown_employee(admin_client):
    assert admin_client.post("/api/v1/view/form/missing").status_code == 404


def test_submit_without_open_form(admin_client):
    response = admin_client.post("/api/v1/view/form/submit", json=FORM_PAYLOAD)
    assert response.status_code == 409
    assert employee_store.count() == 0


def test_cancel_form(admin_client):
    admin_client.post("/api/v1/view/form")
    form = admin_client.delete("/api/v1/view/form").json()

    assert form["is_open"] is False
    assert directory_session.form.is_open is False


def test_form_is_admin_only(employee_client):
    existing = employee_store.add(make_fields())

    assert employee_client.post("/api/v1/view/form").status_code == 403
    assert employee_client.post(f"/api/v1/view/form/{existing.id}").status_code == 403
    assert employee_client.post("/api/v1/view/form/submit", json=FORM_PAYLOAD).status_code == 403
