from __future__ import annotations

import io
import os

from sqlalchemy import func, select

from easygestion.database.extensions import db
from easygestion.database.tables import AlertRow, EmployeeRow, GoalRow, ReceiptRow, SalaryRow, SaleRow, UserRow

NEW_USER = {
    "username": "newbie",
    "email": "newbie@example.com",
    "password": "Str0ng!Passw0rd#1",
    "name": "New Bie",
    "position": "Barber",
    "hireDate": "2025-01-15",
    "deductionPercentage": "15",
}


def test_admin_creates_user_with_json(client, admin):
    res = client.post("/api/v1/users", json=NEW_USER, headers=admin["headers"])

    assert res.status_code == 201
    user = res.get_json()["user"]
    assert user["role"] == "user"
    assert user["employee"]["deductionPercentage"] == 15.0

    listed = client.get("/api/v1/users", headers=admin["headers"]).get_json()["users"]
    assert "newbie" in [u["username"] for u in listed]


def test_duplicate_email_returns_409(client, admin):
    client.post("/api/v1/users", json=NEW_USER, headers=admin["headers"])
    res = client.post("/api/v1/users", json=dict(NEW_USER, username="other"), headers=admin["headers"])
    assert res.status_code == 409


def test_validation_errors_are_listed(client, admin):
    res = client.post("/api/v1/users", json=dict(NEW_USER, password="short"), headers=admin["headers"])
    assert res.status_code == 400
    assert res.get_json()["errors"][0]["field"] == "password"


def test_multipart_upload_stores_documents(app, client, admin):
    data = dict(NEW_USER)
    data["contract"] = (io.BytesIO(b"%PDF-1.4 contract"), "my contract.pdf")
    res = client.post("/api/v1/users", data=data, headers=admin["headers"], content_type="multipart/form-data")

    assert res.status_code == 201
    stored = res.get_json()["user"]["employee"]["contract"]
    assert stored.startswith("contract_") and stored.endswith("_my_contract.pdf")

    download = client.get(f"/uploads/{stored}", headers=admin["headers"])
    assert download.status_code == 200
    assert download.data == b"%PDF-1.4 contract"


def test_oversized_document_is_rejected(app, client, admin):
    limit = app.config["MAX_UPLOAD_FILE_SIZE"]
    data = dict(NEW_USER)
    data["certification"] = (io.BytesIO(b"x" * (limit + 1)), "big.pdf")

    res = client.post("/api/v1/users", data=data, headers=admin["headers"], content_type="multipart/form-data")
    assert res.status_code == 413


def test_regular_user_cannot_manage_users(client, employee):
    res = client.get("/api/v1/users", headers=employee["headers"])
    assert res.status_code == 403
    assert res.get_json() == {"error": "Insufficient permissions"}


def test_deduction_percentage_route(client, admin, employee):
    res = client.put(
        f"/api/v1/users/{employee['user_id']}/deduction-percentage",
        json={"deductionPercentage": 20},
        headers=admin["headers"],
    )
    assert res.status_code == 200
    assert res.get_json()["employee"]["deductionPercentage"] == 20.0

    res = client.put(
        f"/api/v1/users/{employee['user_id']}/deduction-percentage",
        json={"deductionPercentage": 101},
        headers=admin["headers"],
    )
    assert res.status_code == 400


def test_admin_cannot_promote_to_super_admin(client, admin, employee):
    res = client.put(f"/api/v1/users/{employee['user_id']}", json={"role": "superAdmin"}, headers=admin["headers"])
    assert res.status_code == 403


def test_only_super_admin_deletes_users(client, admin, super_admin, employee):
    res = client.delete(f"/api/v1/users/{employee['user_id']}", headers=admin["headers"])
    assert res.status_code == 403

    res = client.delete(f"/api/v1/users/{employee['user_id']}", headers=super_admin["headers"])
    assert res.status_code == 200

    res = client.put(f"/api/v1/users/{employee['user_id']}", json={"isActive": True}, headers=admin["headers"])
    assert res.status_code == 404


def test_super_admin_cannot_delete_self(client, super_admin):
    res = client.delete(f"/api/v1/users/{super_admin['user_id']}", headers=super_admin["headers"])
    assert res.status_code == 400


def test_admin_cannot_modify_super_admin_account(client, admin, super_admin, login):
    url = f"/api/v1/users/{super_admin['user_id']}"

    for payload in ({"isActive": False}, {"username": "takenover"}, {"email": "mine@example.com"}):
        res = client.put(url, json=payload, headers=admin["headers"])
        assert res.status_code == 403

    login(super_admin["email"])
    res = client.put(url, json={"username": "chief"}, headers=super_admin["headers"])
    assert res.status_code == 200
    assert res.get_json()["user"]["username"] == "chief"


def test_documents_route_replaces_previous_file(client, container, admin, employee):
    url = f"/api/v1/users/{employee['user_id']}/documents"
    folder = container.document_storage.folder

    res = client.put(
        url, data={"contract": (io.BytesIO(b"v1"), "first.pdf")}, headers=admin["headers"], content_type="multipart/form-data"
    )
    assert res.status_code == 200
    first = res.get_json()["user"]["employee"]["contract"]
    assert os.path.isfile(os.path.join(folder, first))

    res = client.put(
        url, data={"contract": (io.BytesIO(b"v2"), "second.pdf")}, headers=admin["headers"], content_type="multipart/form-data"
    )
    second = res.get_json()["user"]["employee"]["contract"]
    assert second.endswith("_second.pdf")
    assert not os.path.exists(os.path.join(folder, first))
    assert client.get(f"/uploads/{second}", headers=employee["headers"]).data == b"v2"

    res = client.put(url, data={}, headers=admin["headers"], content_type="multipart/form-data")
    assert res.status_code == 400


def test_deleting_user_removes_employee_records(app, client, admin, super_admin, employee):
    eid = employee["employee_id"]
    package = client.post("/api/v1/packages", json={"name": "Barbe", "price": 7}, headers=admin["headers"]).get_json()["package"]
    client.post(f"/api/v1/sales/employee/{eid}", json={"packageId": package["id"], "clientName": "A", "date": "2025-03-02"}, headers=employee["headers"])
    client.post(f"/api/v1/receipts/employee/{eid}", json={"clientName": "B", "amount": 30, "date": "2025-03-03"}, headers=employee["headers"])
    client.post("/api/v1/salaries/generate", json={"periodStart": "2025-03-01", "periodEnd": "2025-03-31"}, headers=admin["headers"])
    client.post(
        "/api/v1/goals",
        json={"employeeId": eid, "monthlyObjective": 100, "dailyObjective": 5, "month": 3, "year": 2025},
        headers=admin["headers"],
    )
    client.post("/api/v1/alerts", json={"employeeId": eid, "message": "Hi", "type": "daily"}, headers=admin["headers"])

    with app.app_context():
        for table in (SaleRow, ReceiptRow, SalaryRow, GoalRow, AlertRow):
            assert db.session.scalar(select(func.count()).select_from(table).where(table.employee_id == eid)) == 1

    res = client.delete(f"/api/v1/users/{employee['user_id']}", headers=super_admin["headers"])
    assert res.status_code == 200

    with app.app_context():
        assert db.session.get(UserRow, employee["user_id"]) is None
        assert db.session.get(EmployeeRow, eid) is None
        for table in (SaleRow, ReceiptRow, SalaryRow, GoalRow, AlertRow):
            assert db.session.scalar(select(func.count()).select_from(table).where(table.employee_id == eid)) == 0
