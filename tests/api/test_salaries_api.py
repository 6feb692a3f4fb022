from __future__ import annotations

import io
from datetime import date
from decimal import Decimal

import pytest
from openpyxl import load_workbook
from sqlalchemy.exc import IntegrityError

from easygestion.payroll.model import SalaryDraft


def _record_activity(client, admin, employee):
    package = client.post("/api/v1/packages", json={"name": "Barbe", "price": 7}, headers=admin["headers"]).get_json()["package"]
    sales = f"/api/v1/sales/employee/{employee['employee_id']}"
    receipts = f"/api/v1/receipts/employee/{employee['employee_id']}"
    client.post(sales, json={"packageId": package["id"], "clientName": "A", "date": "2025-01-31T20:15:00"}, headers=admin["headers"])
    client.post(receipts, json={"clientName": "B", "amount": 93, "date": "2025-01-02"}, headers=admin["headers"])
    client.post(receipts, json={"clientName": "C", "amount": 1000, "date": "2025-02-01"}, headers=admin["headers"])


def test_generate_salaries_for_inclusive_period(client, admin, employee):
    _record_activity(client, admin, employee)

    res = client.post(
        "/api/v1/salaries/generate", json={"periodStart": "2025-01-01", "periodEnd": "2025-01-31"}, headers=admin["headers"]
    )
    assert res.status_code == 201
    salary = next(s for s in res.get_json()["salaries"] if s["employeeId"] == employee["employee_id"])
    assert salary["baseSalary"] == 100.0
    assert salary["commissionPercentage"] == 10.0
    assert salary["totalSalary"] == 90.0

    listed = client.get(f"/api/v1/salaries/employee/{employee['employee_id']}", headers=employee["headers"]).get_json()["salaries"]
    assert len(listed) == 1


def test_regeneration_replaces_rows(client, admin, employee):
    payload = {"periodStart": "2025-01-01", "periodEnd": "2025-01-31"}
    client.post("/api/v1/salaries/generate", json=payload, headers=admin["headers"])
    client.post("/api/v1/salaries/generate", json=payload, headers=admin["headers"])

    listed = client.get(f"/api/v1/salaries/employee/{employee['employee_id']}", headers=admin["headers"]).get_json()["salaries"]
    assert len(listed) == 1


def test_generate_requires_admin_and_valid_period(client, admin, employee):
    payload = {"periodStart": "2025-01-31", "periodEnd": "2025-01-01"}
    assert client.post("/api/v1/salaries/generate", json=payload, headers=employee["headers"]).status_code == 403
    assert client.post("/api/v1/salaries/generate", json=payload, headers=admin["headers"]).status_code == 400


def test_export_salaries_workbook(client, admin, employee):
    _record_activity(client, admin, employee)
    client.post(
        "/api/v1/salaries/generate", json={"periodStart": "2025-01-01", "periodEnd": "2025-01-31"}, headers=admin["headers"]
    )

    res = client.get(
        "/api/v1/salaries/export?periodStart=2025-01-01&periodEnd=2025-01-31", headers=admin["headers"]
    )
    assert res.status_code == 200
    assert res.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    sheet = load_workbook(io.BytesIO(res.data))["Salaries"]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0][0] == "Employee ID"
    assert rows[1][6] == 90.0


def test_replace_period_is_all_or_nothing(app, container, make_account):
    first, second = make_account(), make_account()
    start, end = date(2025, 1, 1), date(2025, 1, 31)

    def draft(employee_id, total):
        return SalaryDraft(employee_id=employee_id, base_salary=Decimal("10"), commission_percentage=Decimal("0"), total_salary=total)

    with app.app_context():
        container.salaries_repo.replace_period(start, end, [draft(first["employee_id"], Decimal("10"))])

        with pytest.raises(IntegrityError):
            container.salaries_repo.replace_period(
                start, end, [draft(first["employee_id"], Decimal("99")), draft(second["employee_id"], None)]
            )

        kept = container.salaries_repo.list_for_period(start, end)
        assert [(s.employee_id, s.total_salary) for s in kept] == [(first["employee_id"], Decimal("10.00"))]
