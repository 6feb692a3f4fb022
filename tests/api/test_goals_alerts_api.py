from __future__ import annotations

from easygestion.core.enums import Role


def test_goal_lifecycle_creates_alert_on_completion(client, admin, employee):
    h = admin["headers"]
    res = client.post(
        "/api/v1/goals",
        json={"employeeId": employee["employee_id"], "monthlyObjective": 100, "dailyObjective": 5, "month": 3, "year": 2025},
        headers=h,
    )
    assert res.status_code == 201
    goal = res.get_json()["goal"]

    dup = client.post(
        "/api/v1/goals",
        json={"employeeId": employee["employee_id"], "monthlyObjective": 1, "dailyObjective": 1, "month": 3, "year": 2025},
        headers=h,
    )
    assert dup.status_code == 409

    client.post(
        f"/api/v1/receipts/employee/{employee['employee_id']}",
        json={"clientName": "A", "amount": 120, "date": "2025-03-04"},
        headers=employee["headers"],
    )
    res = client.post(f"/api/v1/goals/{goal['id']}/refresh", headers=employee["headers"])
    assert res.status_code == 200
    assert res.get_json()["goal"]["isCompleted"] is True
    assert res.get_json()["goal"]["remainingAmount"] == 0.0

    alerts = client.get(f"/api/v1/alerts/employee/{employee['employee_id']}?unread=true", headers=employee["headers"]).get_json()["alerts"]
    assert [a["type"] for a in alerts] == ["monthly"]

    listed = client.get(f"/api/v1/goals/employee/{employee['employee_id']}?month=3&year=2025", headers=employee["headers"])
    assert len(listed.get_json()["goals"]) == 1


def test_alerts_read_and_delete(client, admin, employee, make_account):
    res = client.post(
        "/api/v1/alerts",
        json={"employeeId": employee["employee_id"], "message": "Slow day", "type": "warning"},
        headers=admin["headers"],
    )
    assert res.status_code == 201
    alert = res.get_json()["alert"]

    assert client.put(f"/api/v1/alerts/{alert['id']}/read", headers=employee["headers"]).get_json()["alert"]["isRead"] is True
    unread = client.get(f"/api/v1/alerts/employee/{employee['employee_id']}?unread=1", headers=employee["headers"]).get_json()["alerts"]
    assert unread == []

    assert client.delete(f"/api/v1/alerts/{alert['id']}", headers=employee["headers"]).status_code == 403
    assert client.delete(f"/api/v1/alerts/{alert['id']}", headers=admin["headers"]).status_code == 200


def test_alert_type_is_validated(client, admin, employee):
    res = client.post(
        "/api/v1/alerts",
        json={"employeeId": employee["employee_id"], "message": "x", "type": "urgent"},
        headers=admin["headers"],
    )
    assert res.status_code == 400


def test_colleague_cannot_read_alerts(client, make_account, employee):
    other = make_account(Role.USER)
    res = client.get(f"/api/v1/alerts/employee/{other['employee_id']}", headers=employee["headers"])
    assert res.status_code == 403


def test_lowering_objective_updates_remaining_amount(client, admin, employee):
    h = admin["headers"]
    goal = client.post(
        "/api/v1/goals",
        json={"employeeId": employee["employee_id"], "monthlyObjective": 100, "dailyObjective": 5, "month": 4, "year": 2025},
        headers=h,
    ).get_json()["goal"]

    res = client.put(f"/api/v1/goals/{goal['id']}", json={"monthlyObjective": 40}, headers=h)

    assert res.status_code == 200
    body = res.get_json()["goal"]
    assert body["monthlyObjective"] == 40.0
    assert body["remainingAmount"] == 40.0
    assert body["isCompleted"] is False
