from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest

from easygestion.core.enums import AlertType, Role
from easygestion.core.exceptions import AuthorizationError, ConflictError
from easygestion.goals.model import Goal
from easygestion.goals.service import GoalService
from easygestion.security.principal import Principal
from easygestion.users.model import Employee


class FakeEmployeesRepo:
    def get_by_id(self, employee_id):
        if int(employee_id) not in (1, 2):
            return None
        return Employee(
            employee_id=int(employee_id),
            user_id=int(employee_id) + 10,
            name="E",
            position="Barber",
            hire_date=date(2024, 1, 1),
            deduction_percentage=Decimal("0"),
        )


class FakeGoalsRepo:
    def __init__(self):
        self._rows: dict[int, Goal] = {}
        self._next_id = 1

    def get_by_id(self, goal_id):
        return self._rows.get(int(goal_id))

    def get_for_month(self, employee_id, month, year):
        return next(
            (g for g in self._rows.values() if (g.employee_id, g.month, g.year) == (employee_id, month, year)), None
        )

    def list_for_employee(self, employee_id, *, month=None, year=None):
        return [g for g in self._rows.values() if g.employee_id == employee_id]

    def create(self, **fields):
        goal = Goal(goal_id=self._next_id, **fields)
        self._rows[goal.goal_id] = goal
        self._next_id += 1
        return goal

    def update(self, goal_id, **fields):
        self._rows[goal_id] = replace(self._rows[goal_id], **fields)
        return self._rows[goal_id]

    def delete_by_id(self, goal_id):
        return self._rows.pop(int(goal_id), None) is not None


class FakeRevenueRepo:
    def __init__(self, amount: str):
        self.amount = Decimal(amount)
        self.ranges = []

    def sum_for_employee(self, employee_id, start, end):
        self.ranges.append((start, end))
        return self.amount


class FakeAlerts:
    def __init__(self):
        self.sent = []

    def notify(self, employee_id, message, alert_type):
        self.sent.append((employee_id, alert_type))


ADMIN = Principal(user_id=1, role=Role.ADMIN)
OWNER = Principal(user_id=11, role=Role.USER, employee_id=1)
OTHER = Principal(user_id=12, role=Role.USER, employee_id=2)


def _service(sales="0", receipts="0"):
    alerts = FakeAlerts()
    sales_repo = FakeRevenueRepo(sales)
    service = GoalService(FakeGoalsRepo(), FakeEmployeesRepo(), sales_repo, FakeRevenueRepo(receipts), alerts)
    return service, alerts, sales_repo


def _goal_data(**extra):
    data = {"employeeId": 1, "monthlyObjective": "1000", "dailyObjective": "50", "month": 3, "year": 2025}
    data.update(extra)
    return data


def test_new_goal_starts_with_full_remaining_amount():
    service, _, _ = _service()
    goal = service.create(_goal_data())
    assert goal.remaining_amount == Decimal("1000.00")
    assert goal.is_completed is False


def test_duplicate_goal_for_month_is_conflict():
    service, _, _ = _service()
    service.create(_goal_data())
    with pytest.raises(ConflictError):
        service.create(_goal_data(monthlyObjective="10"))


def test_refresh_tracks_month_revenue():
    service, alerts, sales_repo = _service(sales="300", receipts="200")
    goal = service.create(_goal_data())

    refreshed = service.refresh(OWNER, goal.goal_id)

    assert refreshed.remaining_amount == Decimal("500.00")
    assert refreshed.is_completed is False
    assert alerts.sent == []
    assert sales_repo.ranges == [(datetime(2025, 3, 1), datetime(2025, 4, 1))]


def test_completion_creates_a_single_monthly_alert():
    service, alerts, _ = _service(sales="900", receipts="250")
    goal = service.create(_goal_data())

    first = service.refresh(OWNER, goal.goal_id)
    service.refresh(ADMIN, goal.goal_id)

    assert first.remaining_amount == Decimal("0.00")
    assert first.is_completed is True
    assert alerts.sent == [(1, AlertType.MONTHLY)]


def test_other_employee_cannot_refresh():
    service, _, _ = _service()
    goal = service.create(_goal_data())
    with pytest.raises(AuthorizationError):
        service.refresh(OTHER, goal.goal_id)


def test_changing_objective_recomputes_progress():
    service, alerts, _ = _service(sales="50", receipts="20")
    goal = service.create(_goal_data(monthlyObjective="100"))

    lowered = service.update(goal.goal_id, {"monthlyObjective": "40"})
    assert lowered.monthly_objective == Decimal("40.00")
    assert lowered.remaining_amount == Decimal("0.00")
    assert lowered.is_completed is True
    assert alerts.sent == [(1, AlertType.MONTHLY)]

    raised = service.update(goal.goal_id, {"monthlyObjective": "200"})
    assert raised.remaining_amount == Decimal("130.00")
    assert raised.is_completed is False


def test_daily_objective_change_keeps_progress():
    service, alerts, sales_repo = _service(sales="50")
    goal = service.create(_goal_data(monthlyObjective="100"))

    updated = service.update(goal.goal_id, {"dailyObjective": "5"})

    assert updated.daily_objective == Decimal("5.00")
    assert updated.remaining_amount == Decimal("100.00")
    assert sales_repo.ranges == []
    assert alerts.sent == []
