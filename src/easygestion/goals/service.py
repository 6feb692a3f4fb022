from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..alerts.service import AlertService
from ..common.datetime_utils import month_bounds
from ..common.money import quantize
from ..common.validators import parse_int_in_range, parse_money
from ..core.enums import AlertType
from ..core.exceptions import ConflictError, NotFoundError
from ..receipts.repository import ReceiptRepository
from ..sales.repository import SaleRepository
from ..security.principal import Principal
from ..users.repository import EmployeeRepository
from .model import Goal
from .repository import GoalRepository

logger = logging.getLogger(__name__)


class GoalService:
    def __init__(
        self,
        goals: GoalRepository,
        employees: EmployeeRepository,
        sales: SaleRepository,
        receipts: ReceiptRepository,
        alerts: AlertService,
    ):
        self._goals = goals
        self._employees = employees
        self._sales = sales
        self._receipts = receipts
        self._alerts = alerts

    def _get(self, goal_id: int) -> Goal:
        goal = self._goals.get_by_id(int(goal_id))
        if not goal:
            raise NotFoundError("Goal not found")
        return goal

    def list_for_employee(
        self, principal: Principal, employee_id: int, *, month: Optional[int] = None, year: Optional[int] = None
    ) -> Sequence[Goal]:
        principal.ensure_can_access_employee(employee_id)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        return self._goals.list_for_employee(int(employee_id), month=month, year=year)

    def create(self, data: Mapping[str, Any]) -> Goal:
        employee_id = parse_int_in_range(data.get("employeeId"), "employeeId", min_value=1)
        monthly = parse_money(data.get("monthlyObjective"), "monthlyObjective")
        daily = parse_money(data.get("dailyObjective"), "dailyObjective")
        month = parse_int_in_range(data.get("month"), "month", min_value=1, max_value=12)
        year = parse_int_in_range(data.get("year"), "year", min_value=1970, max_value=9999)

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if self._goals.get_for_month(employee_id, month, year):
            raise ConflictError(f"A goal already exists for {month:02d}/{year}")

        return self._goals.create(
            employee_id=employee_id,
            monthly_objective=monthly,
            daily_objective=daily,
            month=month,
            year=year,
            remaining_amount=monthly,
        )

    def update(self, goal_id: int, data: Mapping[str, Any]) -> Goal:
        goal = self._get(goal_id)

        fields: dict[str, Any] = {}
        if data.get("monthlyObjective") is not None:
            fields["monthly_objective"] = parse_money(data["monthlyObjective"], "monthlyObjective")
        if data.get("dailyObjective") is not None:
            fields["daily_objective"] = parse_money(data["dailyObjective"], "dailyObjective")
        if not fields:
            return goal
        if "monthly_objective" in fields:
            return self._apply_progress(goal, **fields)

        updated = self._goals.update(goal.goal_id, **fields)
        if not updated:
            raise NotFoundError("Goal not found")
        return updated

    def delete(self, goal_id: int) -> None:
        if not self._goals.delete_by_id(int(goal_id)):
            raise NotFoundError("Goal not found")

    def refresh(self, principal: Principal, goal_id: int) -> Goal:
        """Recompute progress from the month's sales and receipts."""
        goal = self._get(goal_id)
        principal.ensure_can_access_employee(goal.employee_id)
        return self._apply_progress(goal)

    def _apply_progress(self, goal: Goal, **fields: Any) -> Goal:
        objective = fields.get("monthly_objective", goal.monthly_objective)
        start, end = month_bounds(goal.year, goal.month)
        revenue = self._sales.sum_for_employee(goal.employee_id, start, end) + self._receipts.sum_for_employee(
            goal.employee_id, start, end
        )
        remaining = max(quantize(objective - revenue), Decimal("0.00"))
        completed = remaining == 0

        updated = self._goals.update(goal.goal_id, remaining_amount=remaining, is_completed=completed, **fields)
        if not updated:
            raise NotFoundError("Goal not found")

        if completed and not goal.is_completed:
            self._alerts.notify(
                goal.employee_id,
                f"Monthly goal of {quantize(objective)} reached for {goal.month:02d}/{goal.year}",
                AlertType.MONTHLY,
            )
            logger.info("Goal %s completed for employee %s", goal.goal_id, goal.employee_id)
        return updated
