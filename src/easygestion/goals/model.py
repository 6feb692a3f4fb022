from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import as_float


@dataclass(frozen=True)
class Goal:
    """Monthly revenue objective of an employee."""

    goal_id: int
    employee_id: int
    monthly_objective: Decimal
    daily_objective: Decimal
    month: int
    year: int
    remaining_amount: Decimal
    is_completed: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.goal_id,
            "employeeId": self.employee_id,
            "monthlyObjective": as_float(self.monthly_objective),
            "dailyObjective": as_float(self.daily_objective),
            "month": self.month,
            "year": self.year,
            "remainingAmount": as_float(self.remaining_amount),
            "isCompleted": self.is_completed,
        }
