from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Goal


class GoalRepository(Protocol):
    def get_by_id(self, goal_id: int) -> Optional[Goal]:
        raise NotImplementedError

    def get_for_month(self, employee_id: int, month: int, year: int) -> Optional[Goal]:
        raise NotImplementedError

    def list_for_employee(
        self, employee_id: int, *, month: Optional[int] = None, year: Optional[int] = None
    ) -> Sequence[Goal]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        monthly_objective: Decimal,
        daily_objective: Decimal,
        month: int,
        year: int,
        remaining_amount: Decimal,
    ) -> Goal:
        raise NotImplementedError

    def update(self, goal_id: int, **fields) -> Optional[Goal]:
        raise NotImplementedError

    def delete_by_id(self, goal_id: int) -> bool:
        raise NotImplementedError
