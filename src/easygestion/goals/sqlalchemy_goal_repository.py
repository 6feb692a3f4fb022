from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.extensions import db, transaction
from ..database.tables import GoalRow
from .model import Goal
from .repository import GoalRepository

_FIELDS = {"monthly_objective", "daily_objective", "month", "year", "remaining_amount", "is_completed"}


def goal_from_row(row: GoalRow) -> Goal:
    return Goal(
        goal_id=int(row.id),
        employee_id=int(row.employee_id),
        monthly_objective=Decimal(row.monthly_objective),
        daily_objective=Decimal(row.daily_objective),
        month=int(row.month),
        year=int(row.year),
        remaining_amount=Decimal(row.remaining_amount),
        is_completed=bool(row.is_completed),
    )


class SQLAlchemyGoalRepository(GoalRepository):
    def get_by_id(self, goal_id: int) -> Optional[Goal]:
        row = db.session.get(GoalRow, goal_id)
        return goal_from_row(row) if row else None

    def get_for_month(self, employee_id: int, month: int, year: int) -> Optional[Goal]:
        stmt = db.select(GoalRow).where(
            GoalRow.employee_id == employee_id, GoalRow.month == month, GoalRow.year == year
        )
        row = db.session.execute(stmt).scalar_one_or_none()
        return goal_from_row(row) if row else None

    def list_for_employee(
        self, employee_id: int, *, month: Optional[int] = None, year: Optional[int] = None
    ) -> Sequence[Goal]:
        stmt = db.select(GoalRow).where(GoalRow.employee_id == employee_id)
        if month is not None:
            stmt = stmt.where(GoalRow.month == month)
        if year is not None:
            stmt = stmt.where(GoalRow.year == year)
        stmt = stmt.order_by(GoalRow.year.desc(), GoalRow.month.desc())
        return [goal_from_row(r) for r in db.session.execute(stmt).scalars().all()]

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
        with transaction() as session:
            row = GoalRow(
                employee_id=employee_id,
                monthly_objective=monthly_objective,
                daily_objective=daily_objective,
                month=month,
                year=year,
                remaining_amount=remaining_amount,
                is_completed=False,
            )
            session.add(row)
        return goal_from_row(row)

    def update(self, goal_id: int, **fields) -> Optional[Goal]:
        unknown = set(fields) - _FIELDS
        if unknown:
            raise ValueError(f"Unsupported goal fields: {sorted(unknown)}")

        row = db.session.get(GoalRow, goal_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return goal_from_row(row)

    def delete_by_id(self, goal_id: int) -> bool:
        row = db.session.get(GoalRow, goal_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True
