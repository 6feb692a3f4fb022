from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from sqlalchemy.orm import selectinload

from ..database.extensions import db, transaction
from ..database.tables import SalaryRow
from .model import Salary, SalaryDraft
from .repository import SalaryRepository


def salary_from_row(row: SalaryRow) -> Salary:
    return Salary(
        salary_id=int(row.id),
        employee_id=int(row.employee_id),
        base_salary=Decimal(row.base_salary),
        commission_percentage=Decimal(row.commission_percentage),
        total_salary=Decimal(row.total_salary),
        period_start=row.period_start,
        period_end=row.period_end,
        employee_name=row.employee.name if row.employee else None,
    )


class SQLAlchemySalaryRepository(SalaryRepository):
    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        stmt = (
            db.select(SalaryRow)
            .options(selectinload(SalaryRow.employee))
            .where(SalaryRow.employee_id == employee_id)
            .order_by(SalaryRow.period_end.desc(), SalaryRow.id.desc())
        )
        return [salary_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def list_for_period(self, period_start: date, period_end: date) -> Sequence[Salary]:
        stmt = (
            db.select(SalaryRow)
            .options(selectinload(SalaryRow.employee))
            .where(SalaryRow.period_start == period_start, SalaryRow.period_end == period_end)
            .order_by(SalaryRow.employee_id)
        )
        return [salary_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def replace_period(self, period_start: date, period_end: date, drafts: Sequence[SalaryDraft]) -> list[Salary]:
        rows: list[SalaryRow] = []
        with transaction() as session:
            for draft in drafts:
                session.execute(
                    db.delete(SalaryRow).where(
                        SalaryRow.employee_id == draft.employee_id,
                        SalaryRow.period_start == period_start,
                        SalaryRow.period_end == period_end,
                    )
                )
                row = SalaryRow(
                    employee_id=draft.employee_id,
                    base_salary=draft.base_salary,
                    commission_percentage=draft.commission_percentage,
                    total_salary=draft.total_salary,
                    period_start=period_start,
                    period_end=period_end,
                )
                session.add(row)
                rows.append(row)
        return [salary_from_row(r) for r in rows]
