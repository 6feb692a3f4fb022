from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy.orm import selectinload

from ..database.extensions import db, transaction
from ..database.tables import ExpenseRow
from .model import Expense
from .repository import ExpenseRepository

_FIELDS = {"category", "amount", "description", "date"}


def expense_from_row(row: ExpenseRow) -> Expense:
    return Expense(
        expense_id=int(row.id),
        category=row.category,
        amount=Decimal(row.amount),
        date=row.date,
        description=row.description,
        created_by=int(row.created_by) if row.created_by is not None else None,
        creator_username=row.creator.username if row.creator else None,
    )


class SQLAlchemyExpenseRepository(ExpenseRepository):
    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        row = db.session.get(ExpenseRow, expense_id)
        return expense_from_row(row) if row else None

    def list_all(self) -> Sequence[Expense]:
        stmt = (
            db.select(ExpenseRow)
            .options(selectinload(ExpenseRow.creator))
            .order_by(ExpenseRow.date.desc(), ExpenseRow.id.desc())
        )
        return [expense_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(
        self,
        *,
        category: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
        created_by: int,
    ) -> Expense:
        with transaction() as session:
            row = ExpenseRow(
                category=category,
                amount=amount,
                date=date,
                description=description,
                created_by=created_by,
            )
            session.add(row)
        return expense_from_row(row)

    def update(self, expense_id: int, **fields) -> Optional[Expense]:
        unknown = set(fields) - _FIELDS
        if unknown:
            raise ValueError(f"Unsupported expense fields: {sorted(unknown)}")

        row = db.session.get(ExpenseRow, expense_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return expense_from_row(row)

    def delete_by_id(self, expense_id: int) -> bool:
        row = db.session.get(ExpenseRow, expense_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True
