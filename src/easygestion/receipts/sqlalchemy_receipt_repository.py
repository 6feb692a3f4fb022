from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy import func

from ..common.money import quantize
from ..database.extensions import db, transaction
from ..database.tables import ReceiptRow
from .model import Receipt
from .repository import ReceiptRepository

_FIELDS = {"client_name", "amount", "description", "date"}


def receipt_from_row(row: ReceiptRow) -> Receipt:
    return Receipt(
        receipt_id=int(row.id),
        employee_id=int(row.employee_id),
        client_name=row.client_name,
        amount=Decimal(row.amount),
        date=row.date,
        description=row.description,
    )


class SQLAlchemyReceiptRepository(ReceiptRepository):
    def get_by_id(self, receipt_id: int) -> Optional[Receipt]:
        row = db.session.get(ReceiptRow, receipt_id)
        return receipt_from_row(row) if row else None

    def list_for_employee(self, employee_id: int) -> Sequence[Receipt]:
        stmt = (
            db.select(ReceiptRow)
            .where(ReceiptRow.employee_id == employee_id)
            .order_by(ReceiptRow.date.desc(), ReceiptRow.id.desc())
        )
        return [receipt_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(
        self,
        *,
        employee_id: int,
        client_name: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
    ) -> Receipt:
        with transaction() as session:
            row = ReceiptRow(
                employee_id=employee_id,
                client_name=client_name,
                amount=amount,
                date=date,
                description=description,
            )
            session.add(row)
        return receipt_from_row(row)

    def update(self, receipt_id: int, **fields) -> Optional[Receipt]:
        unknown = set(fields) - _FIELDS
        if unknown:
            raise ValueError(f"Unsupported receipt fields: {sorted(unknown)}")

        row = db.session.get(ReceiptRow, receipt_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return receipt_from_row(row)

    def delete_by_id(self, receipt_id: int) -> bool:
        row = db.session.get(ReceiptRow, receipt_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True

    def sum_for_employee(self, employee_id: int, start: datetime, end: datetime) -> Decimal:
        stmt = db.select(func.coalesce(func.sum(ReceiptRow.amount), 0)).where(
            ReceiptRow.employee_id == employee_id,
            ReceiptRow.date >= start,
            ReceiptRow.date < end,
        )
        return quantize(db.session.execute(stmt).scalar_one())
