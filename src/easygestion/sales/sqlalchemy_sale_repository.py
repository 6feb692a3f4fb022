from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import selectinload

from ..common.money import quantize
from ..database.extensions import db, transaction
from ..database.tables import SaleRow
from ..packages.sqlalchemy_package_repository import package_from_row
from .model import Sale
from .repository import SaleRepository

_FIELDS = {"client_name", "amount", "description", "date"}


def sale_from_row(row: SaleRow) -> Sale:
    return Sale(
        sale_id=int(row.id),
        employee_id=int(row.employee_id),
        package_id=int(row.package_id),
        client_name=row.client_name,
        amount=Decimal(row.amount),
        date=row.date,
        description=row.description,
        package=package_from_row(row.package) if row.package else None,
    )


class SQLAlchemySaleRepository(SaleRepository):
    def get_by_id(self, sale_id: int) -> Optional[Sale]:
        row = db.session.get(SaleRow, sale_id)
        return sale_from_row(row) if row else None

    def list_for_employee(self, employee_id: int) -> Sequence[Sale]:
        stmt = (
            db.select(SaleRow)
            .options(selectinload(SaleRow.package))
            .where(SaleRow.employee_id == employee_id)
            .order_by(SaleRow.date.desc(), SaleRow.id.desc())
        )
        return [sale_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(
        self,
        *,
        employee_id: int,
        package_id: int,
        client_name: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
    ) -> Sale:
        with transaction() as session:
            row = SaleRow(
                employee_id=employee_id,
                package_id=package_id,
                client_name=client_name,
                amount=amount,
                date=date,
                description=description,
            )
            session.add(row)
        return sale_from_row(row)

    def update(self, sale_id: int, **fields) -> Optional[Sale]:
        unknown = set(fields) - _FIELDS
        if unknown:
            raise ValueError(f"Unsupported sale fields: {sorted(unknown)}")

        row = db.session.get(SaleRow, sale_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return sale_from_row(row)

    def delete_by_id(self, sale_id: int) -> bool:
        row = db.session.get(SaleRow, sale_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True

    def sum_for_employee(self, employee_id: int, start: datetime, end: datetime) -> Decimal:
        stmt = db.select(func.coalesce(func.sum(SaleRow.amount), 0)).where(
            SaleRow.employee_id == employee_id,
            SaleRow.date >= start,
            SaleRow.date < end,
        )
        return quantize(db.session.execute(stmt).scalar_one())
