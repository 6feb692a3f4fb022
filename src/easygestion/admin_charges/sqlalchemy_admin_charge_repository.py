from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.extensions import db, transaction
from ..database.tables import AdminChargeRow
from .model import AdminCharge
from .repository import AdminChargeRepository

_FIELDS = {"month", "year", "rent", "charges", "operating_costs", "electricity", "salaries", "total_charges"}


def admin_charge_from_row(row: AdminChargeRow) -> AdminCharge:
    return AdminCharge(
        charge_id=int(row.id),
        month=int(row.month),
        year=int(row.year),
        rent=Decimal(row.rent),
        charges=Decimal(row.charges),
        operating_costs=Decimal(row.operating_costs),
        electricity=Decimal(row.electricity),
        salaries=Decimal(row.salaries),
        total_charges=Decimal(row.total_charges),
    )


def _check_fields(fields: dict) -> None:
    unknown = set(fields) - _FIELDS
    if unknown:
        raise ValueError(f"Unsupported admin charge fields: {sorted(unknown)}")


class SQLAlchemyAdminChargeRepository(AdminChargeRepository):
    def get_by_id(self, charge_id: int) -> Optional[AdminCharge]:
        row = db.session.get(AdminChargeRow, charge_id)
        return admin_charge_from_row(row) if row else None

    def get_for_month(self, month: int, year: int) -> Optional[AdminCharge]:
        stmt = db.select(AdminChargeRow).where(AdminChargeRow.month == month, AdminChargeRow.year == year)
        row = db.session.execute(stmt).scalar_one_or_none()
        return admin_charge_from_row(row) if row else None

    def list_all(self) -> Sequence[AdminCharge]:
        stmt = db.select(AdminChargeRow).order_by(AdminChargeRow.year.desc(), AdminChargeRow.month.desc())
        return [admin_charge_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(self, **fields) -> AdminCharge:
        _check_fields(fields)
        with transaction() as session:
            row = AdminChargeRow(**fields)
            session.add(row)
        return admin_charge_from_row(row)

    def update(self, charge_id: int, **fields) -> Optional[AdminCharge]:
        _check_fields(fields)
        row = db.session.get(AdminChargeRow, charge_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return admin_charge_from_row(row)

    def delete_by_id(self, charge_id: int) -> bool:
        row = db.session.get(AdminChargeRow, charge_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True
