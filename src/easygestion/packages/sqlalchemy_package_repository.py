from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.extensions import db, transaction
from ..database.tables import PackageRow
from .model import Package
from .repository import PackageRepository

_FIELDS = {"name", "price", "is_active"}


def package_from_row(row: PackageRow) -> Package:
    return Package(
        package_id=int(row.id),
        name=row.name,
        price=Decimal(row.price),
        is_active=bool(row.is_active),
    )


class SQLAlchemyPackageRepository(PackageRepository):
    def get_by_id(self, package_id: int) -> Optional[Package]:
        row = db.session.get(PackageRow, package_id)
        return package_from_row(row) if row else None

    def list_active(self) -> Sequence[Package]:
        stmt = db.select(PackageRow).where(PackageRow.is_active.is_(True)).order_by(PackageRow.name)
        return [package_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(self, *, name: str, price: Decimal) -> Package:
        with transaction() as session:
            row = PackageRow(name=name, price=price, is_active=True)
            session.add(row)
        return package_from_row(row)

    def update(self, package_id: int, **fields) -> Optional[Package]:
        unknown = set(fields) - _FIELDS
        if unknown:
            raise ValueError(f"Unsupported package fields: {sorted(unknown)}")

        row = db.session.get(PackageRow, package_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return package_from_row(row)
