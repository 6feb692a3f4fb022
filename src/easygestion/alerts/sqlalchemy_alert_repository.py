from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AlertType
from ..database.extensions import db, transaction
from ..database.tables import AlertRow
from .model import Alert
from .repository import AlertRepository


def alert_from_row(row: AlertRow) -> Alert:
    return Alert(
        alert_id=int(row.id),
        employee_id=int(row.employee_id),
        message=row.message,
        type=AlertType(row.type),
        date=row.date,
        is_read=bool(row.is_read),
    )


class SQLAlchemyAlertRepository(AlertRepository):
    def get_by_id(self, alert_id: int) -> Optional[Alert]:
        row = db.session.get(AlertRow, alert_id)
        return alert_from_row(row) if row else None

    def list_for_employee(self, employee_id: int, *, unread_only: bool = False) -> Sequence[Alert]:
        stmt = db.select(AlertRow).where(AlertRow.employee_id == employee_id)
        if unread_only:
            stmt = stmt.where(AlertRow.is_read.is_(False))
        stmt = stmt.order_by(AlertRow.date.desc(), AlertRow.id.desc())
        return [alert_from_row(r) for r in db.session.execute(stmt).scalars().all()]

    def create(self, *, employee_id: int, message: str, type: AlertType, date: datetime) -> Alert:
        with transaction() as session:
            row = AlertRow(employee_id=employee_id, message=message, type=type.value, date=date, is_read=False)
            session.add(row)
        return alert_from_row(row)

    def mark_read(self, alert_id: int) -> Optional[Alert]:
        row = db.session.get(AlertRow, alert_id)
        if not row:
            return None
        with transaction():
            row.is_read = True
        return alert_from_row(row)

    def delete_by_id(self, alert_id: int) -> bool:
        row = db.session.get(AlertRow, alert_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True
