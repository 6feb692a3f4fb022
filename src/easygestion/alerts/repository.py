from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AlertType
from .model import Alert


class AlertRepository(Protocol):
    def get_by_id(self, alert_id: int) -> Optional[Alert]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int, *, unread_only: bool = False) -> Sequence[Alert]:
        raise NotImplementedError

    def create(self, *, employee_id: int, message: str, type: AlertType, date: datetime) -> Alert:
        raise NotImplementedError

    def mark_read(self, alert_id: int) -> Optional[Alert]:
        raise NotImplementedError

    def delete_by_id(self, alert_id: int) -> bool:
        raise NotImplementedError
