from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AlertType


@dataclass(frozen=True)
class Alert:
    alert_id: int
    employee_id: int
    message: str
    type: AlertType
    date: datetime
    is_read: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.alert_id,
            "employeeId": self.employee_id,
            "message": self.message,
            "type": self.type.value,
            "isRead": self.is_read,
            "date": self.date.isoformat(),
        }
