from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.money import as_float


@dataclass(frozen=True)
class Receipt:
    """Money an employee collected outside the package catalogue."""

    receipt_id: int
    employee_id: int
    client_name: str
    amount: Decimal
    date: datetime
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.receipt_id,
            "employeeId": self.employee_id,
            "clientName": self.client_name,
            "amount": as_float(self.amount),
            "date": self.date.isoformat(),
            "description": self.description,
        }
