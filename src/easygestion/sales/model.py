from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.money import as_float
from ..packages.model import Package


@dataclass(frozen=True)
class Sale:
    """A package sold by an employee; ``amount`` is the package price at sale time."""

    sale_id: int
    employee_id: int
    package_id: int
    client_name: str
    amount: Decimal
    date: datetime
    description: Optional[str] = None
    package: Optional[Package] = None

    def to_dict(self) -> dict:
        return {
            "id": self.sale_id,
            "employeeId": self.employee_id,
            "packageId": self.package_id,
            "clientName": self.client_name,
            "amount": as_float(self.amount),
            "date": self.date.isoformat(),
            "description": self.description,
            "package": self.package.to_dict() if self.package else None,
        }
