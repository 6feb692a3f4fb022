from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.money import as_float


@dataclass(frozen=True)
class Expense:
    expense_id: int
    category: str
    amount: Decimal
    date: datetime
    description: Optional[str] = None
    created_by: Optional[int] = None
    creator_username: Optional[str] = None

    def to_dict(self) -> dict:
        creator = None
        if self.created_by is not None:
            creator = {"id": self.created_by, "username": self.creator_username}
        return {
            "id": self.expense_id,
            "category": self.category,
            "amount": as_float(self.amount),
            "date": self.date.isoformat(),
            "description": self.description,
            "createdBy": self.created_by,
            "creator": creator,
        }
