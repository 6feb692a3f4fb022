from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Expense


class ExpenseRepository(Protocol):
    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Expense]:
        raise NotImplementedError

    def create(
        self,
        *,
        category: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
        created_by: int,
    ) -> Expense:
        raise NotImplementedError

    def update(self, expense_id: int, **fields) -> Optional[Expense]:
        raise NotImplementedError

    def delete_by_id(self, expense_id: int) -> bool:
        raise NotImplementedError
