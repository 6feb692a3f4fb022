from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Receipt


class ReceiptRepository(Protocol):
    def get_by_id(self, receipt_id: int) -> Optional[Receipt]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Receipt]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        client_name: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
    ) -> Receipt:
        raise NotImplementedError

    def update(self, receipt_id: int, **fields) -> Optional[Receipt]:
        raise NotImplementedError

    def delete_by_id(self, receipt_id: int) -> bool:
        raise NotImplementedError

    def sum_for_employee(self, employee_id: int, start: datetime, end: datetime) -> Decimal:
        raise NotImplementedError
