from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Sale


class SaleRepository(Protocol):
    def get_by_id(self, sale_id: int) -> Optional[Sale]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Sale]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        package_id: int,
        client_name: str,
        amount: Decimal,
        date: datetime,
        description: Optional[str],
    ) -> Sale:
        raise NotImplementedError

    def update(self, sale_id: int, **fields) -> Optional[Sale]:
        raise NotImplementedError

    def delete_by_id(self, sale_id: int) -> bool:
        raise NotImplementedError

    def sum_for_employee(self, employee_id: int, start: datetime, end: datetime) -> Decimal:
        """Total amount in the half-open range [start, end)."""
        raise NotImplementedError
