from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Package


class PackageRepository(Protocol):
    def get_by_id(self, package_id: int) -> Optional[Package]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Package]:
        raise NotImplementedError

    def create(self, *, name: str, price: Decimal) -> Package:
        raise NotImplementedError

    def update(self, package_id: int, **fields) -> Optional[Package]:
        raise NotImplementedError
