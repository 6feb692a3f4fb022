from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AdminCharge


class AdminChargeRepository(Protocol):
    def get_by_id(self, charge_id: int) -> Optional[AdminCharge]:
        raise NotImplementedError

    def get_for_month(self, month: int, year: int) -> Optional[AdminCharge]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AdminCharge]:
        raise NotImplementedError

    def create(self, **fields) -> AdminCharge:
        raise NotImplementedError

    def update(self, charge_id: int, **fields) -> Optional[AdminCharge]:
        raise NotImplementedError

    def delete_by_id(self, charge_id: int) -> bool:
        raise NotImplementedError
