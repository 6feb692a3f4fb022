from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import as_float


@dataclass(frozen=True)
class Package:
    """Domain entity: a service the salon sells at a fixed price."""

    package_id: int
    name: str
    price: Decimal
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.package_id,
            "name": self.name,
            "price": as_float(self.price),
            "isActive": self.is_active,
        }
