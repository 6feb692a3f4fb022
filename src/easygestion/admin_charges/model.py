from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import as_float


@dataclass(frozen=True)
class AdminCharge:
    """Overhead of one month. ``total_charges`` is what analytics subtracts."""

    charge_id: int
    month: int
    year: int
    rent: Decimal
    charges: Decimal
    operating_costs: Decimal
    electricity: Decimal
    salaries: Decimal
    total_charges: Decimal

    def to_dict(self) -> dict:
        return {
            "id": self.charge_id,
            "month": self.month,
            "year": self.year,
            "rent": as_float(self.rent),
            "charges": as_float(self.charges),
            "operatingCosts": as_float(self.operating_costs),
            "electricity": as_float(self.electricity),
            "salaries": as_float(self.salaries),
            "totalCharges": as_float(self.total_charges),
            "amount": as_float(self.total_charges),
        }
