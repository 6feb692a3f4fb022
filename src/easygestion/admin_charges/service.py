from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Sequence

from ..common.money import total
from ..common.validators import parse_int_in_range, parse_money
from ..core.constants import MIN_CHARGE_YEAR
from ..core.exceptions import ConflictError, NotFoundError
from .model import AdminCharge
from .repository import AdminChargeRepository

# request key -> column
COMPONENTS = {
    "rent": "rent",
    "charges": "charges",
    "operatingCosts": "operating_costs",
    "electricity": "electricity",
    "salaries": "salaries",
}


class AdminChargeService:
    def __init__(self, charges: AdminChargeRepository):
        self._charges = charges

    def list_all(self) -> Sequence[AdminCharge]:
        return self._charges.list_all()

    @staticmethod
    def _amounts(data: Mapping[str, Any], current: Mapping[str, Decimal]) -> dict[str, Decimal]:
        """Components given in the request override ``current``; a bare ``amount`` sets the total."""
        values = dict(current)
        given = False
        for key, column in COMPONENTS.items():
            if data.get(key) not in (None, ""):
                values[column] = parse_money(data[key], key)
                given = True

        if given:
            values["total_charges"] = total(values[c] for c in COMPONENTS.values())
        elif data.get("amount") not in (None, ""):
            values["total_charges"] = parse_money(data["amount"], "amount")
        return values

    def create(self, data: Mapping[str, Any]) -> AdminCharge:
        month = parse_int_in_range(data.get("month"), "month", min_value=1, max_value=12)
        year = parse_int_in_range(data.get("year"), "year", min_value=MIN_CHARGE_YEAR)
        if self._charges.get_for_month(month, year):
            raise ConflictError(f"Admin charges already exist for {month:02d}/{year}")

        zero = Decimal("0.00")
        values = self._amounts(data, {c: zero for c in COMPONENTS.values()})
        values.setdefault("total_charges", zero)
        return self._charges.create(month=month, year=year, **values)

    def update(self, charge_id: int, data: Mapping[str, Any]) -> AdminCharge:
        charge = self._charges.get_by_id(int(charge_id))
        if not charge:
            raise NotFoundError("Admin charge not found")

        fields: dict[str, Any] = {}
        month, year = charge.month, charge.year
        if data.get("month") is not None:
            month = parse_int_in_range(data["month"], "month", min_value=1, max_value=12)
        if data.get("year") is not None:
            year = parse_int_in_range(data["year"], "year", min_value=MIN_CHARGE_YEAR)
        if (month, year) != (charge.month, charge.year):
            other = self._charges.get_for_month(month, year)
            if other and other.charge_id != charge.charge_id:
                raise ConflictError(f"Admin charges already exist for {month:02d}/{year}")
            fields.update(month=month, year=year)

        current = {column: getattr(charge, column) for column in COMPONENTS.values()}
        current["total_charges"] = charge.total_charges
        fields.update(self._amounts(data, current))

        updated = self._charges.update(charge.charge_id, **fields)
        if not updated:
            raise NotFoundError("Admin charge not found")
        return updated

    def delete(self, charge_id: int) -> None:
        if not self._charges.delete_by_id(int(charge_id)):
            raise NotFoundError("Admin charge not found")
