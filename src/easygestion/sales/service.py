from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import clean_text, parse_int_in_range, parse_iso_datetime, parse_money, require_text
from ..core.exceptions import NotFoundError
from ..packages.repository import PackageRepository
from ..security.principal import Principal
from ..users.repository import EmployeeRepository
from .model import Sale
from .repository import SaleRepository


class SaleService:
    def __init__(self, sales: SaleRepository, employees: EmployeeRepository, packages: PackageRepository):
        self._sales = sales
        self._employees = employees
        self._packages = packages

    def _check_employee(self, principal: Principal, employee_id: int) -> None:
        principal.ensure_can_access_employee(employee_id)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

    def _owned_sale(self, employee_id: int, sale_id: int) -> Sale:
        sale = self._sales.get_by_id(int(sale_id))
        if not sale or sale.employee_id != int(employee_id):
            raise NotFoundError("Sale not found")
        return sale

    def list_for_employee(self, principal: Principal, employee_id: int) -> Sequence[Sale]:
        self._check_employee(principal, employee_id)
        return self._sales.list_for_employee(int(employee_id))

    def create(self, principal: Principal, employee_id: int, data: Mapping[str, Any]) -> Sale:
        self._check_employee(principal, employee_id)

        package_id = parse_int_in_range(data.get("packageId"), "packageId", min_value=1)
        client_name = require_text(data.get("clientName"), "clientName")
        description = clean_text(data.get("description"))
        when = parse_iso_datetime(data["date"], "date") if data.get("date") else now_local()

        package = self._packages.get_by_id(package_id)
        if not package or not package.is_active:
            raise NotFoundError("Package not found")

        created = self._sales.create(
            employee_id=int(employee_id),
            package_id=package.package_id,
            client_name=client_name,
            amount=package.price,
            date=when,
            description=description,
        )
        return self._sales.get_by_id(created.sale_id) or created

    def update(self, principal: Principal, employee_id: int, sale_id: int, data: Mapping[str, Any]) -> Sale:
        self._check_employee(principal, employee_id)
        sale = self._owned_sale(employee_id, sale_id)

        fields: dict[str, Any] = {}
        if data.get("clientName") is not None:
            fields["client_name"] = require_text(data["clientName"], "clientName")
        if data.get("amount") is not None:
            fields["amount"] = parse_money(data["amount"], "amount")
        if "description" in data:
            fields["description"] = clean_text(data.get("description"))

        if not fields:
            return sale
        updated = self._sales.update(sale.sale_id, **fields)
        if not updated:
            raise NotFoundError("Sale not found")
        return updated

    def delete(self, principal: Principal, employee_id: int, sale_id: int) -> None:
        self._check_employee(principal, employee_id)
        sale = self._owned_sale(employee_id, sale_id)
        if not self._sales.delete_by_id(sale.sale_id):
            raise NotFoundError("Sale not found")
