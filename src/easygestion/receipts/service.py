from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import clean_text, parse_iso_datetime, parse_money, require_text
from ..core.exceptions import NotFoundError
from ..security.principal import Principal
from ..users.repository import EmployeeRepository
from .model import Receipt
from .repository import ReceiptRepository


class ReceiptService:
    def __init__(self, receipts: ReceiptRepository, employees: EmployeeRepository):
        self._receipts = receipts
        self._employees = employees

    def _check_employee(self, principal: Principal, employee_id: int) -> None:
        principal.ensure_can_access_employee(employee_id)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

    def _owned_receipt(self, employee_id: int, receipt_id: int) -> Receipt:
        receipt = self._receipts.get_by_id(int(receipt_id))
        if not receipt or receipt.employee_id != int(employee_id):
            raise NotFoundError("Receipt not found")
        return receipt

    def list_for_employee(self, principal: Principal, employee_id: int) -> Sequence[Receipt]:
        self._check_employee(principal, employee_id)
        return self._receipts.list_for_employee(int(employee_id))

    def create(self, principal: Principal, employee_id: int, data: Mapping[str, Any]) -> Receipt:
        self._check_employee(principal, employee_id)
        return self._receipts.create(
            employee_id=int(employee_id),
            client_name=require_text(data.get("clientName"), "clientName"),
            amount=parse_money(data.get("amount"), "amount"),
            date=parse_iso_datetime(data["date"], "date") if data.get("date") else now_local(),
            description=clean_text(data.get("description")),
        )

    def update(self, principal: Principal, employee_id: int, receipt_id: int, data: Mapping[str, Any]) -> Receipt:
        self._check_employee(principal, employee_id)
        receipt = self._owned_receipt(employee_id, receipt_id)

        fields: dict[str, Any] = {}
        if data.get("clientName") is not None:
            fields["client_name"] = require_text(data["clientName"], "clientName")
        if data.get("amount") is not None:
            fields["amount"] = parse_money(data["amount"], "amount")
        if "description" in data:
            fields["description"] = clean_text(data.get("description"))

        if not fields:
            return receipt
        updated = self._receipts.update(receipt.receipt_id, **fields)
        if not updated:
            raise NotFoundError("Receipt not found")
        return updated

    def delete(self, principal: Principal, employee_id: int, receipt_id: int) -> None:
        self._check_employee(principal, employee_id)
        receipt = self._owned_receipt(employee_id, receipt_id)
        if not self._receipts.delete_by_id(receipt.receipt_id):
            raise NotFoundError("Receipt not found")
