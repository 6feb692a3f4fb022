from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import clean_text, parse_iso_datetime, parse_money, require_text
from ..core.exceptions import AuthorizationError, NotFoundError
from ..security.principal import Principal
from .model import Expense
from .repository import ExpenseRepository


class ExpenseService:
    def __init__(self, expenses: ExpenseRepository):
        self._expenses = expenses

    def list_all(self) -> Sequence[Expense]:
        return self._expenses.list_all()

    def create(self, principal: Principal, data: Mapping[str, Any]) -> Expense:
        return self._expenses.create(
            category=require_text(data.get("category"), "category"),
            amount=parse_money(data.get("amount"), "amount"),
            date=parse_iso_datetime(data["date"], "date") if data.get("date") else now_local(),
            description=clean_text(data.get("description")),
            created_by=principal.user_id,
        )

    def _editable(self, principal: Principal, expense_id: int) -> Expense:
        expense = self._expenses.get_by_id(int(expense_id))
        if not expense:
            raise NotFoundError("Expense not found")
        if not principal.is_admin and expense.created_by != principal.user_id:
            raise AuthorizationError("Access denied")
        return expense

    def update(self, principal: Principal, expense_id: int, data: Mapping[str, Any]) -> Expense:
        expense = self._editable(principal, expense_id)

        fields: dict[str, Any] = {}
        if data.get("category") is not None:
            fields["category"] = require_text(data["category"], "category")
        if data.get("amount") is not None:
            fields["amount"] = parse_money(data["amount"], "amount")
        if data.get("date"):
            fields["date"] = parse_iso_datetime(data["date"], "date")
        if "description" in data:
            fields["description"] = clean_text(data.get("description"))

        if not fields:
            return expense
        updated = self._expenses.update(expense.expense_id, **fields)
        if not updated:
            raise NotFoundError("Expense not found")
        return updated

    def delete(self, principal: Principal, expense_id: int) -> None:
        expense = self._editable(principal, expense_id)
        if not self._expenses.delete_by_id(expense.expense_id):
            raise NotFoundError("Expense not found")
