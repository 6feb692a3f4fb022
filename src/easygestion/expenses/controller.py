from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.auth import admin_required, current_principal, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/expenses")
    @admin_required
    def list_expenses():
        return jsonify({"expenses": [e.to_dict() for e in container.expense_service.list_all()]})

    @app.post("/api/v1/expenses")
    @login_required
    def create_expense():
        expense = container.expense_service.create(current_principal(), request_data())
        return jsonify({"message": "Expense created", "expense": expense.to_dict()}), 201

    @app.put("/api/v1/expenses/<int:expense_id>")
    @login_required
    def update_expense(expense_id: int):
        expense = container.expense_service.update(current_principal(), expense_id, request_data())
        return jsonify({"message": "Expense updated", "expense": expense.to_dict()})

    @app.delete("/api/v1/expenses/<int:expense_id>")
    @login_required
    def delete_expense(expense_id: int):
        container.expense_service.delete(current_principal(), expense_id)
        return jsonify({"message": "Expense deleted"})
