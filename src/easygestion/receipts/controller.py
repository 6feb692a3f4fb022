from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.auth import current_principal, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    base = "/api/v1/receipts/employee/<int:employee_id>"

    @app.get(base)
    @login_required
    def list_receipts(employee_id: int):
        receipts = container.receipt_service.list_for_employee(current_principal(), employee_id)
        return jsonify({"receipts": [r.to_dict() for r in receipts]})

    @app.post(base)
    @login_required
    def create_receipt(employee_id: int):
        receipt = container.receipt_service.create(current_principal(), employee_id, request_data())
        return jsonify({"message": "Receipt created", "receipt": receipt.to_dict()}), 201

    @app.put(base + "/receipt/<int:receipt_id>")
    @login_required
    def update_receipt(employee_id: int, receipt_id: int):
        receipt = container.receipt_service.update(current_principal(), employee_id, receipt_id, request_data())
        return jsonify({"message": "Receipt updated", "receipt": receipt.to_dict()})

    @app.delete(base + "/receipt/<int:receipt_id>")
    @login_required
    def delete_receipt(employee_id: int, receipt_id: int):
        container.receipt_service.delete(current_principal(), employee_id, receipt_id)
        return jsonify({"message": "Receipt deleted"})
