from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.auth import current_principal, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    base = "/api/v1/sales/employee/<int:employee_id>"

    @app.get(base)
    @login_required
    def list_sales(employee_id: int):
        sales = container.sale_service.list_for_employee(current_principal(), employee_id)
        return jsonify({"sales": [s.to_dict() for s in sales]})

    @app.post(base)
    @login_required
    def create_sale(employee_id: int):
        sale = container.sale_service.create(current_principal(), employee_id, request_data())
        return jsonify({"message": "Sale created", "sale": sale.to_dict()}), 201

    @app.put(base + "/sale/<int:sale_id>")
    @login_required
    def update_sale(employee_id: int, sale_id: int):
        sale = container.sale_service.update(current_principal(), employee_id, sale_id, request_data())
        return jsonify({"message": "Sale updated", "sale": sale.to_dict()})

    @app.delete(base + "/sale/<int:sale_id>")
    @login_required
    def delete_sale(employee_id: int, sale_id: int):
        container.sale_service.delete(current_principal(), employee_id, sale_id)
        return jsonify({"message": "Sale deleted"})
