from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.auth import admin_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/admin-charges")
    @admin_required
    def list_admin_charges():
        return jsonify({"adminCharges": [c.to_dict() for c in container.admin_charge_service.list_all()]})

    @app.post("/api/v1/admin-charges")
    @admin_required
    def create_admin_charge():
        charge = container.admin_charge_service.create(request_data())
        return jsonify({"message": "Admin charge created", "adminCharge": charge.to_dict()}), 201

    @app.put("/api/v1/admin-charges/<int:charge_id>")
    @admin_required
    def update_admin_charge(charge_id: int):
        charge = container.admin_charge_service.update(charge_id, request_data())
        return jsonify({"message": "Admin charge updated", "adminCharge": charge.to_dict()})

    @app.delete("/api/v1/admin-charges/<int:charge_id>")
    @admin_required
    def delete_admin_charge(charge_id: int):
        container.admin_charge_service.delete(charge_id)
        return jsonify({"message": "Admin charge deleted"})
