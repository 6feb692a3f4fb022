from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_bool
from ..container import Container
from ..web.auth import admin_required, current_principal, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/alerts/employee/<int:employee_id>")
    @login_required
    def list_alerts(employee_id: int):
        unread = request.args.get("unread")
        alerts = container.alert_service.list_for_employee(
            current_principal(),
            employee_id,
            unread_only=parse_bool(unread, "unread") if unread else False,
        )
        return jsonify({"alerts": [a.to_dict() for a in alerts]})

    @app.post("/api/v1/alerts")
    @admin_required
    def create_alert():
        alert = container.alert_service.create(request_data())
        return jsonify({"message": "Alert created", "alert": alert.to_dict()}), 201

    @app.put("/api/v1/alerts/<int:alert_id>/read")
    @login_required
    def mark_alert_read(alert_id: int):
        alert = container.alert_service.mark_read(current_principal(), alert_id)
        return jsonify({"message": "Alert marked as read", "alert": alert.to_dict()})

    @app.delete("/api/v1/alerts/<int:alert_id>")
    @admin_required
    def delete_alert(alert_id: int):
        container.alert_service.delete(alert_id)
        return jsonify({"message": "Alert deleted"})
