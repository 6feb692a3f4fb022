from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..web.auth import admin_required, current_principal, login_required
from ..web.payload import request_data
from .export import XLSX_MIMETYPE, salaries_workbook


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/salaries/employee/<int:employee_id>")
    @login_required
    def list_salaries(employee_id: int):
        salaries = container.salary_service.list_for_employee(current_principal(), employee_id)
        return jsonify({"salaries": [s.to_dict() for s in salaries]})

    @app.post("/api/v1/salaries/generate")
    @admin_required
    def generate_salaries():
        salaries = container.salary_service.generate(request_data())
        return jsonify({"message": "Salaries generated", "salaries": [s.to_dict() for s in salaries]}), 201

    @app.get("/api/v1/salaries/export")
    @admin_required
    def export_salaries():
        start, end, salaries = container.salary_service.list_for_period(request.args)
        return send_file(
            salaries_workbook(salaries),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"salaries_{start.isoformat()}_{end.isoformat()}.xlsx",
        )
