from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..payroll.export import XLSX_MIMETYPE
from ..web.auth import admin_required
from .export import dashboard_workbook
from .service import parse_month_query


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/analytics/dashboard")
    @admin_required
    def analytics_dashboard():
        month, year = parse_month_query(request.args)
        return jsonify(container.analytics_service.dashboard(month=month, year=year).to_dict())

    @app.get("/api/v1/analytics/revenue")
    @admin_required
    def analytics_revenue():
        points = container.analytics_service.revenue(request.args.get("months"))
        return jsonify({"revenue": [p.to_dict() for p in points]})

    @app.get("/api/v1/analytics/export")
    @admin_required
    def analytics_export():
        month, year = parse_month_query(request.args)
        dashboard = container.analytics_service.dashboard(month=month, year=year)
        return send_file(
            dashboard_workbook(dashboard),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"analytics_{dashboard.year}-{dashboard.month:02d}.xlsx",
        )
