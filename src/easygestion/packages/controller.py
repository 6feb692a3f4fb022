from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..web.auth import admin_required, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/packages")
    @login_required
    def list_packages():
        return jsonify({"packages": [p.to_dict() for p in container.package_service.list_active()]})

    @app.post("/api/v1/packages")
    @admin_required
    def create_package():
        package = container.package_service.create(request_data())
        return jsonify({"message": "Package created", "package": package.to_dict()}), 201

    @app.put("/api/v1/packages/<int:package_id>")
    @admin_required
    def update_package(package_id: int):
        package = container.package_service.update(package_id, request_data())
        return jsonify({"message": "Package updated", "package": package.to_dict()})

    @app.delete("/api/v1/packages/<int:package_id>")
    @admin_required
    def delete_package(package_id: int):
        container.package_service.deactivate(package_id)
        return jsonify({"message": "Package deleted"})
