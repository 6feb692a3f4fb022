from __future__ import annotations

from flask import Flask, jsonify, request
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from ..container import Container
from ..web.auth import admin_required, current_principal, login_required, super_admin_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.post("/api/v1/auth/login")
    def login():
        data = request_data()
        identifier = data.get("email") or data.get("username") or ""
        result = container.auth_service.login(identifier=str(identifier), password=str(data.get("password") or ""))
        response = jsonify(
            {"message": "Login successful", "user": result.user.to_dict(), "accessToken": result.access_token}
        )
        set_access_cookies(response, result.access_token)
        return response

    @app.post("/api/v1/auth/logout")
    def logout():
        response = jsonify({"message": "Logged out"})
        unset_jwt_cookies(response)
        return response

    @app.get("/api/v1/auth/me")
    @login_required
    def me():
        user = container.auth_service.current_user(current_principal().user_id)
        return jsonify({"user": user.to_dict()})

    @app.get("/api/v1/users")
    @admin_required
    def list_users():
        return jsonify({"users": [u.to_dict() for u in container.user_service.list_users()]})

    @app.post("/api/v1/users")
    @admin_required
    def create_user():
        user = container.user_service.create_user(request_data(), request.files)
        return jsonify({"message": "User created", "user": user.to_dict()}), 201

    @app.put("/api/v1/users/<int:user_id>")
    @admin_required
    def update_user(user_id: int):
        principal = current_principal()
        user = container.user_service.update_user(
            current_role=principal.role,
            current_user_id=principal.user_id,
            user_id=user_id,
            data=request_data(),
        )
        return jsonify({"message": "User updated", "user": user.to_dict()})

    @app.put("/api/v1/users/<int:user_id>/deduction-percentage")
    @admin_required
    def update_deduction_percentage(user_id: int):
        employee = container.user_service.update_deduction_percentage(
            user_id=user_id, value=request_data().get("deductionPercentage")
        )
        return jsonify({"message": "Deduction percentage updated", "employee": employee.to_dict()})

    @app.put("/api/v1/users/<int:user_id>/documents")
    @admin_required
    def update_documents(user_id: int):
        user = container.user_service.update_documents(user_id=user_id, files=request.files)
        return jsonify({"message": "Documents updated", "user": user.to_dict()})

    @app.delete("/api/v1/users/<int:user_id>")
    @super_admin_required
    def delete_user(user_id: int):
        principal = current_principal()
        container.user_service.delete_user(
            current_role=principal.role, current_user_id=principal.user_id, user_id=user_id
        )
        return jsonify({"message": "User deleted"})
