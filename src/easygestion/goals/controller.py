from __future__ import annotations

from flask import Flask, jsonify, request

from ..analytics.service import parse_month_query
from ..container import Container
from ..web.auth import admin_required, current_principal, login_required
from ..web.payload import request_data


def register(app: Flask, container: Container) -> None:
    @app.get("/api/v1/goals/employee/<int:employee_id>")
    @login_required
    def list_goals(employee_id: int):
        month, year = parse_month_query(request.args)
        goals = container.goal_service.list_for_employee(current_principal(), employee_id, month=month, year=year)
        return jsonify({"goals": [g.to_dict() for g in goals]})

    @app.post("/api/v1/goals")
    @admin_required
    def create_goal():
        goal = container.goal_service.create(request_data())
        return jsonify({"message": "Goal created", "goal": goal.to_dict()}), 201

    @app.put("/api/v1/goals/<int:goal_id>")
    @admin_required
    def update_goal(goal_id: int):
        goal = container.goal_service.update(goal_id, request_data())
        return jsonify({"message": "Goal updated", "goal": goal.to_dict()})

    @app.delete("/api/v1/goals/<int:goal_id>")
    @admin_required
    def delete_goal(goal_id: int):
        container.goal_service.delete(goal_id)
        return jsonify({"message": "Goal deleted"})

    @app.post("/api/v1/goals/<int:goal_id>/refresh")
    @login_required
    def refresh_goal(goal_id: int):
        goal = container.goal_service.refresh(current_principal(), goal_id)
        return jsonify({"goal": goal.to_dict()})
