from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_user, json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/duty-sessions", methods=["POST"], endpoint="create_duty_session")
    @admin_required
    def create_duty_session():
        data = json_body()
        teacher_id = data.get("teacher_id")
        if teacher_id is None:
            raise ValidationError("teacher_id is required")

        duty = container.duty_service.create(
            current_role=current_user().role,
            teacher_id=teacher_id,
            duty_date=data.get("duty_date"),
            floor=data.get("floor"),
        )
        return jsonify(duty.to_dict()), 201

    @app.route("/api/duty-sessions/<int:session_id>", methods=["GET"], endpoint="get_duty_session")
    @login_required
    def get_duty_session(session_id: int):
        return jsonify(container.duty_service.get(session_id).to_dict())

    @app.route("/api/duty-sessions/<int:session_id>", methods=["DELETE"], endpoint="delete_duty_session")
    @admin_required
    def delete_duty_session(session_id: int):
        container.duty_service.delete(current_role=current_user().role, session_id=session_id)
        return jsonify({"ok": True})

    @app.route("/api/teachers/<int:teacher_id>/duty-sessions", methods=["GET"], endpoint="teacher_duty_sessions")
    @login_required
    def teacher_duty_sessions(teacher_id: int):
        container.teacher_service.get(teacher_id)
        return jsonify([d.to_dict() for d in container.duty_service.list_for_teacher(teacher_id)])

    @app.route("/api/me/duty-sessions", methods=["GET"], endpoint="my_duty_sessions")
    @login_required
    def my_duty_sessions():
        me = current_user()
        if me.teacher_id is None:
            return jsonify([])
        return jsonify([d.to_dict() for d in container.duty_service.list_for_teacher(me.teacher_id)])
