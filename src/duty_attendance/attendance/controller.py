from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user, json_body, login_required
from ..container import Container
from ..core.constants import UNCHANGED
from ..core.exceptions import ValidationError


def _as_bool(value, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ValidationError(f"{field_name} must be true or false")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/duty-sessions/<int:session_id>/attendance", methods=["POST"], endpoint="record_attendance")
    @login_required
    def record_attendance(session_id: int):
        data = json_body()
        student_id = data.get("student_id")
        if student_id is None:
            raise ValidationError("student_id is required")

        me = current_user()
        entry = container.attendance_service.record(
            current_role=me.role,
            teacher_id=me.teacher_id,
            session_id=session_id,
            student_id=student_id,
            status=data.get("status"),
            is_late=_as_bool(data.get("is_late", False), "is_late"),
            notes=data.get("notes"),
        )
        return jsonify(entry.to_dict()), 201

    @app.route("/api/duty-sessions/<int:session_id>/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance(session_id: int):
        return jsonify([e.to_dict() for e in container.attendance_service.list_for_session(session_id)])

    @app.route("/api/duty-sessions/<int:session_id>/summary", methods=["GET"], endpoint="attendance_summary")
    @login_required
    def attendance_summary(session_id: int):
        return jsonify(container.attendance_service.summary_for_session(session_id).to_dict())

    @app.route("/api/attendance/<int:entry_id>", methods=["PATCH"], endpoint="update_attendance")
    @login_required
    def update_attendance(entry_id: int):
        data = json_body()
        is_late = data.get("is_late")

        me = current_user()
        entry = container.attendance_service.update_entry(
            current_role=me.role,
            teacher_id=me.teacher_id,
            entry_id=entry_id,
            status=data.get("status"),
            is_late=_as_bool(is_late, "is_late") if is_late is not None else None,
            notes=data.get("notes", UNCHANGED),
        )
        return jsonify(entry.to_dict())

    @app.route("/api/attendance/<int:entry_id>", methods=["DELETE"], endpoint="delete_attendance")
    @login_required
    def delete_attendance(entry_id: int):
        me = current_user()
        container.attendance_service.delete_entry(current_role=me.role, teacher_id=me.teacher_id, entry_id=entry_id)
        return jsonify({"ok": True})
