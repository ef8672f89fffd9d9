from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_user, json_body, json_rows, login_required
from ..container import Container
from ..core.constants import UNCHANGED
from .service import TeacherInput


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    @login_required
    def list_teachers():
        return jsonify([t.to_dict() for t in container.teacher_service.list_all()])

    @app.route("/api/teachers", methods=["POST"], endpoint="create_teacher")
    @admin_required
    def create_teacher():
        data = json_body()
        teacher_id = container.teacher_service.create(
            current_role=current_user().role,
            name=data.get("name", ""),
            nip=data.get("nip", ""),
            user_id=data.get("user_id"),
        )
        return jsonify(container.teacher_service.get(teacher_id).to_dict()), 201

    @app.route("/api/teachers/import", methods=["POST"], endpoint="import_teachers")
    @admin_required
    def import_teachers():
        ids = container.teacher_service.bulk_import(
            current_role=current_user().role,
            rows=[
                TeacherInput(name=r.get("name", ""), nip=r.get("nip", ""), user_id=r.get("user_id"))
                for r in json_rows("teachers")
            ],
        )
        return jsonify({"imported": len(ids), "teacher_ids": ids}), 201

    @app.route("/api/teachers/<int:teacher_id>", methods=["GET"], endpoint="get_teacher")
    @login_required
    def get_teacher(teacher_id: int):
        return jsonify(container.teacher_service.get(teacher_id).to_dict())

    @app.route("/api/teachers/<int:teacher_id>", methods=["PATCH"], endpoint="update_teacher")
    @admin_required
    def update_teacher(teacher_id: int):
        data = json_body()
        teacher = container.teacher_service.update(
            current_role=current_user().role,
            teacher_id=teacher_id,
            name=data.get("name"),
            nip=data.get("nip"),
            user_id=data.get("user_id", UNCHANGED),
        )
        return jsonify(teacher.to_dict())

    @app.route("/api/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @admin_required
    def delete_teacher(teacher_id: int):
        container.teacher_service.delete(current_role=current_user().role, teacher_id=teacher_id)
        return jsonify({"ok": True})
