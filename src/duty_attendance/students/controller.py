from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_user, json_body, json_rows, login_required
from ..container import Container
from .service import StudentInput


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        return jsonify([s.to_dict() for s in container.student_service.list_all()])

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @admin_required
    def create_student():
        data = json_body()
        student_id = container.student_service.create(
            current_role=current_user().role,
            name=data.get("name", ""),
            grade=data.get("grade"),
            section=data.get("section"),
        )
        return jsonify(container.student_service.get(student_id).to_dict()), 201

    @app.route("/api/students/import", methods=["POST"], endpoint="import_students")
    @admin_required
    def import_students():
        ids = container.student_service.bulk_import(
            current_role=current_user().role,
            rows=[
                StudentInput(name=r.get("name", ""), grade=r.get("grade"), section=r.get("section"))
                for r in json_rows("students")
            ],
        )
        return jsonify({"imported": len(ids), "student_ids": ids}), 201

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    @login_required
    def get_student(student_id: int):
        return jsonify(container.student_service.get(student_id).to_dict())

    @app.route("/api/students/<int:student_id>", methods=["PATCH"], endpoint="update_student")
    @admin_required
    def update_student(student_id: int):
        data = json_body()
        student = container.student_service.update(
            current_role=current_user().role,
            student_id=student_id,
            name=data.get("name"),
            grade=data.get("grade"),
            section=data.get("section"),
        )
        return jsonify(student.to_dict())

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    def delete_student(student_id: int):
        container.student_service.delete(current_role=current_user().role, student_id=student_id)
        return jsonify({"ok": True})

    @app.route("/api/floors/<floor>/students", methods=["GET"], endpoint="floor_roster")
    @login_required
    def floor_roster(floor: str):
        return jsonify([s.to_dict() for s in container.student_service.list_by_floor(floor)])
