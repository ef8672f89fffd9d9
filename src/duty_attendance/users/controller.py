from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_user, json_body, login_required, store_session_user
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        store_session_user(s_user)
        return jsonify(s_user.to_dict())

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/session", methods=["GET"], endpoint="current_session")
    @login_required
    def current_session():
        # Re-read the account so deleted users or changed roles take effect.
        s_user = container.auth_service.validate_session(current_user().user_id)
        if not s_user:
            session.clear()
            return jsonify({"error": "Session is no longer valid"}), 401

        store_session_user(s_user)
        return jsonify(s_user.to_dict())

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @admin_required
    def list_users():
        return jsonify([u.to_dict() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @admin_required
    def create_user():
        data = json_body()
        user_id = container.user_service.create_account(
            current_role=current_user().role,
            username=data.get("username", ""),
            password=data.get("password", ""),
            role=data.get("role", ""),
        )
        return jsonify(container.user_service.get_user(user_id).to_dict()), 201

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    @admin_required
    def get_user(user_id: int):
        return jsonify(container.user_service.get_user(user_id).to_dict())

    @app.route("/api/users/<int:user_id>", methods=["PATCH"], endpoint="update_user")
    @admin_required
    def update_user(user_id: int):
        data = json_body()
        user = container.user_service.update_account(
            current_role=current_user().role,
            user_id=user_id,
            username=data.get("username"),
            password=data.get("password"),
            role=data.get("role"),
        )
        return jsonify(user.to_dict())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    def delete_user(user_id: int):
        me = current_user()
        container.user_service.delete_user(current_role=me.role, current_user_id=me.user_id, user_id=user_id)
        return jsonify({"ok": True})
