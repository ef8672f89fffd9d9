from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from ..users.service import SessionUser

logger = logging.getLogger(__name__)


def store_session_user(user: SessionUser) -> None:
    session["user_id"] = user.user_id
    session["username"] = user.username
    session["role"] = user.role.value
    session["teacher_id"] = user.teacher_id


def current_user() -> Optional[SessionUser]:
    if "user_id" not in session:
        return None
    return SessionUser(
        user_id=int(session["user_id"]),
        username=session.get("username", ""),
        role=Role(session["role"]),
        teacher_id=session.get("teacher_id"),
    )


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def json_rows(key: str) -> list[dict]:
    """Rows of a bulk import body, e.g. ``{"students": [{...}, ...]}``."""

    rows = json_body().get(key)
    if not isinstance(rows, list):
        raise ValidationError(f"'{key}' must be a list")
    for line_no, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise ValidationError(f"Row {line_no}: must be an object")
    return rows


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please log in to continue"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin role required"}), 403
        return view(*args, **kwargs)

    return wrapper


def _status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(error: DomainError):
        return jsonify({"error": str(error), "type": type(error).__name__}), _status_for(error)

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception):
        # Let Flask render its own HTTP errors (404 for unknown routes, 405, ...).
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = str(error) if app.config.get("DEBUG") else "Internal server error"
        return (
            jsonify({"error": message, "generated_at": datetime.now(timezone.utc).isoformat()}),
            500,
        )
