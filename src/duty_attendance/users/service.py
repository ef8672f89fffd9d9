from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_enum, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, UserNotFoundError, ValidationError
from ..teachers.repository import TeacherRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role
    teacher_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "username": self.username,
            "role": self.role.value,
            "teacher_id": self.teacher_id,
        }


def _require_admin(current_role: Role) -> None:
    if current_role != Role.ADMIN:
        raise AuthorizationError("Admin role required")


class AuthService:
    """Use case: authenticate user (login) and re-validate a stored session."""

    def __init__(self, users: UserRepository, teachers: Optional[TeacherRepository] = None):
        self._users = users
        self._teachers = teachers

    def _to_session_user(self, user: User) -> SessionUser:
        teacher_id = None
        if self._teachers:
            teacher = self._teachers.get_by_user_id(user.user_id)
            if teacher:
                teacher_id = teacher.teacher_id

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role, teacher_id=teacher_id)

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username(username or "")
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        logger.info("User %s logged in", user.user_id)
        return self._to_session_user(user)

    def validate_session(self, user_id: int) -> Optional[SessionUser]:
        user = self._users.get_by_id(int(user_id))
        if not user:
            return None
        return self._to_session_user(user)


class UserService:
    """Use case: manage login accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_account(self, *, current_role: Role, username: str, password: str, role) -> int:
        _require_admin(current_role)

        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        role = require_enum(Role, role, "Role")

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user_id = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            role=role,
        )
        logger.info("User %s created (role=%s)", user_id, role.value)
        return user_id

    def update_account(
        self,
        *,
        current_role: Role,
        user_id: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role=None,
    ) -> User:
        _require_admin(current_role)
        user = self.get_user(user_id)

        if username is not None:
            username = require_non_empty(username, "Username")
            other = self._users.get_by_username(username)
            if other and other.user_id != user.user_id:
                raise ValidationError("Username already exists")

        password_hash = None
        if password is not None:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        if role is not None:
            role = require_enum(Role, role, "Role")

        self._users.update_user(user_id=user.user_id, username=username, password_hash=password_hash, role=role)
        logger.info("User %s updated", user.user_id)
        return self.get_user(user.user_id)

    def delete_user(self, *, current_role: Role, current_user_id: int, user_id: int) -> None:
        _require_admin(current_role)

        if int(user_id) == int(current_user_id):
            raise ValidationError("You cannot delete your own account")

        self.get_user(user_id)
        if not self._users.delete_by_id(int(user_id)):
            raise ValidationError("Failed to delete user")
        logger.info("User %s deleted", user_id)

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()
