from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_enum, require_int
from ..core.enums import Floor, Role
from ..core.exceptions import AuthorizationError, SessionNotFoundError, TeacherNotFoundError, ValidationError
from ..teachers.repository import TeacherRepository
from .model import DutySession
from .repository import DutySessionRepository

logger = logging.getLogger(__name__)


class DutySessionService:
    def __init__(self, sessions: DutySessionRepository, teachers: TeacherRepository):
        self._sessions = sessions
        self._teachers = teachers

    def create(self, *, current_role: Role, teacher_id: int, duty_date, floor) -> DutySession:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        teacher_id = require_int(teacher_id, "teacher_id")
        if not self._teachers.get_by_id(teacher_id):
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")

        if isinstance(duty_date, datetime):
            duty_date = duty_date.date()
        elif not isinstance(duty_date, date):
            try:
                duty_date = parse_iso_date(str(duty_date))
            except ValueError:
                raise ValidationError(f"Invalid duty date: {duty_date!r}") from None

        floor = require_enum(Floor, floor, "Floor")

        session_id = self._sessions.create_session(teacher_id=teacher_id, duty_date=duty_date, floor=floor)
        logger.info("Duty session %s created (teacher=%s floor=%s)", session_id, teacher_id, floor.value)
        return self.get(session_id)

    def get(self, session_id: int) -> DutySession:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise SessionNotFoundError(f"Duty session {session_id} not found")
        return session

    def list_for_teacher(self, teacher_id: int) -> Sequence[DutySession]:
        return self._sessions.list_for_teacher(int(teacher_id))

    def delete(self, *, current_role: Role, session_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        if not self._sessions.delete_by_id(int(session_id)):
            raise SessionNotFoundError(f"Duty session {session_id} not found")
        logger.info("Duty session %s deleted", session_id)
