from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_enum, require_int
from ..core.constants import UNCHANGED
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, EntryNotFoundError, SessionNotFoundError, StudentNotFoundError
from ..duty.model import DutySession
from ..duty.repository import DutySessionRepository
from ..students.repository import StudentRepository
from .aggregator import AttendanceAggregator
from .model import AttendanceEntry, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    notes = str(notes).strip()
    return notes or None


class AttendanceService:
    """Use case: the duty teacher records attendance for a session."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        sessions: DutySessionRepository,
        students: StudentRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
    ):
        self._attendance = attendance
        self._sessions = sessions
        self._students = students
        self._aggregator = aggregator or AttendanceAggregator()

    def _get_session(self, session_id: int) -> DutySession:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise SessionNotFoundError(f"Duty session {session_id} not found")
        return session

    def _check_can_record(self, session: DutySession, *, current_role: Role, teacher_id: Optional[int]) -> None:
        # Admins may fix any session; teachers only their own.
        if current_role == Role.ADMIN:
            return
        if teacher_id is None or int(teacher_id) != session.teacher_id:
            raise AuthorizationError("Only the assigned duty teacher can record attendance")

    def record(
        self,
        *,
        current_role: Role,
        teacher_id: Optional[int],
        session_id: int,
        student_id: int,
        status,
        is_late: bool = False,
        notes: Optional[str] = None,
    ) -> AttendanceEntry:
        """Create or overwrite the entry for (session, student).

        There is at most one entry per student per session; recording again
        replaces status, lateness and notes (last write wins).
        """

        session = self._get_session(session_id)
        self._check_can_record(session, current_role=current_role, teacher_id=teacher_id)

        student_id = require_int(student_id, "student_id")
        if not self._students.get_by_id(student_id):
            raise StudentNotFoundError(f"Student {student_id} not found")

        status = require_enum(AttendanceStatus, status, "Status")
        notes = _clean_notes(notes)

        existing = self._attendance.get_for_session_and_student(session_id=session.session_id, student_id=student_id)
        if existing:
            self._attendance.update_entry(entry_id=existing.entry_id, status=status, is_late=bool(is_late), notes=notes)
            entry_id = existing.entry_id
            logger.info("Attendance entry %s updated (session=%s student=%s)", entry_id, session.session_id, student_id)
        else:
            entry_id = self._attendance.create_entry(
                session_id=session.session_id,
                student_id=student_id,
                status=status,
                is_late=bool(is_late),
                notes=notes,
            )
            logger.info("Attendance entry %s created (session=%s student=%s)", entry_id, session.session_id, student_id)

        return self.get_entry(entry_id)

    def update_entry(
        self,
        *,
        current_role: Role,
        teacher_id: Optional[int],
        entry_id: int,
        status=None,
        is_late: Optional[bool] = None,
        notes: object = UNCHANGED,
    ) -> AttendanceEntry:
        entry = self.get_entry(entry_id)
        session = self._get_session(entry.session_id)
        self._check_can_record(session, current_role=current_role, teacher_id=teacher_id)

        if status is not None:
            status = require_enum(AttendanceStatus, status, "Status")
        if notes is not UNCHANGED:
            notes = _clean_notes(notes)

        self._attendance.update_entry(
            entry_id=entry.entry_id,
            status=status,
            is_late=bool(is_late) if is_late is not None else None,
            notes=notes,
        )
        logger.info("Attendance entry %s updated", entry.entry_id)
        return self.get_entry(entry.entry_id)

    def delete_entry(self, *, current_role: Role, teacher_id: Optional[int], entry_id: int) -> None:
        entry = self.get_entry(entry_id)
        session = self._get_session(entry.session_id)
        self._check_can_record(session, current_role=current_role, teacher_id=teacher_id)

        if not self._attendance.delete_by_id(entry.entry_id):
            raise EntryNotFoundError(f"Attendance entry {entry_id} not found")
        logger.info("Attendance entry %s deleted", entry.entry_id)

    def get_entry(self, entry_id: int) -> AttendanceEntry:
        entry = self._attendance.get_by_id(int(entry_id))
        if not entry:
            raise EntryNotFoundError(f"Attendance entry {entry_id} not found")
        return entry

    def list_for_session(self, session_id: int) -> Sequence[AttendanceEntry]:
        session = self._get_session(session_id)
        return self._attendance.list_for_session(session.session_id)

    def summary_for_session(self, session_id: int) -> AttendanceSummary:
        return self._aggregator.summarize(self.list_for_session(session_id))
