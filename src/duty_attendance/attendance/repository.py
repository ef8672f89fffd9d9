from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import UNCHANGED
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def get_for_session_and_student(self, *, session_id: int, student_id: int) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def list_for_session(self, session_id: int) -> Sequence[AttendanceEntry]:
        """All entries of a session, in entry id order."""

        raise NotImplementedError

    def create_entry(
        self,
        *,
        session_id: int,
        student_id: int,
        status: AttendanceStatus,
        is_late: bool,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_entry(
        self,
        *,
        entry_id: int,
        status: Optional[AttendanceStatus] = None,
        is_late: Optional[bool] = None,
        notes: object = UNCHANGED,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError
