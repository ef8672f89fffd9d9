from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Floor
from .model import DutySession


class DutySessionRepository(Protocol):
    def get_by_id(self, session_id: int) -> Optional[DutySession]:
        raise NotImplementedError

    def create_session(self, *, teacher_id: int, duty_date: date, floor: Floor) -> int:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: int) -> Sequence[DutySession]:
        """Newest duty date first."""

        raise NotImplementedError

    def delete_by_id(self, session_id: int) -> bool:
        """Delete the session together with its attendance entries."""

        raise NotImplementedError
