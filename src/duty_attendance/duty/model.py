from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import Floor


@dataclass(frozen=True)
class DutySession:
    """Domain entity: one teacher supervising one floor on one date.

    Immutable once created; it can only be deleted.
    """

    session_id: int
    teacher_id: int
    duty_date: date
    floor: Floor

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "teacher_id": self.teacher_id,
            "duty_date": self.duty_date.strftime("%Y-%m-%d"),
            "floor": self.floor.value,
        }
