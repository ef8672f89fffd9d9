from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one student's recorded status for one duty session."""

    entry_id: int
    session_id: int
    student_id: int
    status: AttendanceStatus
    is_late: bool = False
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "session_id": self.session_id,
            "student_id": self.student_id,
            "status": self.status.value,
            "is_late": self.is_late,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: per-status and lateness counts for one duty session.

    Derived from the recorded entries, never persisted.
    """

    total: int = 0
    present: int = 0
    sick: int = 0
    permission: int = 0
    absent: int = 0
    late: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
