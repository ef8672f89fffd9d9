from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceEntry, AttendanceSummary
from ...duty.model import DutySession
from ...students.model import Student
from ...teachers.model import Teacher


class ReportFormatter(ABC):
    """Formatter interface (Strategy Pattern for report output)."""

    @abstractmethod
    def render(
        self,
        session: DutySession,
        teacher: Teacher,
        roster: Sequence[Student],
        entries: Sequence[AttendanceEntry],
        summary: AttendanceSummary,
    ) -> str:
        raise NotImplementedError
