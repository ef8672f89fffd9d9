from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import AttendanceSummary
from ..attendance.repository import AttendanceRepository
from ..core.constants import REPORT_FILENAME_TEMPLATE
from ..core.exceptions import SessionNotFoundError, StudentNotFoundError, TeacherNotFoundError
from ..duty.repository import DutySessionRepository
from ..floors.mapper import FloorMapper
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .formatter.base import ReportFormatter
from .formatter.text_formatter import TextReportFormatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    text: str
    summary: AttendanceSummary
    filename: str


class AttendanceReportService:
    def __init__(
        self,
        sessions: DutySessionRepository,
        teachers: TeacherRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        floor_mapper: Optional[FloorMapper] = None,
        aggregator: Optional[AttendanceAggregator] = None,
        formatter: Optional[ReportFormatter] = None,
    ):
        self._sessions = sessions
        self._teachers = teachers
        self._students = students
        self._attendance = attendance
        self._floors = floor_mapper or FloorMapper()
        self._aggregator = aggregator or AttendanceAggregator()
        self._formatter = formatter or TextReportFormatter()

    def build_report(self, session_id: int) -> ReportData:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise SessionNotFoundError(f"Duty session {session_id} not found")

        teacher = self._teachers.get_by_id(session.teacher_id)
        if not teacher:
            raise TeacherNotFoundError(f"Teacher {session.teacher_id} not found")

        roster = list(self._students.list_by_classes(self._floors.classes_on_floor(session.floor)))
        entries = list(self._attendance.list_for_session(session.session_id))

        # Detail lines follow roster order; entries for students who have
        # since left the floor go last, in recording order.
        position = {s.student_id: i for i, s in enumerate(roster)}
        on_roster = sorted((e for e in entries if e.student_id in position), key=lambda e: position[e.student_id])
        off_roster = [e for e in entries if e.student_id not in position]

        for entry in off_roster:
            student = self._students.get_by_id(entry.student_id)
            if not student:
                raise StudentNotFoundError(f"Student {entry.student_id} not found")
            roster.append(student)

        ordered = on_roster + off_roster
        summary = self._aggregator.summarize(ordered)
        text = self._formatter.render(session, teacher, roster, ordered, summary)

        logger.info("Report built for duty session %s (%d entries)", session.session_id, summary.total)
        return ReportData(
            text=text,
            summary=summary,
            filename=REPORT_FILENAME_TEMPLATE.format(session_id=session.session_id),
        )
