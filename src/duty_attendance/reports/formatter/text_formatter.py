from __future__ import annotations

from typing import Sequence

from ...attendance.model import AttendanceEntry, AttendanceSummary
from ...common.datetime_utils import format_report_date
from ...core.exceptions import StudentNotFoundError
from ...duty.model import DutySession
from ...students.model import Student
from ...teachers.model import Teacher
from .base import ReportFormatter

# Label and summary field, in the order they are printed.
SUMMARY_LINES = (
    ("Total Students", "total"),
    ("Present", "present"),
    ("Sick", "sick"),
    ("Permission", "permission"),
    ("Absent", "absent"),
    ("Late", "late"),
)


class TextReportFormatter(ReportFormatter):
    """Plain-text duty report: header, summary block, one line per entry.

    Detail lines follow the order of ``entries``; the roster is only used to
    look up each student's name and class.
    """

    def render(
        self,
        session: DutySession,
        teacher: Teacher,
        roster: Sequence[Student],
        entries: Sequence[AttendanceEntry],
        summary: AttendanceSummary,
    ) -> str:
        students = {s.student_id: s for s in roster}

        lines = [
            "ATTENDANCE REPORT",
            "================",
            f"Teacher: {teacher.name} ({teacher.nip})",
            f"Date: {format_report_date(session.duty_date)}",
            f"Floor: {session.floor.value}",
            "",
            "SUMMARY:",
        ]
        lines.extend(f"{label}: {getattr(summary, field)}" for label, field in SUMMARY_LINES)
        lines.extend(["", "DETAILED LIST:", "=============="])

        for entry in entries:
            student = students.get(entry.student_id)
            if student is None:
                raise StudentNotFoundError(f"Student {entry.student_id} is not in the report roster")
            lines.append(self._detail_line(student, entry))

        return "\n".join(lines)

    def _detail_line(self, student: Student, entry: AttendanceEntry) -> str:
        line = f"{student.name} ({student.class_id.label}) - {entry.status.value}"
        if entry.is_late:
            line += " (Late)"
        if entry.notes:
            line += f" - {entry.notes}"
        return line
