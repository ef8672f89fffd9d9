from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, AttendanceSummary


class AttendanceAggregator:
    """Counts entries per status plus how many were marked late.

    Only recorded entries count: a student with no entry is not absent.
    Lateness is counted whatever the status is.
    """

    def summarize(self, entries: Iterable[AttendanceEntry]) -> AttendanceSummary:
        statuses: Counter[AttendanceStatus] = Counter()
        total = 0
        late = 0

        for entry in entries:
            status = AttendanceStatus(entry.status)
            statuses[status] += 1
            total += 1
            if entry.is_late:
                late += 1

        return AttendanceSummary(
            total=total,
            present=statuses[AttendanceStatus.PRESENT],
            sick=statuses[AttendanceStatus.SICK],
            permission=statuses[AttendanceStatus.PERMISSION],
            absent=statuses[AttendanceStatus.ABSENT],
            late=late,
        )


def summarize(entries: Iterable[AttendanceEntry]) -> AttendanceSummary:
    return AttendanceAggregator().summarize(entries)
