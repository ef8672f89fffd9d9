from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import UNCHANGED
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEntry
from .repository import AttendanceRepository

_COLUMNS = "entry_id, session_id, student_id, status, is_late, notes"


def _to_entry(row: dict) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=int(row["entry_id"]),
        session_id=int(row["session_id"]),
        student_id=int(row["student_id"]),
        status=AttendanceStatus(row["status"]),
        is_late=bool(row.get("is_late")),
        notes=row.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_entries WHERE entry_id=%s", (int(entry_id),))
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def get_for_session_and_student(self, *, session_id: int, student_id: int) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_entries WHERE session_id=%s AND student_id=%s",
                (int(session_id), int(student_id)),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_for_session(self, session_id: int) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_entries WHERE session_id=%s ORDER BY entry_id",
                (int(session_id),),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def create_entry(
        self,
        *,
        session_id: int,
        student_id: int,
        status: AttendanceStatus,
        is_late: bool,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_entries(session_id, student_id, status, is_late, notes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(session_id), int(student_id), status.value, int(bool(is_late)), notes),
            )
            return int(cur.lastrowid)

    def update_entry(
        self,
        *,
        entry_id: int,
        status: Optional[AttendanceStatus] = None,
        is_late: Optional[bool] = None,
        notes: object = UNCHANGED,
    ) -> bool:
        sets: list[str] = ["updated_at=CURRENT_TIMESTAMP"]
        params: list[object] = []
        if status is not None:
            sets.append("status=%s")
            params.append(status.value)
        if is_late is not None:
            sets.append("is_late=%s")
            params.append(int(bool(is_late)))
        if notes is not UNCHANGED:
            sets.append("notes=%s")
            params.append(notes)
        params.append(int(entry_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE attendance_entries SET {', '.join(sets)} WHERE entry_id=%s", tuple(params))
            return cur.rowcount > 0

    def delete_by_id(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0
