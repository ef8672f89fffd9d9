from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Floor
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import DutySession
from .repository import DutySessionRepository


def _to_session(row: dict) -> DutySession:
    return DutySession(
        session_id=int(row["session_id"]),
        teacher_id=int(row["teacher_id"]),
        duty_date=normalize_mysql_date(row["duty_date"]),
        floor=Floor(str(row["floor"])),
    )


class MySQLDutySessionRepository(DutySessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: int) -> Optional[DutySession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT session_id, teacher_id, duty_date, floor FROM duty_sessions WHERE session_id=%s",
                (int(session_id),),
            )
            row = fetchone(cur)
            return _to_session(row) if row else None

    def create_session(self, *, teacher_id: int, duty_date: date, floor: Floor) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO duty_sessions(teacher_id, duty_date, floor) VALUES(%s,%s,%s)",
                (int(teacher_id), duty_date, floor.value),
            )
            return int(cur.lastrowid)

    def list_for_teacher(self, teacher_id: int) -> Sequence[DutySession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, teacher_id, duty_date, floor
                FROM duty_sessions
                WHERE teacher_id=%s
                ORDER BY duty_date DESC, session_id DESC
                """,
                (int(teacher_id),),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def delete_by_id(self, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Entries go with their session.
            cur.execute("DELETE FROM attendance_entries WHERE session_id=%s", (int(session_id),))
            cur.execute("DELETE FROM duty_sessions WHERE session_id=%s", (int(session_id),))
            return cur.rowcount > 0
