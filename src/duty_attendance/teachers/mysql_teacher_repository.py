from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import UNCHANGED
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Teacher
from .repository import TeacherRepository


def _to_teacher(row: dict) -> Teacher:
    return Teacher(
        teacher_id=int(row["teacher_id"]),
        name=row["name"],
        nip=row["nip"],
        user_id=int(row["user_id"]) if row.get("user_id") is not None else None,
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, value) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT teacher_id, name, nip, user_id FROM teachers WHERE {where}=%s", (value,))
            row = fetchone(cur)
            return _to_teacher(row) if row else None

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._get_one("teacher_id", int(teacher_id))

    def get_by_nip(self, nip: str) -> Optional[Teacher]:
        return self._get_one("nip", nip)

    def get_by_user_id(self, user_id: int) -> Optional[Teacher]:
        return self._get_one("user_id", int(user_id))

    def create_teacher(self, *, name: str, nip: str, user_id: Optional[int] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teachers(name, nip, user_id) VALUES(%s,%s,%s)",
                (name, nip, user_id),
            )
            return int(cur.lastrowid)

    def update_teacher(
        self,
        *,
        teacher_id: int,
        name: Optional[str] = None,
        nip: Optional[str] = None,
        user_id: object = UNCHANGED,
    ) -> bool:
        sets: list[str] = ["updated_at=CURRENT_TIMESTAMP"]
        params: list[object] = []
        if name is not None:
            sets.append("name=%s")
            params.append(name)
        if nip is not None:
            sets.append("nip=%s")
            params.append(nip)
        if user_id is not UNCHANGED:
            sets.append("user_id=%s")
            params.append(user_id)
        params.append(int(teacher_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE teachers SET {', '.join(sets)} WHERE teacher_id=%s", tuple(params))
            return cur.rowcount > 0

    def delete_by_id(self, teacher_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teachers WHERE teacher_id=%s", (int(teacher_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT teacher_id, name, nip, user_id FROM teachers ORDER BY name, teacher_id")
            return [_to_teacher(r) for r in fetchall(cur)]
