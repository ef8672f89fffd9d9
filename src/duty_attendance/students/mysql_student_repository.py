from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Grade, Section
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..floors.model import ClassIdentifier
from .model import Student
from .repository import StudentRepository

_ORDER_BY = "ORDER BY grade, section, name, student_id"


def _to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["student_id"]),
        name=row["name"],
        grade=Grade(str(row["grade"])),
        section=Section(str(row["section"])),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT student_id, name, grade, section FROM students WHERE student_id=%s",
                (int(student_id),),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def create_student(self, *, name: str, grade: Grade, section: Section) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(name, grade, section) VALUES(%s,%s,%s)",
                (name, grade.value, section.value),
            )
            return int(cur.lastrowid)

    def update_student(
        self,
        *,
        student_id: int,
        name: Optional[str] = None,
        grade: Optional[Grade] = None,
        section: Optional[Section] = None,
    ) -> bool:
        sets: list[str] = ["updated_at=CURRENT_TIMESTAMP"]
        params: list[object] = []
        if name is not None:
            sets.append("name=%s")
            params.append(name)
        if grade is not None:
            sets.append("grade=%s")
            params.append(grade.value)
        if section is not None:
            sets.append("section=%s")
            params.append(section.value)
        params.append(int(student_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE students SET {', '.join(sets)} WHERE student_id=%s", tuple(params))
            return cur.rowcount > 0

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT student_id, name, grade, section FROM students {_ORDER_BY}")
            return [_to_student(r) for r in fetchall(cur)]

    def list_by_classes(self, classes: Sequence[ClassIdentifier]) -> Sequence[Student]:
        if not classes:
            return []

        clauses = " OR ".join(["(grade=%s AND section=%s)"] * len(classes))
        params: list[object] = []
        for c in classes:
            params.extend([c.grade.value, c.section.value])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT student_id, name, grade, section FROM students WHERE {clauses} {_ORDER_BY}",
                tuple(params),
            )
            return [_to_student(r) for r in fetchall(cur)]
