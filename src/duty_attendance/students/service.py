from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.validators import require_enum, require_non_empty
from ..core.enums import Floor, Role
from ..core.exceptions import AuthorizationError, StudentNotFoundError, ValidationError
from ..floors.mapper import FloorMapper, to_class_identifier
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentInput:
    name: str
    grade: object
    section: object


class StudentService:
    def __init__(self, students: StudentRepository, *, floor_mapper: Optional[FloorMapper] = None):
        self._students = students
        self._floors = floor_mapper or FloorMapper()

    def create(self, *, current_role: Role, name: str, grade, section) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        name = require_non_empty(name, "Name")
        class_id = to_class_identifier(grade, section)

        student_id = self._students.create_student(name=name, grade=class_id.grade, section=class_id.section)
        logger.info("Student %s created in %s", student_id, class_id.label)
        return student_id

    def bulk_import(self, *, current_role: Role, rows: Iterable[StudentInput]) -> list[int]:
        """Validate all rows, then insert them; one bad row rejects the batch."""

        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        validated = []
        for line_no, row in enumerate(rows, start=1):
            try:
                validated.append((require_non_empty(row.name, "Name"), to_class_identifier(row.grade, row.section)))
            except ValidationError as e:
                raise type(e)(f"Row {line_no}: {e}") from e

        ids = [
            self._students.create_student(name=name, grade=class_id.grade, section=class_id.section)
            for name, class_id in validated
        ]
        logger.info("Imported %d students", len(ids))
        return ids

    def update(
        self,
        *,
        current_role: Role,
        student_id: int,
        name: Optional[str] = None,
        grade=None,
        section=None,
    ) -> Student:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")
        student = self.get(student_id)

        if name is not None:
            name = require_non_empty(name, "Name")

        # Validate the resulting class, not just the changed half of it.
        class_id = to_class_identifier(
            grade if grade is not None else student.grade,
            section if section is not None else student.section,
        )

        self._students.update_student(
            student_id=student.student_id,
            name=name,
            grade=class_id.grade if grade is not None else None,
            section=class_id.section if section is not None else None,
        )
        logger.info("Student %s updated", student.student_id)
        return self.get(student.student_id)

    def delete(self, *, current_role: Role, student_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        self.get(student_id)
        if not self._students.delete_by_id(int(student_id)):
            raise ValidationError("Failed to delete student")
        logger.info("Student %s deleted", student_id)

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise StudentNotFoundError(f"Student {student_id} not found")
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def list_by_floor(self, floor) -> Sequence[Student]:
        """Roster of every student whose class sits on ``floor``."""

        floor = require_enum(Floor, floor, "Floor")
        return self._students.list_by_classes(self._floors.classes_on_floor(floor))
