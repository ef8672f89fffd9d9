from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Grade, Section
from ..floors.model import ClassIdentifier


@dataclass(frozen=True)
class Student:
    """Domain entity: student enrolled in one class."""

    student_id: int
    name: str
    grade: Grade
    section: Section

    @property
    def class_id(self) -> ClassIdentifier:
        return ClassIdentifier(self.grade, self.section)

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "grade": self.grade.value,
            "section": self.section.value,
            "class": self.class_id.label,
        }
