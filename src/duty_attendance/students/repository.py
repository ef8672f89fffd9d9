from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Grade, Section
from ..floors.model import ClassIdentifier
from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create_student(self, *, name: str, grade: Grade, section: Section) -> int:
        raise NotImplementedError

    def update_student(
        self,
        *,
        student_id: int,
        name: Optional[str] = None,
        grade: Optional[Grade] = None,
        section: Optional[Section] = None,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_classes(self, classes: Sequence[ClassIdentifier]) -> Sequence[Student]:
        """Roster lookup: students in any of ``classes``.

        Ordered by grade, section, then name.
        """

        raise NotImplementedError
