from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.enums import Floor, Grade, Section


@dataclass(frozen=True, order=True)
class ClassIdentifier:
    """A class in the school: grade plus section (e.g. 9G)."""

    grade: Grade
    section: Section

    @property
    def label(self) -> str:
        return f"{self.grade.value}{self.section.value}"


def _classes(grade: Grade, sections: str) -> frozenset[ClassIdentifier]:
    return frozenset(ClassIdentifier(grade, Section(s)) for s in sections)


# Every grade runs sections A-G.
CLASS_CATALOGUE: frozenset[ClassIdentifier] = frozenset(
    ClassIdentifier(grade, section) for grade in Grade for section in Section
)

# Which classes sit on which floor of the building.
DEFAULT_FLOOR_LAYOUT: Mapping[Floor, frozenset[ClassIdentifier]] = {
    Floor.SECOND: _classes(Grade.NINTH, "ABCDEF"),
    Floor.THIRD: _classes(Grade.EIGHTH, "ABCDEF") | _classes(Grade.NINTH, "G"),
    Floor.FOURTH: _classes(Grade.SEVENTH, "ABCDEFG") | _classes(Grade.EIGHTH, "G"),
}
