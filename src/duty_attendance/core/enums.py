from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    TEACHER = "teacher"


class Grade(str, Enum):
    SEVENTH = "7"
    EIGHTH = "8"
    NINTH = "9"


class Section(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"


class Floor(str, Enum):
    """Building level a duty session covers."""

    SECOND = "2"
    THIRD = "3"
    FOURTH = "4"


class AttendanceStatus(str, Enum):
    """Recorded status of one student for one duty session."""

    PRESENT = "present"
    SICK = "sick"
    PERMISSION = "permission"
    ABSENT = "absent"
