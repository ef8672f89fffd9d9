from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    """Domain entity: teacher, optionally linked to a login account."""

    teacher_id: int
    name: str
    nip: str
    user_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {"teacher_id": self.teacher_id, "name": self.name, "nip": self.nip, "user_id": self.user_id}
