from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import UNCHANGED
from .model import Teacher


class TeacherRepository(Protocol):
    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_nip(self, nip: str) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def create_teacher(self, *, name: str, nip: str, user_id: Optional[int] = None) -> int:
        raise NotImplementedError

    def update_teacher(
        self,
        *,
        teacher_id: int,
        name: Optional[str] = None,
        nip: Optional[str] = None,
        user_id: object = UNCHANGED,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, teacher_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError
