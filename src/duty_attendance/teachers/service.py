from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.validators import require_int, require_non_empty
from ..core.constants import UNCHANGED
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, TeacherNotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import Teacher
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeacherInput:
    name: str
    nip: str
    user_id: Optional[int] = None


class TeacherService:
    def __init__(self, teachers: TeacherRepository, users: UserRepository):
        self._teachers = teachers
        self._users = users

    def _check_user_link(self, user_id: Optional[int], *, teacher_id: Optional[int] = None) -> Optional[int]:
        if user_id is None:
            return None
        user_id = require_int(user_id, "user_id")
        if not self._users.get_by_id(user_id):
            raise ValidationError(f"User {user_id} does not exist")
        linked = self._teachers.get_by_user_id(user_id)
        if linked and linked.teacher_id != teacher_id:
            raise ValidationError(f"User {user_id} is already linked to another teacher")
        return user_id

    def _validate(self, data: TeacherInput) -> TeacherInput:
        name = require_non_empty(data.name, "Name")
        nip = require_non_empty(data.nip, "NIP")
        if self._teachers.get_by_nip(nip):
            raise ValidationError(f"NIP {nip} already exists")
        return TeacherInput(name=name, nip=nip, user_id=self._check_user_link(data.user_id))

    def create(self, *, current_role: Role, name: str, nip: str, user_id: Optional[int] = None) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        data = self._validate(TeacherInput(name=name, nip=nip, user_id=user_id))
        teacher_id = self._teachers.create_teacher(name=data.name, nip=data.nip, user_id=data.user_id)
        logger.info("Teacher %s created", teacher_id)
        return teacher_id

    def bulk_import(self, *, current_role: Role, rows: Iterable[TeacherInput]) -> list[int]:
        """Import many teachers at once.

        Every row is validated before anything is written; one bad row
        rejects the whole batch.
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        validated: list[TeacherInput] = []
        seen_nips: set[str] = set()
        seen_user_ids: set[int] = set()
        for line_no, row in enumerate(rows, start=1):
            try:
                data = self._validate(row)
            except ValidationError as e:
                raise ValidationError(f"Row {line_no}: {e}") from e
            if data.nip in seen_nips:
                raise ValidationError(f"Row {line_no}: NIP {data.nip} is duplicated in the import")
            if data.user_id is not None and data.user_id in seen_user_ids:
                raise ValidationError(f"Row {line_no}: User {data.user_id} is linked twice in the import")
            seen_nips.add(data.nip)
            if data.user_id is not None:
                seen_user_ids.add(data.user_id)
            validated.append(data)

        ids = [self._teachers.create_teacher(name=d.name, nip=d.nip, user_id=d.user_id) for d in validated]
        logger.info("Imported %d teachers", len(ids))
        return ids

    def update(
        self,
        *,
        current_role: Role,
        teacher_id: int,
        name: Optional[str] = None,
        nip: Optional[str] = None,
        user_id: object = UNCHANGED,
    ) -> Teacher:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")
        teacher = self.get(teacher_id)

        if name is not None:
            name = require_non_empty(name, "Name")
        if nip is not None:
            nip = require_non_empty(nip, "NIP")
            other = self._teachers.get_by_nip(nip)
            if other and other.teacher_id != teacher.teacher_id:
                raise ValidationError(f"NIP {nip} already exists")
        if user_id is not UNCHANGED:
            user_id = self._check_user_link(user_id, teacher_id=teacher.teacher_id)

        self._teachers.update_teacher(teacher_id=teacher.teacher_id, name=name, nip=nip, user_id=user_id)
        logger.info("Teacher %s updated", teacher.teacher_id)
        return self.get(teacher.teacher_id)

    def delete(self, *, current_role: Role, teacher_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin role required")

        self.get(teacher_id)
        if not self._teachers.delete_by_id(int(teacher_id)):
            raise ValidationError("Failed to delete teacher")
        logger.info("Teacher %s deleted", teacher_id)

    def get(self, teacher_id: int) -> Teacher:
        teacher = self._teachers.get_by_id(int(teacher_id))
        if not teacher:
            raise TeacherNotFoundError(f"Teacher {teacher_id} not found")
        return teacher

    def list_all(self) -> Sequence[Teacher]:
        return self._teachers.list_all()
