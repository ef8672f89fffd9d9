from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from duty_attendance.attendance.model import AttendanceEntry
from duty_attendance.container import build_services
from duty_attendance.core.constants import UNCHANGED
from duty_attendance.core.enums import AttendanceStatus, Floor, Grade, Role, Section
from duty_attendance.duty.model import DutySession
from duty_attendance.floors.model import ClassIdentifier
from duty_attendance.students.model import Student
from duty_attendance.teachers.model import Teacher
from duty_attendance.users.model import User


class InMemoryUsers:
    def __init__(self):
        self.rows: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.rows.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.rows.values() if u.username == username), None)

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        self._id += 1
        self.rows[self._id] = User(user_id=self._id, username=username, password_hash=password_hash, role=role)
        return self._id

    def update_user(self, *, user_id: int, username=None, password_hash=None, role=None) -> bool:
        user = self.rows.get(user_id)
        if not user:
            return False
        self.rows[user_id] = replace(
            user,
            username=username if username is not None else user.username,
            password_hash=password_hash if password_hash is not None else user.password_hash,
            role=role if role is not None else user.role,
        )
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.rows.pop(user_id, None) is not None

    def list_all(self):
        return sorted(self.rows.values(), key=lambda u: u.username)


class InMemoryTeachers:
    def __init__(self):
        self.rows: dict[int, Teacher] = {}
        self._id = 0

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self.rows.get(teacher_id)

    def get_by_nip(self, nip: str) -> Optional[Teacher]:
        return next((t for t in self.rows.values() if t.nip == nip), None)

    def get_by_user_id(self, user_id: int) -> Optional[Teacher]:
        return next((t for t in self.rows.values() if t.user_id == user_id), None)

    def create_teacher(self, *, name: str, nip: str, user_id: Optional[int] = None) -> int:
        self._id += 1
        self.rows[self._id] = Teacher(teacher_id=self._id, name=name, nip=nip, user_id=user_id)
        return self._id

    def update_teacher(self, *, teacher_id: int, name=None, nip=None, user_id=UNCHANGED) -> bool:
        teacher = self.rows.get(teacher_id)
        if not teacher:
            return False
        self.rows[teacher_id] = replace(
            teacher,
            name=name if name is not None else teacher.name,
            nip=nip if nip is not None else teacher.nip,
            user_id=teacher.user_id if user_id is UNCHANGED else user_id,
        )
        return True

    def delete_by_id(self, teacher_id: int) -> bool:
        return self.rows.pop(teacher_id, None) is not None

    def list_all(self):
        return sorted(self.rows.values(), key=lambda t: t.name)


class InMemoryStudents:
    def __init__(self):
        self.rows: dict[int, Student] = {}
        self._id = 0

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.rows.get(student_id)

    def create_student(self, *, name: str, grade: Grade, section: Section) -> int:
        self._id += 1
        self.rows[self._id] = Student(student_id=self._id, name=name, grade=grade, section=section)
        return self._id

    def update_student(self, *, student_id: int, name=None, grade=None, section=None) -> bool:
        student = self.rows.get(student_id)
        if not student:
            return False
        self.rows[student_id] = replace(
            student,
            name=name if name is not None else student.name,
            grade=grade if grade is not None else student.grade,
            section=section if section is not None else student.section,
        )
        return True

    def delete_by_id(self, student_id: int) -> bool:
        return self.rows.pop(student_id, None) is not None

    def list_all(self):
        return sorted(self.rows.values(), key=lambda s: (s.grade.value, s.section.value, s.name, s.student_id))

    def list_by_classes(self, classes):
        wanted = set(classes)
        return [s for s in self.list_all() if ClassIdentifier(s.grade, s.section) in wanted]


class InMemorySessions:
    def __init__(self, attendance: Optional["InMemoryAttendance"] = None):
        self.rows: dict[int, DutySession] = {}
        self._attendance = attendance
        self._id = 0

    def get_by_id(self, session_id: int) -> Optional[DutySession]:
        return self.rows.get(session_id)

    def create_session(self, *, teacher_id: int, duty_date: date, floor: Floor) -> int:
        self._id += 1
        self.rows[self._id] = DutySession(session_id=self._id, teacher_id=teacher_id, duty_date=duty_date, floor=floor)
        return self._id

    def list_for_teacher(self, teacher_id: int):
        items = [s for s in self.rows.values() if s.teacher_id == teacher_id]
        return sorted(items, key=lambda s: (s.duty_date, s.session_id), reverse=True)

    def delete_by_id(self, session_id: int) -> bool:
        if self.rows.pop(session_id, None) is None:
            return False
        if self._attendance is not None:
            self._attendance.drop_session(session_id)
        return True


class InMemoryAttendance:
    def __init__(self):
        self.rows: dict[int, AttendanceEntry] = {}
        self._id = 0

    def get_by_id(self, entry_id: int) -> Optional[AttendanceEntry]:
        return self.rows.get(entry_id)

    def get_for_session_and_student(self, *, session_id: int, student_id: int) -> Optional[AttendanceEntry]:
        return next(
            (e for e in self.rows.values() if e.session_id == session_id and e.student_id == student_id),
            None,
        )

    def list_for_session(self, session_id: int):
        return [e for _, e in sorted(self.rows.items()) if e.session_id == session_id]

    def create_entry(self, *, session_id: int, student_id: int, status, is_late: bool, notes=None) -> int:
        self._id += 1
        self.rows[self._id] = AttendanceEntry(
            entry_id=self._id,
            session_id=session_id,
            student_id=student_id,
            status=status,
            is_late=is_late,
            notes=notes,
        )
        return self._id

    def update_entry(self, *, entry_id: int, status=None, is_late=None, notes=UNCHANGED) -> bool:
        entry = self.rows.get(entry_id)
        if not entry:
            return False
        self.rows[entry_id] = replace(
            entry,
            status=status if status is not None else entry.status,
            is_late=is_late if is_late is not None else entry.is_late,
            notes=entry.notes if notes is UNCHANGED else notes,
        )
        return True

    def delete_by_id(self, entry_id: int) -> bool:
        return self.rows.pop(entry_id, None) is not None

    def drop_session(self, session_id: int) -> None:
        for entry_id in [k for k, e in self.rows.items() if e.session_id == session_id]:
            del self.rows[entry_id]


@pytest.fixture
def container():
    attendance = InMemoryAttendance()
    return build_services(
        users_repo=InMemoryUsers(),
        teachers_repo=InMemoryTeachers(),
        students_repo=InMemoryStudents(),
        sessions_repo=InMemorySessions(attendance),
        attendance_repo=attendance,
    )


@pytest.fixture
def school(container):
    """A small school: one admin, one duty teacher with a login, a second
    teacher, students on floors 2 and 3, and one duty session on floor 2.
    """

    users = container.users_repo
    teachers = container.teachers_repo
    students = container.students_repo

    admin_id = users.create_user(username="admin", password_hash=generate_password_hash("password123"), role=Role.ADMIN)
    guru_id = users.create_user(username="guru1", password_hash=generate_password_hash("password123"), role=Role.TEACHER)
    other_user_id = users.create_user(username="guru2", password_hash=generate_password_hash("password123"), role=Role.TEACHER)

    teacher_id = teachers.create_teacher(name="Budi Santoso", nip="198501012010011001", user_id=guru_id)
    other_teacher_id = teachers.create_teacher(name="Siti Aminah", nip="198703152011012002", user_id=other_user_id)

    ids = {
        "andi": students.create_student(name="Andi", grade=Grade.NINTH, section=Section.A),
        "citra": students.create_student(name="Citra", grade=Grade.NINTH, section=Section.B),
        "bayu": students.create_student(name="Bayu", grade=Grade.NINTH, section=Section.A),
        "dewi": students.create_student(name="Dewi", grade=Grade.NINTH, section=Section.G),
        "eko": students.create_student(name="Eko", grade=Grade.SEVENTH, section=Section.C),
    }

    session_id = container.sessions_repo.create_session(
        teacher_id=teacher_id,
        duty_date=date(2026, 1, 5),
        floor=Floor.SECOND,
    )

    return {
        "admin_id": admin_id,
        "guru_id": guru_id,
        "teacher_id": teacher_id,
        "other_teacher_id": other_teacher_id,
        "students": ids,
        "session_id": session_id,
    }


@pytest.fixture
def record(container, school):
    """Record attendance on the school's session as its duty teacher."""

    def _record(name: str, status: AttendanceStatus, **kwargs) -> AttendanceEntry:
        return container.attendance_service.record(
            current_role=Role.TEACHER,
            teacher_id=school["teacher_id"],
            session_id=school["session_id"],
            student_id=school["students"][name],
            status=status,
            **kwargs,
        )

    return _record
