from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.aggregator import AttendanceAggregator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .duty.mysql_duty_repository import MySQLDutySessionRepository
from .duty.repository import DutySessionRepository
from .duty.service import DutySessionService
from .floors.mapper import FloorMapper
from .reports.formatter.text_formatter import TextReportFormatter
from .reports.service import AttendanceReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    teachers_repo: TeacherRepository
    students_repo: StudentRepository
    sessions_repo: DutySessionRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    teacher_service: TeacherService
    student_service: StudentService
    duty_service: DutySessionService
    attendance_service: AttendanceService
    report_service: AttendanceReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    users_repo: UserRepository,
    teachers_repo: TeacherRepository,
    students_repo: StudentRepository,
    sessions_repo: DutySessionRepository,
    attendance_repo: AttendanceRepository,
    floor_mapper: Optional[FloorMapper] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any set of repositories (MySQL or in-memory)."""

    floor_mapper = floor_mapper or FloorMapper()
    aggregator = AttendanceAggregator()

    return Container(
        users_repo=users_repo,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo, teachers_repo),
        user_service=UserService(users_repo),
        teacher_service=TeacherService(teachers_repo, users_repo),
        student_service=StudentService(students_repo, floor_mapper=floor_mapper),
        duty_service=DutySessionService(sessions_repo, teachers_repo),
        attendance_service=AttendanceService(attendance_repo, sessions_repo, students_repo, aggregator=aggregator),
        report_service=AttendanceReportService(
            sessions_repo,
            teachers_repo,
            students_repo,
            attendance_repo,
            floor_mapper=floor_mapper,
            aggregator=aggregator,
            formatter=TextReportFormatter(),
        ),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        users_repo=MySQLUserRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        sessions_repo=MySQLDutySessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
