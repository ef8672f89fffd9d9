import pytest

from duty_attendance.core.enums import Role
from duty_attendance.core.exceptions import AuthorizationError, TeacherNotFoundError, ValidationError
from duty_attendance.teachers.service import TeacherInput


def test_create_teacher(container, school):
    teacher_id = container.teacher_service.create(current_role=Role.ADMIN, name=" Rina ", nip="1990")

    teacher = container.teacher_service.get(teacher_id)
    assert teacher.name == "Rina"
    assert teacher.user_id is None


def test_create_teacher_requires_admin(container, school):
    with pytest.raises(AuthorizationError):
        container.teacher_service.create(current_role=Role.TEACHER, name="Rina", nip="1990")


def test_create_teacher_duplicate_nip(container, school):
    with pytest.raises(ValidationError):
        container.teacher_service.create(current_role=Role.ADMIN, name="Copy", nip="198501012010011001")


def test_user_can_link_to_one_teacher_only(container, school):
    with pytest.raises(ValidationError):
        container.teacher_service.create(current_role=Role.ADMIN, name="Rina", nip="1990", user_id=school["guru_id"])


def test_link_to_missing_user(container, school):
    with pytest.raises(ValidationError):
        container.teacher_service.create(current_role=Role.ADMIN, name="Rina", nip="1990", user_id=999)


def test_bulk_import_all_or_nothing(container, school):
    before = len(container.teacher_service.list_all())

    with pytest.raises(ValidationError, match="Row 2"):
        container.teacher_service.bulk_import(
            current_role=Role.ADMIN,
            rows=[TeacherInput(name="Rina", nip="1990"), TeacherInput(name="", nip="1991")],
        )

    assert len(container.teacher_service.list_all()) == before


def test_bulk_import_duplicate_nip_in_batch(container, school):
    with pytest.raises(ValidationError, match="Row 2"):
        container.teacher_service.bulk_import(
            current_role=Role.ADMIN,
            rows=[TeacherInput(name="Rina", nip="1990"), TeacherInput(name="Rudi", nip="1990")],
        )


def test_bulk_import_same_user_twice_in_batch(container, school):
    user_id = container.users_repo.create_user(username="guru9", password_hash="x", role=Role.TEACHER)
    before = len(container.teacher_service.list_all())

    with pytest.raises(ValidationError, match="Row 2"):
        container.teacher_service.bulk_import(
            current_role=Role.ADMIN,
            rows=[TeacherInput(name="Rina", nip="1990", user_id=user_id), TeacherInput(name="Rudi", nip="1991", user_id=user_id)],
        )

    assert len(container.teacher_service.list_all()) == before
    assert container.teachers_repo.get_by_user_id(user_id) is None


def test_link_with_non_numeric_user_id(container, school):
    with pytest.raises(ValidationError):
        container.teacher_service.create(current_role=Role.ADMIN, name="Rina", nip="1990", user_id="abc")


def test_bulk_import(container, school):
    ids = container.teacher_service.bulk_import(
        current_role=Role.ADMIN,
        rows=[TeacherInput(name="Rina", nip="1990"), TeacherInput(name="Rudi", nip="1991")],
    )

    assert [container.teacher_service.get(i).nip for i in ids] == ["1990", "1991"]


def test_update_teacher_unlinks_user(container, school):
    teacher = container.teacher_service.update(
        current_role=Role.ADMIN, teacher_id=school["teacher_id"], user_id=None
    )
    assert teacher.user_id is None
    assert teacher.nip == "198501012010011001"


def test_update_teacher_keeps_link_by_default(container, school):
    teacher = container.teacher_service.update(current_role=Role.ADMIN, teacher_id=school["teacher_id"], name="Pak Budi")
    assert teacher.name == "Pak Budi"
    assert teacher.user_id == school["guru_id"]


def test_delete_teacher(container, school):
    container.teacher_service.delete(current_role=Role.ADMIN, teacher_id=school["other_teacher_id"])

    with pytest.raises(TeacherNotFoundError):
        container.teacher_service.get(school["other_teacher_id"])
