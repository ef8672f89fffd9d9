import pytest

from duty_attendance.main import create_app


@pytest.fixture
def app(monkeypatch, container, school):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username, password="password123"):
    return client.post("/api/login", json={"username": username, "password": password})


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_login_and_session(client, school):
    resp = login(client, "guru1")
    assert resp.status_code == 200
    assert resp.get_json()["teacher_id"] == school["teacher_id"]

    me = client.get("/api/session").get_json()
    assert me["username"] == "guru1"
    assert me["role"] == "teacher"


def test_login_wrong_password(client):
    resp = login(client, "guru1", "nope")
    assert resp.status_code == 401
    assert resp.get_json()["type"] == "AuthenticationError"


def test_logout_clears_session(client):
    login(client, "guru1")
    client.post("/api/logout")
    assert client.get("/api/session").status_code == 401


def test_requires_login(client):
    assert client.get("/api/students").status_code == 401


def test_teacher_cannot_manage_students(client):
    login(client, "guru1")
    resp = client.post("/api/students", json={"name": "X", "grade": 7, "section": "A"})
    assert resp.status_code == 403


def test_admin_creates_student_and_floor_roster(client):
    login(client, "admin")

    resp = client.post("/api/students", json={"name": "Fajar", "grade": 9, "section": "C"})
    assert resp.status_code == 201
    assert resp.get_json()["class"] == "9C"

    names = [s["name"] for s in client.get("/api/floors/2/students").get_json()]
    assert names == ["Andi", "Bayu", "Citra", "Fajar"]


def test_invalid_class_is_bad_request(client):
    login(client, "admin")
    resp = client.post("/api/students", json={"name": "Fajar", "grade": 5, "section": "A"})
    assert resp.status_code == 400
    assert resp.get_json()["type"] == "InvalidClassError"


def test_bulk_import_students(client):
    login(client, "admin")
    resp = client.post(
        "/api/students/import",
        json={"students": [{"name": "Gita", "grade": 7, "section": "B"}, {"name": "Hadi", "grade": 8, "section": "G"}]},
    )
    assert resp.status_code == 201
    assert resp.get_json()["imported"] == 2


def test_non_json_body(client):
    login(client, "admin")
    resp = client.post("/api/students", data="name=x")
    assert resp.status_code == 400


def test_duty_flow_and_report(client, school):
    login(client, "guru1")
    sid = school["session_id"]
    students = school["students"]

    sessions = client.get("/api/me/duty-sessions").get_json()
    assert [s["session_id"] for s in sessions] == [sid]

    resp = client.post(
        f"/api/duty-sessions/{sid}/attendance",
        json={"student_id": students["citra"], "status": "sick", "notes": "Fever"},
    )
    assert resp.status_code == 201
    resp = client.post(
        f"/api/duty-sessions/{sid}/attendance",
        json={"student_id": students["andi"], "status": "present", "is_late": True},
    )
    entry_id = resp.get_json()["entry_id"]

    resp = client.patch(f"/api/attendance/{entry_id}", json={"notes": "Flat tyre"})
    assert resp.get_json()["is_late"] is True
    assert resp.get_json()["notes"] == "Flat tyre"

    summary = client.get(f"/api/duty-sessions/{sid}/summary").get_json()
    assert summary == {"total": 2, "present": 1, "sick": 1, "permission": 0, "absent": 0, "late": 1}

    resp = client.get(f"/api/duty-sessions/{sid}/report")
    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert f"attendance-report-{sid}.txt" in resp.headers["Content-Disposition"]
    text = resp.get_data(as_text=True)
    assert text.startswith("ATTENDANCE REPORT\n")
    assert text.endswith("Andi (9A) - present (Late) - Flat tyre\nCitra (9B) - sick - Fever")


def test_is_late_must_be_boolean(client, school):
    login(client, "guru1")
    resp = client.post(
        f"/api/duty-sessions/{school['session_id']}/attendance",
        json={"student_id": school["students"]["andi"], "status": "present", "is_late": "yes"},
    )
    assert resp.status_code == 400


def test_other_teacher_forbidden(client, school):
    login(client, "guru2")
    resp = client.post(
        f"/api/duty-sessions/{school['session_id']}/attendance",
        json={"student_id": school["students"]["andi"], "status": "present"},
    )
    assert resp.status_code == 403


def test_unknown_session_is_404(client):
    login(client, "admin")
    assert client.get("/api/duty-sessions/999/report").status_code == 404
    assert client.get("/api/duty-sessions/999").status_code == 404


def test_admin_creates_duty_session(client, school):
    login(client, "admin")
    resp = client.post(
        "/api/duty-sessions",
        json={"teacher_id": school["other_teacher_id"], "duty_date": "2026-01-06", "floor": "3"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["floor"] == "3"

    listed = client.get(f"/api/teachers/{school['other_teacher_id']}/duty-sessions").get_json()
    assert [d["duty_date"] for d in listed] == ["2026-01-06"]


def test_admin_user_management(client, school):
    login(client, "admin")

    resp = client.post("/api/users", json={"username": "guru3", "password": "secret1", "role": "teacher"})
    assert resp.status_code == 201
    user = resp.get_json()
    assert "password_hash" not in user

    resp = client.delete(f"/api/users/{school['admin_id']}")
    assert resp.status_code == 400

    resp = client.delete(f"/api/users/{user['user_id']}")
    assert resp.status_code == 200
    assert client.get(f"/api/users/{user['user_id']}").status_code == 404


def test_unknown_route_is_404(client):
    assert client.get("/api/nothing-here").status_code == 404


def test_bulk_import_rejects_non_object_row(client, container):
    login(client, "admin")
    before = len(container.student_service.list_all())

    resp = client.post(
        "/api/students/import",
        json={"students": [{"name": "Zaki", "grade": 7, "section": "A"}, "junk"]},
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Row 2:")
    assert len(container.student_service.list_all()) == before


def test_teacher_import_rejects_non_object_row(client, container):
    login(client, "admin")
    before = len(container.teacher_service.list_all())

    resp = client.post("/api/teachers/import", json={"teachers": [{"name": "Rina", "nip": "1990"}, 7]})

    assert resp.status_code == 400
    assert len(container.teacher_service.list_all()) == before


def test_non_numeric_student_id_is_bad_request(client, school):
    login(client, "guru1")
    resp = client.post(
        f"/api/duty-sessions/{school['session_id']}/attendance",
        json={"student_id": "abc", "status": "present"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["type"] == "ValidationError"


def test_numeric_string_student_id_accepted(client, school):
    login(client, "guru1")
    resp = client.post(
        f"/api/duty-sessions/{school['session_id']}/attendance",
        json={"student_id": str(school["students"]["andi"]), "status": "present"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["student_id"] == school["students"]["andi"]


@pytest.mark.parametrize("teacher_id", ["abc", True, 1.5])
def test_non_numeric_teacher_id_is_bad_request(client, teacher_id):
    login(client, "admin")
    resp = client.post(
        "/api/duty-sessions",
        json={"teacher_id": teacher_id, "duty_date": "2026-01-06", "floor": "3"},
    )
    assert resp.status_code == 400
