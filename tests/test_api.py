from __future__ import annotations

import pytest


def _create_student(client, **overrides):
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "department": "Computer Science",
        "studentId": "ST1",
        "totalFees": 1000,
    }
    payload.update(overrides)
    return client.post("/api/students", json=payload)


def test_health_needs_no_login(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_login_with_wrong_password_is_rejected(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_login_sets_session_marker_and_logout_clears_it(client, storage):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert resp.get_json()["user"] == {"id": "1", "username": "admin", "role": "admin"}
    assert storage.read("currentUser") is not None
    assert client.get("/api/auth/me").status_code == 200

    client.post("/api/auth/logout")
    assert storage.read("currentUser") is None
    assert client.get("/api/auth/me").status_code == 401


def test_data_routes_require_login(client):
    assert client.get("/api/students").status_code == 401
    assert client.get("/api/dashboard").status_code == 401


def test_register_validates_role(client):
    bad = client.post("/api/auth/register", json={"username": "x", "password": "y", "role": "janitor"})
    ok = client.post("/api/auth/register", json={"username": "x", "password": "y", "role": "teacher"})

    assert bad.status_code == 400
    assert ok.status_code == 201
    assert ok.get_json()["user"]["role"] == "teacher"


def test_student_crud(admin_client):
    created = _create_student(admin_client)
    assert created.status_code == 201
    student = created.get_json()
    assert student["fees"] == {"total": 1000, "paid": 0, "due": 1000, "lastPayment": ""}

    listed = admin_client.get("/api/students?q=lovelace").get_json()
    assert [s["id"] for s in listed] == [student["id"]]
    assert admin_client.get("/api/students?department=Biology").get_json() == []

    patched = admin_client.patch(f"/api/students/{student['id']}", json={"email": "ada@lovelace.org"})
    assert patched.get_json()["email"] == "ada@lovelace.org"

    assert admin_client.delete(f"/api/students/{student['id']}").status_code == 200
    assert admin_client.get(f"/api/students/{student['id']}").status_code == 404
    assert admin_client.delete(f"/api/students/{student['id']}").status_code == 404


def test_create_student_missing_fields(admin_client):
    resp = _create_student(admin_client, firstName="")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "First name is required"


def test_patch_with_bad_date_is_rejected(admin_client):
    student = _create_student(admin_client).get_json()

    resp = admin_client.patch(f"/api/students/{student['id']}", json={"enrollmentDate": "yesterday"})

    assert resp.status_code == 400


def test_patch_with_non_numeric_fees_is_rejected(admin_client):
    student = _create_student(admin_client).get_json()
    url = f"/api/students/{student['id']}"

    resp = admin_client.patch(url, json={"fees": {"total": "x", "paid": "y", "due": "z"}})

    assert resp.status_code == 400
    assert admin_client.get(url).get_json()["fees"] == student["fees"]
    assert admin_client.get("/api/dashboard").status_code == 200


def test_payments(admin_client):
    student = _create_student(admin_client).get_json()
    url = f"/api/students/{student['id']}/payments"

    too_much = admin_client.post(url, json={"amount": 5000})
    assert too_much.status_code == 400

    paid = admin_client.post(url, json={"amount": 400}).get_json()
    assert paid["fees"]["paid"] == 400
    assert paid["fees"]["due"] == 600
    assert paid["fees"]["lastPayment"] != ""


def test_grades_and_gpa(admin_client):
    student = _create_student(admin_client).get_json()
    url = f"/api/students/{student['id']}/grades"

    assert admin_client.post(url, json={"courseId": "1", "grade": "A", "semester": "Fall 2023"}).status_code == 201
    assert admin_client.post(url, json={"courseId": "2", "grade": "B", "semester": "Fall 2023"}).status_code == 201
    assert admin_client.post(url, json={"courseId": "2", "grade": "Q", "semester": "Fall 2023"}).status_code == 400

    assert len(admin_client.get(url).get_json()) == 2
    gpa = admin_client.get(f"/api/students/{student['id']}/gpa").get_json()
    assert gpa["gpa"] == 3.5
    assert gpa["weightedGpa"] == pytest.approx((12 + 12) / 7)
    assert gpa["standing"] == "Excellent"


def test_gpa_calculator_needs_no_login(client):
    resp = client.post(
        "/api/gpa/calculate",
        json={"courses": [{"grade": "A", "credits": 3}, {"grade": "B", "credits": 4}, {"grade": "", "credits": 3}]},
    )

    assert resp.get_json()["gpa"] == pytest.approx(24 / 7)


def test_attendance(admin_client):
    student = _create_student(admin_client).get_json()
    url = f"/api/students/{student['id']}/attendance"

    for status in ("present", "present", "absent", "late"):
        resp = admin_client.post(url, json={"courseId": "1", "status": status, "date": "2024-02-01"})
        assert resp.status_code == 201

    assert admin_client.post(url, json={"courseId": "1", "status": "present", "date": "02/01/2024"}).status_code == 400
    assert admin_client.get(f"{url}/1/percentage").get_json()["percentage"] == 50
    summary = admin_client.get(f"{url}/summary").get_json()
    assert summary["counts"] == {"present": 2, "absent": 1, "late": 1}


def test_dashboard_seeds_roster(admin_client):
    data = admin_client.get("/api/dashboard").get_json()

    assert data["totalStudents"] == 20
    assert data["totalCourses"] == 3


def test_fixtures_endpoint_is_idempotent(admin_client):
    first = admin_client.post("/api/fixtures", json={"count": 4}).get_json()
    second = admin_client.post("/api/fixtures", json={"count": 9}).get_json()

    assert len(first) == 4
    assert second == first


@pytest.mark.parametrize("count", [-1, 1001])
def test_fixtures_endpoint_rejects_out_of_range_count(admin_client, count):
    resp = admin_client.post("/api/fixtures", json={"count": count})

    assert resp.status_code == 400
    assert admin_client.get("/api/students").get_json() == []


def test_only_admin_can_delete_students(client):
    client.post("/api/auth/register", json={"username": "t", "password": "pw", "role": "teacher"})
    client.post("/api/auth/login", json={"username": "t", "password": "pw"})
    student = _create_student(client).get_json()

    assert client.delete(f"/api/students/{student['id']}").status_code == 403


def test_reference_data(admin_client):
    assert [c["code"] for c in admin_client.get("/api/courses").get_json()] == ["CS101", "CS202", "EE101"]
    assert len(admin_client.get("/api/departments").get_json()) == 5


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False
