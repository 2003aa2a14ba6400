from __future__ import annotations

import json
import logging
from datetime import date

from student_records.attendance.model import Attendance
from student_records.core.enums import AttendanceStatus, Role
from student_records.grades.model import NewGrade
from student_records.storage.memory import InMemoryStorage
from student_records.store import DomainStore
from student_records.students.model import Fees, student_to_record
from student_records.users.model import User
from student_records.users.session import SessionStore


def test_admin_is_seeded_once(storage):
    DomainStore(storage)
    assert json.loads(storage.read("users")) == [
        {"id": "1", "username": "admin", "password": "admin123", "role": "admin"}
    ]

    store = DomainStore(storage)
    store.register_user("t", "pw", Role.TEACHER)
    assert len(DomainStore(storage).get_users()) == 2


def test_existing_users_are_not_reseeded():
    storage = InMemoryStorage({"users": json.dumps([{"id": "9", "username": "x", "password": "y", "role": "student"}])})

    store = DomainStore(storage)

    assert store.login_user("admin", "admin123") is None
    assert store.login_user("x", "y").role == Role.STUDENT


def test_courses_are_never_persisted(store, storage):
    store.add_grade(NewGrade(student_id="s", course_id="1", grade="A", semester="Fall"))

    assert "courses" not in storage.keys()
    assert len(store.get_courses()) == 3


def test_round_trip_through_a_fresh_store(store, storage, make_student):
    added = [
        store.add_student(make_student()),
        store.add_student(make_student(first_name="Grace", fees=Fees(total=9000, paid=0, due=9000))),
        store.add_student(make_student(first_name="Alan", email="alan@example.com")),
    ]
    payload = storage.read("students")

    reloaded = DomainStore(storage).get_students()

    assert reloaded == added
    assert json.loads(payload) == [student_to_record(s) for s in reloaded]
    assert storage.read("students") == payload


def test_durable_layout_uses_record_field_names(store, storage, make_student):
    store.add_student(make_student(fees=Fees(total=100, paid=0, due=100)))

    (row,) = json.loads(storage.read("students"))
    assert set(row) == {"id", "firstName", "lastName", "email", "department", "enrollmentDate", "studentId", "fees"}
    assert row["enrollmentDate"] == "2022-09-01"
    assert row["fees"] == {"total": 100, "paid": 0, "due": 100, "lastPayment": ""}


def test_every_call_refreshes_from_storage(storage, make_student):
    first = DomainStore(storage)
    second = DomainStore(storage)

    student = first.add_student(make_student())
    assert second.get_student_by_id(student.id) == student

    second.update_student(student.id, email="changed@example.com")
    assert first.get_student_by_id(student.id).email == "changed@example.com"


def test_unparsable_students_entry_is_discarded(store, storage, caplog):
    storage.write("students", "{not json")

    with caplog.at_level(logging.WARNING):
        assert store.get_students() == []

    assert storage.read("students") is None
    assert "corrupted" in caplog.text


def test_wrong_shape_is_treated_as_no_state(store, storage, make_student):
    storage.write("grades", json.dumps({"studentId": "s"}))
    assert store.get_student_grades("s") == []

    storage.write("students", json.dumps([{"id": "1"}]))
    assert store.get_students() == []
    # The store keeps working after the reset.
    store.add_student(make_student())
    assert len(store.get_students()) == 1


def test_non_numeric_fee_amount_is_treated_as_no_state(store, storage, make_student):
    store.add_student(make_student())
    rows = json.loads(storage.read("students"))
    rows[0]["fees"]["due"] = "oops"
    storage.write("students", json.dumps(rows))

    assert store.get_students() == []
    assert storage.read("students") is None


def test_non_finite_fee_amount_is_treated_as_no_state(store, storage, make_student):
    store.add_student(make_student())
    rows = json.loads(storage.read("students"))
    rows[0]["fees"]["paid"] = float("nan")
    storage.write("students", json.dumps(rows))

    assert store.get_students() == []


def test_unknown_attendance_status_is_discarded(store, storage):
    storage.write(
        "attendance",
        json.dumps([{"studentId": "s", "courseId": "1", "date": "2024-01-01", "status": "excused"}]),
    )

    assert store.calculate_attendance_percentage("s", "1") == 0
    store.add_attendance(Attendance(student_id="s", course_id="1", date=date(2024, 1, 2), status=AttendanceStatus.PRESENT))
    assert store.calculate_attendance_percentage("s", "1") == 100


def test_corrupted_users_fall_back_to_seeded_admin():
    storage = InMemoryStorage({"users": "[{\"id\": 1}]"})

    store = DomainStore(storage)

    assert store.login_user("admin", "admin123") is not None
    assert json.loads(storage.read("users"))[0]["username"] == "admin"


def test_session_marker_round_trip(storage):
    sessions = SessionStore(storage)
    user = User(id="1", username="admin", password="admin123", role=Role.ADMIN)

    assert sessions.load() is None
    sessions.save(user)
    assert json.loads(storage.read("currentUser"))["username"] == "admin"
    assert SessionStore(storage).load() == user

    sessions.clear()
    assert sessions.load() is None


def test_corrupted_session_marker_is_removed(storage):
    storage.write("currentUser", "not-json")

    assert SessionStore(storage).load() is None
    assert storage.read("currentUser") is None
