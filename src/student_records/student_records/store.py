from __future__ import annotations

import logging
import random
import uuid
from dataclasses import fields, replace
from typing import Callable, List, Optional, TypeVar

from .attendance.model import Attendance, attendance_from_record, attendance_to_record
from .core.constants import (
    ATTENDANCE_KEY,
    DEFAULT_ADMIN_ID,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_FAKE_DATA_COUNT,
    GRADES_KEY,
    STUDENTS_KEY,
    USERS_KEY,
)
from .core.enums import AttendanceStatus, Role
from .courses.model import COURSE_CATALOG, Course
from .grades.model import Grade, NewGrade, grade_from_record, grade_points, grade_to_record
from .storage.base import KeyValueStorage
from .storage.collection import PersistedCollection
from .students.fixtures import FakeStudentFactory
from .students.model import NewStudent, Student, student_from_record, student_to_record
from .users.model import User, user_from_record, user_to_record

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _seed_users() -> List[User]:
    return [
        User(
            id=DEFAULT_ADMIN_ID,
            username=DEFAULT_ADMIN_USERNAME,
            password=DEFAULT_ADMIN_PASSWORD,
            role=Role.ADMIN,
        )
    ]


def _new_uuid() -> str:
    return str(uuid.uuid4())


class DomainStore:
    """Single point of access to every domain collection.

    Every operation refreshes the collection it touches from ``storage``,
    works on that fresh copy, and writes the whole collection back when it
    mutates. Records are frozen dataclasses, so returned values can be shared
    without callers being able to change store state behind its back.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        rng: Optional[random.Random] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._rng = rng or random.Random()
        self._new_id = id_factory or _new_uuid

        self._users = PersistedCollection(
            storage, USERS_KEY, to_record=user_to_record, from_record=user_from_record, default=_seed_users
        )
        self._students = PersistedCollection(
            storage, STUDENTS_KEY, to_record=student_to_record, from_record=student_from_record
        )
        self._grades = PersistedCollection(
            storage, GRADES_KEY, to_record=grade_to_record, from_record=grade_from_record
        )
        self._attendance = PersistedCollection(
            storage, ATTENDANCE_KEY, to_record=attendance_to_record, from_record=attendance_from_record
        )
        self._courses: List[Course] = list(COURSE_CATALOG)

        if not self._users.exists():
            self._users.save(_seed_users())
            logger.info("seeded default %r account", DEFAULT_ADMIN_USERNAME)
        self._refresh(self._users)

    def _refresh(self, collection: PersistedCollection[T]) -> List[T]:
        return list(collection.load())

    def _persist(self, collection: PersistedCollection[T], items: List[T]) -> None:
        collection.save(items)

    # Users

    def get_users(self) -> List[User]:
        return self._refresh(self._users)

    def login_user(self, username: str, password: str) -> Optional[User]:
        for user in self._refresh(self._users):
            if user.username == username and user.password == password:
                return user
        return None

    def register_user(self, username: str, password: str, role: Role) -> User:
        users = self._refresh(self._users)
        user = User(id=self._new_id(), username=username, password=password, role=Role(role))
        users.append(user)
        self._persist(self._users, users)
        return user

    # Students

    def add_student(self, data: NewStudent) -> Student:
        students = self._refresh(self._students)
        student = Student(id=self._new_id(), **{f.name: getattr(data, f.name) for f in fields(data)})
        students.append(student)
        self._persist(self._students, students)
        return student

    def get_students(self) -> List[Student]:
        return self._refresh(self._students)

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        for student in self._refresh(self._students):
            if student.id == student_id:
                return student
        return None

    def get_students_by_department(self, department: str) -> List[Student]:
        return [s for s in self._refresh(self._students) if s.department == department]

    def update_student(self, student_id: str, **changes) -> Optional[Student]:
        # The storage key is not a patchable field; unknown names are ignored.
        patchable = {f.name for f in fields(Student)} - {"id"}
        changes = {name: value for name, value in changes.items() if name in patchable}

        students = self._refresh(self._students)
        for index, student in enumerate(students):
            if student.id == student_id:
                updated = replace(student, **changes)
                students[index] = updated
                self._persist(self._students, students)
                return updated
        return None

    def delete_student(self, student_id: str) -> bool:
        students = self._refresh(self._students)
        remaining = [s for s in students if s.id != student_id]
        if len(remaining) == len(students):
            return False
        self._persist(self._students, remaining)
        return True

    # Courses

    def get_courses(self) -> List[Course]:
        return list(self._courses)

    def get_course_by_id(self, course_id: str) -> Optional[Course]:
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    # Grades

    def add_grade(self, data: NewGrade) -> Grade:
        grades = self._refresh(self._grades)
        grade = Grade(
            student_id=data.student_id,
            course_id=data.course_id,
            grade=data.grade,
            points=grade_points(data.grade),
            semester=data.semester,
        )
        grades.append(grade)
        self._persist(self._grades, grades)
        return grade

    def get_student_grades(self, student_id: str) -> List[Grade]:
        return [g for g in self._refresh(self._grades) if g.student_id == student_id]

    def calculate_gpa(self, student_id: str) -> float:
        """Unweighted mean of grade points; course credits are not considered."""
        grades = self.get_student_grades(student_id)
        if not grades:
            return 0
        return sum(g.points for g in grades) / len(grades)

    # Attendance

    def add_attendance(self, record: Attendance) -> Attendance:
        records = self._refresh(self._attendance)
        records.append(record)
        self._persist(self._attendance, records)
        return record

    def get_student_attendance(self, student_id: str) -> List[Attendance]:
        return [r for r in self._refresh(self._attendance) if r.student_id == student_id]

    def calculate_attendance_percentage(self, student_id: str, course_id: str) -> float:
        records = [r for r in self.get_student_attendance(student_id) if r.course_id == course_id]
        if not records:
            return 0
        present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
        return present / len(records) * 100

    # Fixtures

    def generate_fake_data(self, count: int = DEFAULT_FAKE_DATA_COUNT) -> List[Student]:
        existing = self.get_students()
        if existing:
            return existing

        for new_student in FakeStudentFactory(rng=self._rng).build(count):
            self.add_student(new_student)
        logger.info("generated %d fake students", count)
        return self.get_students()