"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the store and the services.
"""

from student_records.container import build_container
from student_records.core.enums import AttendanceStatus
from student_records.storage.memory import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage())
    students = container.store.generate_fake_data(5)
    first = students[0]

    container.grade_service.add_grade(student_id=first.id, course_id="1", grade="A", semester="Fall 2023")
    container.grade_service.add_grade(student_id=first.id, course_id="2", grade="B", semester="Fall 2023")
    container.attendance_service.mark(student_id=first.id, course_id="1", status=AttendanceStatus.PRESENT)

    print(first.full_name, "GPA", container.grade_service.gpa(first.id))
    print(container.dashboard_service.summary())


if __name__ == "__main__":
    main()
