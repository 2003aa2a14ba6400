from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Course:
    id: str
    code: str
    name: str
    department: str
    credits: int


# Reference data; rebuilt on every store construction, never persisted.
COURSE_CATALOG = (
    Course(id="1", code="CS101", name="Introduction to Computer Science", department="Computer Science", credits=3),
    Course(id="2", code="CS202", name="Data Structures", department="Computer Science", credits=4),
    Course(id="3", code="EE101", name="Circuit Analysis", department="Electrical Engineering", credits=3),
)
