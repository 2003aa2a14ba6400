from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    dept_id: str
    name: str
    code: str


DEPARTMENTS = (
    Department(dept_id="1", name="Computer Science", code="CS"),
    Department(dept_id="2", name="Electrical Engineering", code="EE"),
    Department(dept_id="3", name="Business Administration", code="BA"),
    Department(dept_id="4", name="Mechanical Engineering", code="ME"),
    Department(dept_id="5", name="Biology", code="BIO"),
)

DEPARTMENT_NAMES = tuple(d.name for d in DEPARTMENTS)
