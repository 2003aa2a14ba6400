from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import GRADE_POINTS
from ..core.enums import GradeLetter


@dataclass(frozen=True)
class NewGrade:
    """Input for DomainStore.add_grade: points are derived, never supplied."""

    student_id: str
    course_id: str
    grade: str
    semester: str


@dataclass(frozen=True)
class Grade:
    student_id: str
    course_id: str
    grade: str
    points: float
    semester: str


def grade_points(letter: str) -> float:
    """Points for a letter on the scale; unknown letters are worth 0."""
    try:
        return GRADE_POINTS[GradeLetter(letter)]
    except ValueError:
        return 0.0


def grade_to_record(grade: Grade) -> dict:
    return {
        "studentId": grade.student_id,
        "courseId": grade.course_id,
        "grade": grade.grade,
        "points": grade.points,
        "semester": grade.semester,
    }


def grade_from_record(row: dict) -> Grade:
    return Grade(
        student_id=str(row["studentId"]),
        course_id=str(row["courseId"]),
        grade=str(row["grade"]),
        points=float(row["points"]),
        semester=str(row["semester"]),
    )
