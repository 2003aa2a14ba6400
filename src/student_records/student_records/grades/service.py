from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..common.validators import require_non_empty
from ..core.enums import GradeLetter
from ..core.exceptions import ValidationError
from ..store import DomainStore
from .model import Grade, NewGrade, grade_points


@dataclass(frozen=True)
class GpaEntry:
    """One row of the GPA calculator: a letter and the course's credit hours."""

    grade: Optional[str]
    credits: float


# Lower bound of each standing band, best first.
_STANDINGS = (
    (3.5, "Excellent"),
    (3.0, "Very Good"),
    (2.5, "Good"),
    (2.0, "Satisfactory"),
)


def weighted_gpa(entries: Iterable[GpaEntry]) -> float:
    """Credit-weighted GPA. Blank grades and non-positive credits are skipped."""
    total_points = 0.0
    total_credits = 0.0
    for entry in entries:
        if not entry.grade or entry.credits <= 0:
            continue
        total_points += grade_points(entry.grade) * entry.credits
        total_credits += entry.credits

    if total_credits == 0:
        return 0
    return total_points / total_credits


def standing(gpa: float) -> str:
    for lower_bound, label in _STANDINGS:
        if gpa >= lower_bound:
            return label
    return "Needs Improvement"


class GradeService:
    """Use case: record grades and compute GPA figures."""

    def __init__(self, store: DomainStore):
        self._store = store

    def add_grade(self, *, student_id: str, course_id: str, grade: str, semester: str) -> Grade:
        student_id = require_non_empty(student_id, "Student")
        course_id = require_non_empty(course_id, "Course")
        grade = require_non_empty(grade, "Grade")
        semester = require_non_empty(semester, "Semester")

        if not self._store.get_student_by_id(student_id):
            raise ValidationError("Student not found")
        if not self._store.get_course_by_id(course_id):
            raise ValidationError("Course not found")
        try:
            GradeLetter(grade)
        except ValueError:
            raise ValidationError(f"Unknown grade {grade!r}")

        return self._store.add_grade(
            NewGrade(student_id=student_id, course_id=course_id, grade=grade, semester=semester)
        )

    def list_grades(self, student_id: str) -> List[Grade]:
        return self._store.get_student_grades(student_id)

    def gpa(self, student_id: str) -> float:
        return self._store.calculate_gpa(student_id)

    def weighted_gpa_for_student(self, student_id: str) -> float:
        entries = []
        for g in self._store.get_student_grades(student_id):
            course = self._store.get_course_by_id(g.course_id)
            # Grades pointing at unknown courses carry no credits.
            entries.append(GpaEntry(grade=g.grade, credits=course.credits if course else 0))
        return weighted_gpa(entries)
