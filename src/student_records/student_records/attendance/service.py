from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..store import DomainStore
from .model import Attendance


@dataclass(frozen=True)
class AttendanceSummary:
    student_id: str
    counts: Dict[AttendanceStatus, int]
    total: int
    percentage: float


class AttendanceService:
    def __init__(self, store: DomainStore):
        self._store = store

    def mark(
        self,
        *,
        student_id: str,
        course_id: str,
        status: AttendanceStatus | str,
        on: Optional[date] = None,
    ) -> Attendance:
        student_id = require_non_empty(student_id, "Student")
        course_id = require_non_empty(course_id, "Course")
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Attendance status is not valid")

        if not self._store.get_student_by_id(student_id):
            raise ValidationError("Student not found")
        if not self._store.get_course_by_id(course_id):
            raise ValidationError("Course not found")

        return self._store.add_attendance(
            Attendance(student_id=student_id, course_id=course_id, date=on or today_local(), status=status)
        )

    def history(self, student_id: str) -> List[Attendance]:
        return self._store.get_student_attendance(student_id)

    def percentage(self, student_id: str, course_id: str) -> float:
        return self._store.calculate_attendance_percentage(student_id, course_id)

    def summary(self, student_id: str) -> AttendanceSummary:
        records = self._store.get_student_attendance(student_id)
        counts = {status: 0 for status in AttendanceStatus}
        for r in records:
            counts[r.status] += 1

        total = len(records)
        percentage = counts[AttendanceStatus.PRESENT] / total * 100 if total else 0
        return AttendanceSummary(student_id=student_id, counts=counts, total=total, percentage=percentage)
