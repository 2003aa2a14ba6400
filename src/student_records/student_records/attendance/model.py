from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one attendance mark. Append-only, no primary key."""

    student_id: str
    course_id: str
    date: date
    status: AttendanceStatus


def attendance_to_record(record: Attendance) -> dict:
    return {
        "studentId": record.student_id,
        "courseId": record.course_id,
        "date": record.date.isoformat(),
        "status": record.status.value,
    }


def attendance_from_record(row: dict) -> Attendance:
    return Attendance(
        student_id=str(row["studentId"]),
        course_id=str(row["courseId"]),
        date=parse_iso_date(row["date"]),
        status=AttendanceStatus(row["status"]),
    )
