from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import attendance_to_record


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<student_id>/attendance", endpoint="student_attendance")
    @login_required(container)
    def student_attendance(student_id: str):
        records = container.attendance_service.history(student_id)
        return jsonify([attendance_to_record(r) for r in records])

    @app.route("/api/students/<student_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required(container)
    def mark_attendance(student_id: str):
        payload = json_body()
        on = None
        if payload.get("date"):
            try:
                on = parse_iso_date(str(payload["date"]))
            except ValueError:
                raise ValidationError("Invalid date")

        record = container.attendance_service.mark(
            student_id=student_id,
            course_id=payload.get("courseId", ""),
            status=payload.get("status", ""),
            on=on,
        )
        return jsonify(attendance_to_record(record)), 201

    @app.route(
        "/api/students/<student_id>/attendance/<course_id>/percentage",
        endpoint="attendance_percentage",
    )
    @login_required(container)
    def attendance_percentage(student_id: str, course_id: str):
        return jsonify(
            {
                "studentId": student_id,
                "courseId": course_id,
                "percentage": container.attendance_service.percentage(student_id, course_id),
            }
        )

    @app.route("/api/students/<student_id>/attendance/summary", endpoint="attendance_summary")
    @login_required(container)
    def attendance_summary(student_id: str):
        summary = container.attendance_service.summary(student_id)
        return jsonify(
            {
                "studentId": summary.student_id,
                "counts": {status.value: n for status, n in summary.counts.items()},
                "total": summary.total,
                "percentage": summary.percentage,
            }
        )
