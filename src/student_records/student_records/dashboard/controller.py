from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..container import Container
from ..core.constants import DEFAULT_FAKE_DATA_COUNT, MAX_FAKE_DATA_COUNT
from ..core.exceptions import ValidationError
from ..students.model import student_to_record


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/courses", endpoint="courses")
    @login_required(container)
    def courses():
        return jsonify([asdict(c) for c in container.store.get_courses()])

    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required(container)
    def dashboard():
        summary = container.dashboard_service.summary()
        return jsonify(
            {
                "totalStudents": summary.total_students,
                "totalCourses": summary.total_courses,
                "studentsPerDepartment": summary.students_per_department,
                "totalPaid": summary.total_paid,
                "totalDue": summary.total_due,
            }
        )

    @app.route("/api/fixtures", methods=["POST"], endpoint="generate_fixtures")
    @login_required(container)
    def generate_fixtures():
        try:
            count = int(json_body().get("count", DEFAULT_FAKE_DATA_COUNT))
        except (TypeError, ValueError):
            raise ValidationError("count must be an integer")
        if not 0 <= count <= MAX_FAKE_DATA_COUNT:
            raise ValidationError(f"count must be between 0 and {MAX_FAKE_DATA_COUNT}")
        students = container.store.generate_fake_data(count)
        return jsonify([student_to_record(s) for s in students])
