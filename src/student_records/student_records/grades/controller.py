from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import grade_to_record
from .service import GpaEntry, standing, weighted_gpa


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<student_id>/grades", endpoint="student_grades")
    @login_required(container)
    def student_grades(student_id: str):
        return jsonify([grade_to_record(g) for g in container.grade_service.list_grades(student_id)])

    @app.route("/api/students/<student_id>/grades", methods=["POST"], endpoint="add_grade")
    @login_required(container)
    def add_grade(student_id: str):
        payload = json_body()
        grade = container.grade_service.add_grade(
            student_id=student_id,
            course_id=payload.get("courseId", ""),
            grade=payload.get("grade", ""),
            semester=payload.get("semester", ""),
        )
        return jsonify(grade_to_record(grade)), 201

    @app.route("/api/students/<student_id>/gpa", endpoint="student_gpa")
    @login_required(container)
    def student_gpa(student_id: str):
        gpa = container.grade_service.gpa(student_id)
        return jsonify(
            {
                "studentId": student_id,
                "gpa": gpa,
                "weightedGpa": container.grade_service.weighted_gpa_for_student(student_id),
                "standing": standing(gpa),
            }
        )

    @app.route("/api/gpa/calculate", methods=["POST"], endpoint="calculate_gpa")
    def calculate_gpa():
        courses = json_body().get("courses", [])
        if not isinstance(courses, list):
            raise ValidationError("courses must be a list")
        try:
            entries = [GpaEntry(grade=c.get("grade"), credits=float(c.get("credits", 0))) for c in courses]
        except (AttributeError, TypeError, ValueError):
            raise ValidationError("Invalid course entry")

        gpa = weighted_gpa(entries)
        return jsonify({"gpa": gpa, "standing": standing(gpa)})
