from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, error, json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .department_model import DEPARTMENTS
from .model import fees_from_record, student_to_record

# camelCase payload key -> Student field
_PATCHABLE = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "department": "department",
    "studentId": "student_id",
}


def student_changes(payload: dict) -> dict:
    changes = {field: str(payload[key]) for key, field in _PATCHABLE.items() if key in payload}
    try:
        if "enrollmentDate" in payload:
            changes["enrollment_date"] = parse_iso_date(str(payload["enrollmentDate"]))
        if "fees" in payload:
            changes["fees"] = fees_from_record(payload["fees"])
    except (AttributeError, KeyError, TypeError, ValueError):
        raise ValidationError("Invalid student data")
    return changes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", endpoint="departments")
    def departments():
        return jsonify([{"id": d.dept_id, "name": d.name, "code": d.code} for d in DEPARTMENTS])

    @app.route("/api/students", endpoint="students")
    @login_required(container)
    def students():
        found = container.student_service.search(
            request.args.get("q", ""),
            department=request.args.get("department") or None,
        )
        return jsonify([student_to_record(s) for s in found])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @login_required(container)
    def add_student():
        payload = json_body()
        student = container.student_service.create_student(
            first_name=payload.get("firstName", ""),
            last_name=payload.get("lastName", ""),
            email=payload.get("email", ""),
            department=payload.get("department", ""),
            student_id=payload.get("studentId", ""),
            total_fees=payload.get("totalFees", 10000),
        )
        return jsonify(student_to_record(student)), 201

    @app.route("/api/students/<student_id>", endpoint="student_detail")
    @login_required(container)
    def student_detail(student_id: str):
        student = container.store.get_student_by_id(student_id)
        if not student:
            return error("Student not found", 404)
        return jsonify(student_to_record(student))

    @app.route("/api/students/<student_id>", methods=["PATCH"], endpoint="update_student")
    @login_required(container)
    def update_student(student_id: str):
        updated = container.store.update_student(student_id, **student_changes(json_body()))
        if not updated:
            return error("Student not found", 404)
        return jsonify(student_to_record(updated))

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required(container)
    def delete_student(student_id: str):
        if not container.store.delete_student(student_id):
            return error("Student not found", 404)
        return jsonify({"success": True})

    @app.route("/api/students/<student_id>/payments", methods=["POST"], endpoint="record_payment")
    @login_required(container)
    def record_payment(student_id: str):
        payload = json_body()
        student = container.fee_service.record_payment(student_id, payload.get("amount"))
        return jsonify(student_to_record(student))
