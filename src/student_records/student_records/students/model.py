from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_optional_date, parse_iso_date, parse_optional_date


@dataclass(frozen=True)
class Fees:
    """Fee ledger of one student. Callers keep ``paid + due == total``."""

    total: float
    paid: float
    due: float
    last_payment: Optional[date] = None


@dataclass(frozen=True)
class NewStudent:
    """Input for DomainStore.add_student: every Student field except ``id``."""

    first_name: str
    last_name: str
    email: str
    department: str
    enrollment_date: date
    student_id: str
    fees: Fees


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    ``id`` is the storage key; ``student_id`` is the human-facing display code
    and is not unique.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    department: str
    enrollment_date: date
    student_id: str
    fees: Fees

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def fees_to_record(fees: Fees) -> dict:
    return {
        "total": fees.total,
        "paid": fees.paid,
        "due": fees.due,
        "lastPayment": format_optional_date(fees.last_payment),
    }


def _amount(value) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not an amount: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not an amount: {value!r}")
    return int(number) if number.is_integer() else number


def fees_from_record(row: dict) -> Fees:
    return Fees(
        total=_amount(row["total"]),
        paid=_amount(row["paid"]),
        due=_amount(row["due"]),
        last_payment=parse_optional_date(row.get("lastPayment")),
    )


def student_to_record(student: Student) -> dict:
    return {
        "id": student.id,
        "firstName": student.first_name,
        "lastName": student.last_name,
        "email": student.email,
        "department": student.department,
        "enrollmentDate": student.enrollment_date.isoformat(),
        "studentId": student.student_id,
        "fees": fees_to_record(student.fees),
    }


def student_from_record(row: dict) -> Student:
    return Student(
        id=str(row["id"]),
        first_name=str(row["firstName"]),
        last_name=str(row["lastName"]),
        email=str(row["email"]),
        department=str(row["department"]),
        enrollment_date=parse_iso_date(row["enrollmentDate"]),
        student_id=str(row["studentId"]),
        fees=fees_from_record(row["fees"]),
    )
