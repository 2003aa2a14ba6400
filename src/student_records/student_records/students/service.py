from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_choice, require_non_empty, require_positive
from ..core.constants import DEFAULT_TOTAL_FEES, STUDENT_CODE_BASE, STUDENT_CODE_PREFIX
from ..store import DomainStore
from .department_model import DEPARTMENT_NAMES
from .model import Fees, NewStudent, Student


class StudentService:
    """Use case: roster management (add, search, remove)."""

    def __init__(self, store: DomainStore):
        self._store = store

    def create_student(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        department: str,
        student_id: str = "",
        total_fees=DEFAULT_TOTAL_FEES,
        today: Optional[date] = None,
    ) -> Student:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        email = require_non_empty(email, "Email")
        department = require_choice(department, "Department", DEPARTMENT_NAMES)
        total = require_positive(total_fees, "Total fees")
        if total.is_integer():
            total = int(total)

        code = (student_id or "").strip()
        if not code:
            code = f"{STUDENT_CODE_PREFIX}{STUDENT_CODE_BASE + len(self._store.get_students())}"

        return self._store.add_student(
            NewStudent(
                first_name=first_name,
                last_name=last_name,
                email=email,
                department=department,
                enrollment_date=today or today_local(),
                student_id=code,
                fees=Fees(total=total, paid=0, due=total, last_payment=None),
            )
        )

    def search(self, term: str = "", department: Optional[str] = None) -> List[Student]:
        if department:
            students = self._store.get_students_by_department(department)
        else:
            students = self._store.get_students()

        term = (term or "").strip().lower()
        if not term:
            return students

        return [
            s
            for s in students
            if term in s.first_name.lower()
            or term in s.last_name.lower()
            or term in s.email.lower()
            or term in s.student_id.lower()
        ]

