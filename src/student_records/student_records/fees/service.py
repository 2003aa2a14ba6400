from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_positive
from ..core.exceptions import ValidationError
from ..store import DomainStore
from ..students.model import Student

logger = logging.getLogger(__name__)


class FeeService:
    """Use case: record a fee payment against a student's ledger."""

    def __init__(self, store: DomainStore):
        self._store = store

    def record_payment(self, student_id: str, amount, *, today: Optional[date] = None) -> Student:
        amount = require_positive(amount, "Payment amount")
        if amount.is_integer():
            amount = int(amount)

        student = self._store.get_student_by_id(student_id)
        if not student:
            raise ValidationError("Student not found")
        if amount > student.fees.due:
            raise ValidationError("Payment amount cannot exceed the due amount")

        fees = replace(
            student.fees,
            paid=student.fees.paid + amount,
            due=student.fees.due - amount,
            last_payment=today or today_local(),
        )
        updated = self._store.update_student(student.id, fees=fees)
        if not updated:
            raise ValidationError("Student not found")

        logger.info("payment of %s recorded for student %s", amount, student.student_id)
        return updated
