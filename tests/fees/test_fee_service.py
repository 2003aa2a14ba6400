from __future__ import annotations

from datetime import date

import pytest

from student_records.core.exceptions import ValidationError
from student_records.fees.service import FeeService
from student_records.students.model import Fees


def test_payment_moves_amount_from_due_to_paid(store, make_student, fixed_today):
    student = store.add_student(make_student(fees=Fees(total=10000, paid=2500, due=7500)))

    updated = FeeService(store).record_payment(student.id, 1500, today=fixed_today)

    assert updated.fees == Fees(total=10000, paid=4000, due=6000, last_payment=fixed_today)
    assert store.get_student_by_id(student.id).fees == updated.fees


def test_paying_the_full_due_clears_it(store, make_student, fixed_today):
    student = store.add_student(make_student(fees=Fees(total=500, paid=0, due=500)))

    updated = FeeService(store).record_payment(student.id, "500", today=fixed_today)

    assert updated.fees.due == 0
    assert updated.fees.paid + updated.fees.due == updated.fees.total


@pytest.mark.parametrize("amount", [0, -5, None, "lots", 7501, "nan", "inf"])
def test_invalid_payment_is_rejected_and_nothing_changes(store, make_student, amount):
    student = store.add_student(make_student(fees=Fees(total=10000, paid=2500, due=7500, last_payment=date(2023, 1, 1))))

    with pytest.raises(ValidationError):
        FeeService(store).record_payment(student.id, amount)

    assert store.get_student_by_id(student.id).fees == student.fees


def test_payment_for_unknown_student(store):
    with pytest.raises(ValidationError):
        FeeService(store).record_payment("missing", 10)
