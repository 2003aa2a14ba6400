from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date
from typing import List

from ..core.constants import DEFAULT_TOTAL_FEES, STUDENT_CODE_BASE, STUDENT_CODE_PREFIX
from .department_model import DEPARTMENT_NAMES
from .model import Fees, NewStudent


@dataclass
class FakeStudentFactory:
    """Synthetic roster used to populate an empty store.

    Names are deterministic (``First1``/``Last1`` ...); department, enrollment
    date and payment state come from ``rng``.
    """

    rng: random.Random = field(default_factory=random.Random)
    total_fees: int = DEFAULT_TOTAL_FEES

    def _random_date(self, year: int) -> date:
        return date(year, self.rng.randrange(1, 13), self.rng.randrange(1, 29))

    def build_one(self, index: int) -> NewStudent:
        first_name = f"First{index + 1}"
        last_name = f"Last{index + 1}"
        paid = self.rng.randrange(0, self.total_fees)
        return NewStudent(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}@example.com",
            department=self.rng.choice(DEPARTMENT_NAMES),
            enrollment_date=self._random_date(self.rng.randrange(2020, 2024)),
            student_id=f"{STUDENT_CODE_PREFIX}{STUDENT_CODE_BASE + index}",
            fees=Fees(
                total=self.total_fees,
                paid=paid,
                due=self.total_fees - paid,
                last_payment=self._random_date(2023),
            ),
        )

    def build(self, count: int) -> List[NewStudent]:
        return [self.build_one(i) for i in range(count)]
