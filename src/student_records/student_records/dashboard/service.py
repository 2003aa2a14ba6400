from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.constants import DEFAULT_DASHBOARD_SEED_COUNT
from ..store import DomainStore


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    total_courses: int
    students_per_department: Dict[str, int]
    total_paid: float
    total_due: float


class DashboardService:
    """Read-model for the landing page."""

    def __init__(self, store: DomainStore):
        self._store = store

    def summary(self, *, seed_count: int = DEFAULT_DASHBOARD_SEED_COUNT) -> DashboardSummary:
        students = self._store.get_students()
        if not students and seed_count > 0:
            students = self._store.generate_fake_data(seed_count)

        per_department: Dict[str, int] = {}
        for s in students:
            per_department[s.department] = per_department.get(s.department, 0) + 1

        return DashboardSummary(
            total_students=len(students),
            total_courses=len(self._store.get_courses()),
            students_per_department=per_department,
            total_paid=sum(s.fees.paid for s in students),
            total_due=sum(s.fees.due for s in students),
        )
