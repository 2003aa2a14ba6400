from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .fees.service import FeeService
from .grades.service import GradeService
from .storage.base import KeyValueStorage
from .storage.bootstrap import ensure_schema
from .storage.connection import DatabaseConnection, DBConfig
from .storage.json_file import JsonFileStorage
from .storage.memory import InMemoryStorage
from .storage.mysql_storage import MySQLStorage
from .store import DomainStore
from .students.service import StudentService
from .users.service import AuthService
from .users.session import SessionStore


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: DomainStore
    sessions: SessionStore

    auth_service: AuthService
    student_service: StudentService
    fee_service: FeeService
    grade_service: GradeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_storage(settings) -> KeyValueStorage:
    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()

    if backend == "memory":
        return InMemoryStorage()

    if backend == "file":
        return JsonFileStorage(getattr(settings, "STORAGE_DIR"))

    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema(conn)
        return MySQLStorage(conn)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, storage: KeyValueStorage, rng: Optional[random.Random] = None) -> Container:
    store = DomainStore(storage, rng=rng)
    sessions = SessionStore(storage)

    return Container(
        storage=storage,
        store=store,
        sessions=sessions,
        auth_service=AuthService(store, sessions),
        student_service=StudentService(store),
        fee_service=FeeService(store),
        grade_service=GradeService(store),
        attendance_service=AttendanceService(store),
        dashboard_service=DashboardService(store),
    )
