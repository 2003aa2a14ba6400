from __future__ import annotations

import importlib
import sys
from pathlib import Path

PKG_ROOT = Path(__file__).resolve().parents[1] / "src" / "student_records"
if str(PKG_ROOT) not in sys.path:
    sys.path.insert(0, str(PKG_ROOT))

from student_records.config import get_settings_module
from student_records.container import build_storage
from student_records.store import DomainStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(settings)

    # Constructing the store seeds the admin account when storage is empty.
    store = DomainStore(storage)
    print(
        "OK: Storage ready -> "
        f"{getattr(settings, 'STORAGE_BACKEND', 'memory')} (users={len(store.get_users())})"
    )


if __name__ == "__main__":
    main()
