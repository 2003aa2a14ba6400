from __future__ import annotations

import argparse
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
    parser = argparse.ArgumentParser(description="Populate an empty roster with synthetic students.")
    parser.add_argument("--count", type=int, default=int(getattr(settings, "FAKE_DATA_COUNT", 20)))
    args = parser.parse_args()

    store = DomainStore(build_storage(settings))
    students = store.generate_fake_data(args.count)
    print(f"OK: Roster has {len(students)} students")


if __name__ == "__main__":
    main()
