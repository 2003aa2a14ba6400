"""Backup durable state.

Note: Dumps every collection key into one JSON file, whatever the backend.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

PKG_ROOT = Path(__file__).resolve().parents[1] / "src" / "student_records"
if str(PKG_ROOT) not in sys.path:
    sys.path.insert(0, str(PKG_ROOT))

from student_records.config import get_settings_module
from student_records.container import build_storage
from student_records.core.constants import ATTENDANCE_KEY, GRADES_KEY, STUDENTS_KEY, USERS_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(settings)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"student_records_{ts}.json"

    dump = {}
    for key in (USERS_KEY, STUDENTS_KEY, GRADES_KEY, ATTENDANCE_KEY):
        payload = storage.read(key)
        # Corrupted entries are copied verbatim so nothing is lost.
        try:
            dump[key] = json.loads(payload) if payload is not None else None
        except ValueError:
            dump[key] = payload

    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
