from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .base import KeyValueStorage

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write next to the target then swap, so a crash never leaves half a file.
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)
        logger.debug("wrote %s (%d bytes)", path, len(value))

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()
