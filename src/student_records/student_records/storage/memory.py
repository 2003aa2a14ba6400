from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Process-local storage. Data lives as long as the instance does."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return sorted(self._data)
