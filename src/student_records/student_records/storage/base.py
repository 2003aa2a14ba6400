from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Durable medium the DomainStore mirrors itself into.

    Values are opaque serialized strings; the store owns encoding and decoding.
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError
