from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from ..core.exceptions import CorruptedStateError
from .base import KeyValueStorage
from .codec import decode_records, encode_records

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistedCollection(Generic[T]):
    """A list of records mirrored under one storage key.

    ``load`` always reads from storage; a corrupted entry is discarded and
    replaced by ``default()`` (persisted when non-empty).
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        *,
        to_record: Callable[[T], dict],
        from_record: Callable[[dict], T],
        default: Optional[Callable[[], List[T]]] = None,
    ):
        self._storage = storage
        self._key = key
        self._to_record = to_record
        self._from_record = from_record
        self._default = default or list

    @property
    def key(self) -> str:
        return self._key

    def exists(self) -> bool:
        return self._storage.read(self._key) is not None

    def load(self) -> List[T]:
        payload = self._storage.read(self._key)
        if payload is None:
            return self._default()

        try:
            return decode_records(payload, self._from_record)
        except CorruptedStateError as e:
            logger.warning("discarding corrupted %r entry: %s", self._key, e)
            return self.reset()

    def save(self, items: List[T]) -> None:
        self._storage.write(self._key, encode_records(items, self._to_record))

    def reset(self) -> List[T]:
        self._storage.remove(self._key)
        items = self._default()
        if items:
            self.save(items)
        return items
