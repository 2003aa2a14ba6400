from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import SESSION_KEY
from ..core.exceptions import CorruptedStateError
from ..storage.base import KeyValueStorage
from ..storage.codec import decode_record, encode_record
from .model import User, user_from_record, user_to_record

logger = logging.getLogger(__name__)


class SessionStore:
    """Persisted marker of the currently authenticated user."""

    def __init__(self, storage: KeyValueStorage, *, key: str = SESSION_KEY):
        self._storage = storage
        self._key = key

    def save(self, user: User) -> None:
        self._storage.write(self._key, encode_record(user, user_to_record))

    def load(self) -> Optional[User]:
        payload = self._storage.read(self._key)
        if payload is None:
            return None
        try:
            return decode_record(payload, user_from_record)
        except CorruptedStateError as e:
            logger.warning("discarding corrupted session marker: %s", e)
            self._storage.remove(self._key)
            return None

    def clear(self) -> None:
        self._storage.remove(self._key)
