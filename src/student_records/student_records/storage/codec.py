from __future__ import annotations

import json
from typing import Callable, Iterable, List, TypeVar

from ..core.exceptions import CorruptedStateError

T = TypeVar("T")

# Everything a malformed payload can raise while being decoded into records.
_DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


def encode_records(items: Iterable[T], to_record: Callable[[T], dict]) -> str:
    return json.dumps([to_record(item) for item in items], ensure_ascii=False)


def decode_records(payload: str, from_record: Callable[[dict], T]) -> List[T]:
    try:
        rows = json.loads(payload)
        if not isinstance(rows, list):
            raise CorruptedStateError(f"expected a list, got {type(rows).__name__}")
        return [from_record(row) for row in rows]
    except _DECODE_ERRORS as e:
        raise CorruptedStateError(str(e)) from e


def encode_record(item: T, to_record: Callable[[T], dict]) -> str:
    return json.dumps(to_record(item), ensure_ascii=False)


def decode_record(payload: str, from_record: Callable[[dict], T]) -> T:
    try:
        row = json.loads(payload)
        if not isinstance(row, dict):
            raise CorruptedStateError(f"expected an object, got {type(row).__name__}")
        return from_record(row)
    except _DECODE_ERRORS as e:
        raise CorruptedStateError(str(e)) from e
