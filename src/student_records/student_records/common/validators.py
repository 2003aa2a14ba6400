from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_choice(value: str | None, field_name: str, choices) -> str:
    value = require_non_empty(value, field_name)
    if value not in choices:
        raise ValidationError(f"{field_name} is not valid")
    return value
