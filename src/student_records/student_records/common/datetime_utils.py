from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Blank strings and None both mean "no date"."""
    if not value:
        return None
    return parse_iso_date(value)


def format_optional_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
