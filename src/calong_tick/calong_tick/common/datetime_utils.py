from __future__ import annotations

from datetime import date, datetime
from typing import Any


def to_local_naive(value: datetime) -> datetime:
    """Express an instant as naive local time.

    Aware values are converted to the server's local zone; naive values are
    already local and are returned unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def isoformat_or_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
