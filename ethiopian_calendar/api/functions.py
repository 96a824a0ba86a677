"""Public conversion entry points.

Every operation is also reachable under the name the PostgreSQL
``pg_ethiopian_calendar`` extension uses for it, so SQL-facing callers can
keep their names. ``None`` in gives ``None`` out.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .. import __version__

from .clock import current_timestamp
from .converter import (
    EthiopianDateTime,
    GregorianInput,
    from_ethiopian_date_text,
    to_ethiopian_date_only,
)
from .converter import to_ethiopian_datetime as _to_ethiopian_datetime
from .converter import to_ethiopian_timestamp as _to_ethiopian_timestamp
from .host import maybe_whitelist

__all__ = [
    "current_ethiopian_date",
    "current_ethiopian_timestamp",
    "ethiopian_calendar_version",
    "from_ethiopian_date",
    "pg_ethiopian_current_date",
    "pg_ethiopian_current_timestamp",
    "pg_ethiopian_from_date",
    "pg_ethiopian_to_date",
    "pg_ethiopian_to_datetime",
    "pg_ethiopian_to_timestamp",
    "pg_ethiopian_version",
    "to_ethiopian_date",
    "to_ethiopian_datetime",
    "to_ethiopian_timestamp",
]


class _Now:
    def __repr__(self) -> str:
        return "<now>"


NOW = _Now()


def to_ethiopian_date(value=NOW) -> Optional[str]:
    """Ethiopian ``YYYY-MM-DD`` text for a Gregorian timestamp; defaults to now."""

    if value is NOW:
        value = current_timestamp()
    if value is None:
        return None
    return to_ethiopian_date_only(value)


def to_ethiopian_timestamp(value=NOW) -> Optional[EthiopianDateTime]:
    """Ethiopian date with the original time of day; defaults to now."""

    if value is NOW:
        value = current_timestamp()
    if value is None:
        return None
    return _to_ethiopian_timestamp(value)


def to_ethiopian_datetime(value: Optional[GregorianInput]) -> Optional[EthiopianDateTime]:
    if value is None:
        return None
    return _to_ethiopian_datetime(value)


def from_ethiopian_date(text: Optional[str]) -> Optional[datetime]:
    """Gregorian midnight for Ethiopian ``YYYY-MM-DD`` text."""

    if text is None:
        return None
    return from_ethiopian_date_text(text)


def current_ethiopian_date(now: Optional[datetime] = None) -> str:
    return to_ethiopian_date_only(current_timestamp(now))


def current_ethiopian_timestamp(now: Optional[datetime] = None) -> EthiopianDateTime:
    return _to_ethiopian_timestamp(current_timestamp(now))


def ethiopian_calendar_version() -> str:
    return __version__


to_ethiopian_date = maybe_whitelist(to_ethiopian_date)
to_ethiopian_timestamp = maybe_whitelist(to_ethiopian_timestamp)
to_ethiopian_datetime = maybe_whitelist(to_ethiopian_datetime)
from_ethiopian_date = maybe_whitelist(from_ethiopian_date)
current_ethiopian_date = maybe_whitelist(current_ethiopian_date)
current_ethiopian_timestamp = maybe_whitelist(current_ethiopian_timestamp)
ethiopian_calendar_version = maybe_whitelist(ethiopian_calendar_version)

pg_ethiopian_to_date = to_ethiopian_date
pg_ethiopian_to_timestamp = to_ethiopian_timestamp
pg_ethiopian_to_datetime = to_ethiopian_datetime
pg_ethiopian_from_date = from_ethiopian_date
pg_ethiopian_current_date = current_ethiopian_date
pg_ethiopian_current_timestamp = current_ethiopian_timestamp
pg_ethiopian_version = ethiopian_calendar_version
