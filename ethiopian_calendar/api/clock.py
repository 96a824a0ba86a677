"""Access to the host's notion of "now"."""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import Iterator, Optional

from .host import frappe

__all__ = [
    "current_timestamp",
    "host_now",
    "pinned_clock",
]

_PINNED_NOW: ContextVar[Optional[datetime]] = ContextVar(
    "ethiopian_calendar_pinned_now", default=None
)


def host_now() -> datetime:
    """Return the current naive local time, in the site time zone under Frappe."""

    if frappe:  # pragma: no cover - depends on a Frappe site
        from frappe.utils import now_datetime  # type: ignore

        return now_datetime()
    return datetime.now()


def current_timestamp(now: Optional[datetime] = None) -> datetime:
    """Resolve "now": an explicit value, then a pinned instant, then the host clock."""

    if now is not None:
        return now
    pinned = _PINNED_NOW.get()
    if pinned is not None:
        return pinned
    return host_now()


@contextmanager
def pinned_clock(now: Optional[datetime] = None) -> Iterator[datetime]:
    """Make every "now" read inside the block observe the same instant.

    Mirrors a database transaction, where ``NOW()`` stays fixed until commit.
    Nested blocks keep the outer instant unless ``now`` is given explicitly.
    """

    instant = current_timestamp(now)
    token = _PINNED_NOW.set(instant)
    try:
        yield instant
    finally:
        _PINNED_NOW.reset(token)
