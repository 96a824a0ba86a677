"""Proleptic Gregorian ↔ Julian Day Number conversion.

Both directions are the published closed-form integer formulas and use floor
division throughout, so they are exact for every integer day including dates
before the common era. ``gregorian_to_jdn`` does not validate its input: the
Gregorian side is expected to come from the host's own date type.
"""
from __future__ import annotations

from datetime import date
from typing import Tuple

from .errors import RangeError

__all__ = [
    "MAX_DATE_JDN",
    "MIN_DATE_JDN",
    "date_to_jdn",
    "gregorian_to_jdn",
    "is_gregorian_leap",
    "jdn_to_date",
    "jdn_to_gregorian",
]


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    # January and February count as months 10 and 11 of the previous year.
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def date_to_jdn(value: date) -> int:
    return gregorian_to_jdn(value.year, value.month, value.day)


MIN_DATE_JDN = date_to_jdn(date.min)
MAX_DATE_JDN = date_to_jdn(date.max)


def jdn_to_date(jdn: int) -> date:
    """Return the host ``date`` for ``jdn``.

    Raises :class:`~ethiopian_calendar.api.errors.RangeError` when the day falls
    outside the years the host type supports (1..9999).
    """

    if not (MIN_DATE_JDN <= jdn <= MAX_DATE_JDN):
        year, month, day = jdn_to_gregorian(jdn)
        raise RangeError(
            jdn,
            MIN_DATE_JDN,
            MAX_DATE_JDN,
            f"({year:04d}-{month:02d}-{day:02d}) is outside the supported Gregorian range"
            f" (Julian days {MIN_DATE_JDN}-{MAX_DATE_JDN})",
        )
    return date(*jdn_to_gregorian(jdn))
