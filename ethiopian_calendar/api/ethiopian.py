"""Julian Day Number ↔ Ethiopian (Ge'ez) calendar conversion."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .errors import RangeError, ValidationError
from .jdn import date_to_jdn, jdn_to_date

__all__ = [
    "ETHIOPIAN_EPOCH",
    "EthiopianDate",
    "days_in_month",
    "ethiopian_to_jdn",
    "is_ethiopian_leap",
    "jdn_to_ethiopian",
    "validate_ethiopian",
]

# Julian Day Number of 1 Meskerem, year 1.
ETHIOPIAN_EPOCH = 1724220

_DAYS_PER_ERA = 1461
_DAYS_PER_YEAR = 365
_DAYS_PER_MONTH = 30
_PAGUME = 13

# Eras are counted from a notional year 0 so that every four-year era ends
# with its leap year (``year % 4 == 3``).
_ERA_ANCHOR = ETHIOPIAN_EPOCH - _DAYS_PER_YEAR


def is_ethiopian_leap(year: int) -> bool:
    return year % 4 == 3


def days_in_month(year: int, month: int) -> int:
    if month < _PAGUME:
        return _DAYS_PER_MONTH
    return 6 if is_ethiopian_leap(year) else 5


def validate_ethiopian(year: int, month: int, day: int) -> None:
    """Raise :class:`ValidationError` unless the triple names a real Ethiopian day."""

    if year < 1:
        raise ValidationError("year", year, 1)
    if not (1 <= month <= _PAGUME):
        raise ValidationError("month", month, 1, _PAGUME)
    if day < 1:
        raise ValidationError("day", day, 1)
    max_day = days_in_month(year, month)
    if day > max_day:
        if month < _PAGUME:
            detail = f"month {month} has {max_day} days"
        else:
            detail = f"month 13 has {max_day} days in year {year}"
        raise ValidationError("day", day, 1, max_day, detail)


def jdn_to_ethiopian(jdn: int) -> Tuple[int, int, int]:
    if jdn < ETHIOPIAN_EPOCH:
        raise RangeError(jdn, ETHIOPIAN_EPOCH)

    era, day_of_era = divmod(jdn - _ERA_ANCHOR, _DAYS_PER_ERA)
    year_of_era, day_of_year = divmod(day_of_era, _DAYS_PER_YEAR)
    # The last day of a leap era divides out as a fifth year.
    if year_of_era == 4:
        year_of_era = 3
        day_of_year = _DAYS_PER_YEAR

    year = 4 * era + year_of_era
    if day_of_year < 12 * _DAYS_PER_MONTH:
        month = day_of_year // _DAYS_PER_MONTH + 1
        day = day_of_year % _DAYS_PER_MONTH + 1
    else:
        month = _PAGUME
        day = min(day_of_year - 12 * _DAYS_PER_MONTH + 1, days_in_month(year, _PAGUME))
    return year, month, day


def ethiopian_to_jdn(year: int, month: int, day: int) -> int:
    validate_ethiopian(year, month, day)
    era, year_of_era = divmod(year, 4)
    day_of_year = (month - 1) * _DAYS_PER_MONTH + (day - 1)
    return _ERA_ANCHOR + era * _DAYS_PER_ERA + year_of_era * _DAYS_PER_YEAR + day_of_year


@dataclass(frozen=True)
class EthiopianDate:
    """Immutable representation of an Ethiopian calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate_ethiopian(self.year, self.month, self.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "EthiopianDate":
        return cls(*jdn_to_ethiopian(jdn))

    @classmethod
    def from_gregorian(cls, value: date) -> "EthiopianDate":
        return cls.from_jdn(date_to_jdn(value))

    @property
    def is_leap(self) -> bool:
        return is_ethiopian_leap(self.year)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_jdn(self) -> int:
        return ethiopian_to_jdn(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return jdn_to_date(self.to_jdn())

    def __str__(self) -> str:
        return self.isoformat()
