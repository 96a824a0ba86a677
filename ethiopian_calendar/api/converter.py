"""Gregorian ↔ Ethiopian conversion helpers that keep the time of day intact."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import Iterable, Optional, Union

from .ethiopian import EthiopianDate
from .jdn import gregorian_to_jdn
from .text import format_ethiopian_date_text, parse_ethiopian_date_text

__all__ = [
    "EthiopianDateTime",
    "coerce_ethiopian",
    "coerce_gregorian",
    "ethiopian_to_gregorian",
    "from_ethiopian_date_text",
    "gregorian_to_ethiopian",
    "to_ethiopian_date_only",
    "to_ethiopian_datetime",
    "to_ethiopian_timestamp",
]

GregorianInput = Union[str, date, datetime, Iterable[int]]
EthiopianInput = Union[str, EthiopianDate, "EthiopianDateTime", Iterable[int]]


@dataclass(frozen=True)
class EthiopianDateTime:
    """An Ethiopian calendar date paired with an untouched time of day."""

    date: EthiopianDate
    time_of_day: time = time()

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.time_of_day.hour

    @property
    def minute(self) -> int:
        return self.time_of_day.minute

    @property
    def second(self) -> int:
        return self.time_of_day.second

    @property
    def microsecond(self) -> int:
        return self.time_of_day.microsecond

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        return self.time_of_day.tzinfo

    def isoformat(self, sep: str = "T") -> str:
        return f"{self.date.isoformat()}{sep}{self.time_of_day.isoformat()}"

    def __json__(self) -> str:  # picked up by frappe's JSON encoder
        return self.isoformat(" ")

    def __str__(self) -> str:
        return self.isoformat(" ")


def coerce_gregorian(value: GregorianInput) -> datetime:
    """Return ``value`` as a ``datetime``; plain dates land on midnight."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("/", "-"))
        except ValueError as exc:
            raise ValueError(f"Unsupported Gregorian date string: {value!r}") from exc
    try:
        parts = [int(part) for part in value]  # type: ignore[union-attr]
    except TypeError as exc:
        raise TypeError("Expected a date, datetime, string, or iterable of integers") from exc
    if not (3 <= len(parts) <= 7):
        raise ValueError(f"Expected 3 to 7 Gregorian date fields, got {len(parts)}")
    return datetime(*parts)


def coerce_ethiopian(value: EthiopianInput) -> EthiopianDate:
    if isinstance(value, EthiopianDate):
        return value
    if isinstance(value, EthiopianDateTime):
        return value.date
    if isinstance(value, str):
        return parse_ethiopian_date_text(value)
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError(
            "Expected an EthiopianDate, string, or iterable of three integers"
        ) from exc
    return EthiopianDate(int(year), int(month), int(day))


def gregorian_to_ethiopian(value: GregorianInput) -> EthiopianDate:
    moment = coerce_gregorian(value)
    return EthiopianDate.from_jdn(gregorian_to_jdn(moment.year, moment.month, moment.day))


def ethiopian_to_gregorian(value: EthiopianInput) -> date:
    return coerce_ethiopian(value).to_gregorian()


def to_ethiopian_timestamp(value: GregorianInput) -> EthiopianDateTime:
    """Convert the date part and carry the naive time of day across unchanged."""

    moment = coerce_gregorian(value)
    return EthiopianDateTime(gregorian_to_ethiopian(moment), moment.time())


def to_ethiopian_datetime(value: GregorianInput) -> EthiopianDateTime:
    """Like :func:`to_ethiopian_timestamp` but the time keeps its ``tzinfo``."""

    moment = coerce_gregorian(value)
    return EthiopianDateTime(gregorian_to_ethiopian(moment), moment.timetz())


def to_ethiopian_date_only(value: GregorianInput) -> str:
    converted = gregorian_to_ethiopian(value)
    return format_ethiopian_date_text(converted.year, converted.month, converted.day)


def from_ethiopian_date_text(text: str) -> datetime:
    """Parse Ethiopian ``YYYY-MM-DD`` text into a Gregorian ``datetime`` at midnight."""

    return datetime.combine(parse_ethiopian_date_text(text).to_gregorian(), time())
