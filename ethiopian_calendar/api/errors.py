"""Exceptions raised when a date cannot be converted."""
from __future__ import annotations

from typing import Optional

__all__ = [
    "CalendarError",
    "FormatError",
    "RangeError",
    "ValidationError",
]


class CalendarError(ValueError):
    """Base class for every conversion failure."""


class FormatError(CalendarError):
    """Text does not have the ``YYYY-MM-DD`` shape."""

    def __init__(self, text: object, reason: Optional[str] = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Invalid Ethiopian date format: {text!r} (expected YYYY-MM-DD)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ValidationError(CalendarError):
    """A date field is outside the range allowed for it."""

    def __init__(
        self,
        field: str,
        value: int,
        minimum: int,
        maximum: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if detail is None:
            if maximum is None:
                detail = f"must be >= {minimum}"
            else:
                detail = f"must be {minimum}-{maximum}"
        self.detail = detail
        super().__init__(f"Invalid Ethiopian {field}: {value} ({detail})")


class RangeError(CalendarError):
    """A Julian Day Number lies outside the days that can be represented.

    ``minimum`` is the Ethiopian epoch for dates before the calendar begins;
    ``maximum`` is set when the host date type cannot hold the Gregorian day.
    """

    def __init__(
        self,
        jdn: int,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.jdn = jdn
        self.minimum = minimum
        self.maximum = maximum
        if detail is None:
            if maximum is None:
                detail = f"is before the Ethiopian calendar epoch (Julian day {minimum})"
            else:
                detail = f"is outside Julian days {minimum}-{maximum}"
        self.detail = detail
        super().__init__(f"Julian day {jdn} {detail}")
