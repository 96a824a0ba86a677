"""Server-side helpers exposed by the Ethiopian calendar package."""

from . import clock, converter, errors, ethiopian, functions, host, jdn, preferences, text
from .errors import CalendarError, FormatError, RangeError, ValidationError

__all__ = [
    "CalendarError",
    "FormatError",
    "RangeError",
    "ValidationError",
    "clock",
    "converter",
    "errors",
    "ethiopian",
    "functions",
    "host",
    "jdn",
    "preferences",
    "text",
]
