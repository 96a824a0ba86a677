"""Parsing and rendering of ``YYYY-MM-DD`` Ethiopian date text."""
from __future__ import annotations

import logging
import re

from .errors import FormatError
from .ethiopian import EthiopianDate

__all__ = [
    "format_ethiopian_date_text",
    "parse_ethiopian_date_text",
]

logger = logging.getLogger(__name__)

# Default limit on str -> int conversion in CPython.
_MAX_YEAR_DIGITS = 4300

_FIELDS = (
    ("year", re.compile(r"[0-9]+"), "a number"),
    ("month", re.compile(r"[0-9]{1,2}"), "a one or two digit number"),
    ("day", re.compile(r"[0-9]{1,2}"), "a one or two digit number"),
)


def parse_ethiopian_date_text(text: str) -> EthiopianDate:
    """Parse ``YYYY-MM-DD`` into a validated :class:`EthiopianDate`.

    The year may have up to 4300 digits; month and day take one or two.
    Shape problems raise :class:`FormatError`, out-of-range fields raise
    :class:`~ethiopian_calendar.api.errors.ValidationError`.
    """

    if not isinstance(text, str) or not text.strip():
        raise FormatError(text, "date text is empty")

    parts = text.strip().split("-")
    if len(parts) != 3:
        logger.debug("Rejected Ethiopian date text %r: %d parts", text, len(parts))
        raise FormatError(text, f"found {len(parts)} hyphen-separated parts")

    for (name, pattern, expected), part in zip(_FIELDS, parts):
        if not pattern.fullmatch(part):
            logger.debug("Rejected Ethiopian date text %r: bad %s %r", text, name, part)
            raise FormatError(text, f"{name} {part!r} must be {expected}")

    too_long = f"year has too many digits ({len(parts[0])})"
    if len(parts[0]) > _MAX_YEAR_DIGITS:
        raise FormatError(text, too_long)
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError as exc:  # interpreter configured with a lower digit limit
        raise FormatError(text, too_long) from exc
    return EthiopianDate(year, month, day)


def format_ethiopian_date_text(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"
