"""Which calendar dates are shown in, per user and per site."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

from .clock import current_timestamp
from .converter import GregorianInput, coerce_gregorian, to_ethiopian_date_only
from .host import frappe, maybe_whitelist

__all__ = [
    "DEFAULT_CALENDAR",
    "RENDERERS",
    "DisplayCalendar",
    "calendar_context",
    "calendar_name",
    "choose_calendar",
    "display_calendar",
    "display_date",
    "get_calendar_preference",
    "set_calendar_preference",
]

logger = logging.getLogger(__name__)


def _gregorian_text(value: GregorianInput) -> str:
    return coerce_gregorian(value).date().isoformat()


RENDERERS: Dict[str, Callable[[GregorianInput], str]] = {
    "ethiopian": to_ethiopian_date_only,
    "gregorian": _gregorian_text,
}
DEFAULT_CALENDAR = "ethiopian"
_DEFAULTS_KEY = "ethiopian_calendar_mode"
_SITE = "__default"

# Used when no Frappe site is available; keyed by user, ``_SITE`` for the site.
_local_defaults: Dict[str, str] = {}


@dataclass(frozen=True)
class DisplayCalendar:
    """The calendar picked for a user and the level it was configured at."""

    name: str
    scope: str

    def render(self, value: Optional[GregorianInput]) -> Optional[str]:
        if value is None:
            return None
        return RENDERERS[self.name](value)


def calendar_name(value: object) -> str:
    name = value.strip().lower() if isinstance(value, str) else None
    if name not in RENDERERS:
        raise ValueError(
            f"Unknown calendar {value!r}; expected one of: {', '.join(sorted(RENDERERS))}"
        )
    return name


def _user(user: Optional[str]) -> Optional[str]:
    if user is None and frappe:  # pragma: no cover - depends on a Frappe session
        user = frappe.session.user
    if not user or user == "Guest":
        return None
    return user


def _stored(parent: str) -> Optional[str]:
    if frappe:  # pragma: no cover - depends on a Frappe site
        name = frappe.db.get_default(_DEFAULTS_KEY, parent=parent)
    else:
        name = _local_defaults.get(parent)
    return name if name in RENDERERS else None


def _store(name: str, parent: str) -> None:
    logger.debug("Storing display calendar %r for %s", name, parent)
    if frappe:  # pragma: no cover - depends on a Frappe site
        frappe.db.set_default(_DEFAULTS_KEY, name, parent=parent)
        frappe.defaults.clear_cache(user=None if parent == _SITE else parent)
        return
    _local_defaults[parent] = name


def display_calendar(user: Optional[str] = None) -> DisplayCalendar:
    """User choice, then the site choice, then :data:`DEFAULT_CALENDAR`."""

    user = _user(user)
    if user is not None:
        name = _stored(user)
        if name:
            return DisplayCalendar(name, "user")
    name = _stored(_SITE)
    if name:
        return DisplayCalendar(name, "site")
    return DisplayCalendar(DEFAULT_CALENDAR, "default")


def choose_calendar(calendar: str, user: Optional[str] = None, *, site: bool = False) -> DisplayCalendar:
    name = calendar_name(calendar)
    if site:
        _store(name, _SITE)
        return display_calendar(user)
    user = _user(user)
    if user is None:
        raise ValueError("a signed-in user is required to store a personal calendar")
    _store(name, user)
    return display_calendar(user)


def display_date(value: Optional[GregorianInput], user: Optional[str] = None) -> Optional[str]:
    """Render a Gregorian value as ``YYYY-MM-DD`` in the user's calendar."""

    return display_calendar(user).render(value)


def calendar_context(user: Optional[str] = None, now: Optional[datetime] = None) -> Dict[str, object]:
    """Today's date as the user sees it, plus the Ethiopian date for client widgets."""

    selected = display_calendar(user)
    moment = current_timestamp(now)
    return {
        "calendar": selected.name,
        "scope": selected.scope,
        "today": selected.render(moment),
        "ethiopian_today": to_ethiopian_date_only(moment),
    }


@maybe_whitelist
def get_calendar_preference() -> Dict[str, object]:
    return calendar_context()


@maybe_whitelist
def set_calendar_preference(calendar: str, scope: str = "user") -> Dict[str, object]:
    if scope not in ("user", "site"):
        raise ValueError("scope must be either 'user' or 'site'")
    if scope == "site" and frappe:  # pragma: no cover - depends on a Frappe session
        frappe.only_for("System Manager")
    choose_calendar(calendar, site=scope == "site")
    return calendar_context()
