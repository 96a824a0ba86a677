"""Hook implementations that integrate the Ethiopian calendar with Frappe."""
from __future__ import annotations

from .api import functions, preferences


def boot_session(bootinfo):
    """Send the user's display calendar and today's dates with the boot payload."""

    context = preferences.calendar_context()
    context["version"] = functions.ethiopian_calendar_version()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("ethiopian_calendar", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "ethiopian_calendar", context)
