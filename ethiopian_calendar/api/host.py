"""Frappe integration points shared by the API modules."""
from __future__ import annotations

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except Exception:  # pragma: no cover - modules fall back to plain Python behaviour
    frappe = None  # type: ignore

__all__ = [
    "frappe",
    "maybe_whitelist",
]


def maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    """Expose ``func`` over ``/api/method`` when running inside a Frappe site."""

    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)
    return func
