"""Ethiopian calendar conversion helpers for Frappe and plain Python."""

__version__ = "1.1.0"
