"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable, filename-safe string (e.g., "20261018_134502")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")

