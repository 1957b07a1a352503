"""Which days accept new or changed work-day records.

The month grid and the write path both ask the same question, so the rule
lives in one place.
"""
from __future__ import annotations

from datetime import date


def is_open_for_entry(day: date, today: date) -> bool:
    """A day can be logged or edited once it has started (no future days)."""
    return day <= today
