"""Cadence arithmetic for repeating events.

Occurrence ``k`` of an event is always computed directly from the anchor
date (``anchor + k * step``) instead of stepping from the previous
occurrence. For monthly cadences this means month-end dates clamp to the
last valid day of the target month without drifting: an event anchored on
Jan 31 occurs on Feb 29 (2024), Mar 31, Apr 30, and so on.
"""

from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import Optional

from dateutil.relativedelta import relativedelta

from agenda.modules.calendar.errors import UnsupportedFrequency


class Frequency(StrEnum):
    """Supported repetition cadences."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: object) -> Frequency:
        """Coerce a cadence name (``"weekly"``, ``"WEEKS"``...) to a Frequency."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _ALIASES.get(key, key)
            try:
                return cls(key)
            except ValueError:
                pass
        raise UnsupportedFrequency(value)

    @property
    def unit(self) -> str:
        """Singular name of one cadence step (``day``, ``week``, ``month``)."""
        return {"daily": "day", "weekly": "week", "monthly": "month"}[self.value]


# Unit names as used by date libraries (days, weeks, months)
_ALIASES = {
    "day": "daily",
    "days": "daily",
    "week": "weekly",
    "weeks": "weekly",
    "month": "monthly",
    "months": "monthly",
}


def advance(anchor: dt.date, steps: int, frequency: Frequency) -> dt.date:
    """Return the date ``steps`` cadence steps after ``anchor``."""
    if frequency == Frequency.DAILY:
        return anchor + dt.timedelta(days=steps)
    if frequency == Frequency.WEEKLY:
        return anchor + dt.timedelta(weeks=steps)
    if frequency == Frequency.MONTHLY:
        return anchor + relativedelta(months=steps)
    raise UnsupportedFrequency(frequency)


def steps_between(anchor: dt.date, day: dt.date, frequency: Frequency) -> int:
    """Count the complete cadence steps from ``anchor`` to ``day``.

    Partial steps are truncated toward zero, so a Monday-to-Sunday span is
    zero weeks. Monthly spans count whole months under the same clamping
    rule as :func:`advance`.
    """
    if frequency == Frequency.DAILY:
        return (day - anchor).days
    if frequency == Frequency.WEEKLY:
        days = (day - anchor).days
        weeks = abs(days) // 7
        return weeks if days >= 0 else -weeks
    if frequency == Frequency.MONTHLY:
        delta = relativedelta(day, anchor)
        return delta.years * 12 + delta.months
    raise UnsupportedFrequency(frequency)


def occurrence_index(anchor: dt.date, day: dt.date, frequency: Frequency) -> Optional[int]:
    """Return ``k`` such that ``advance(anchor, k) == day``, or None.

    Days before the anchor never have an index.
    """
    if day < anchor:
        return None
    if frequency == Frequency.DAILY:
        return (day - anchor).days
    if frequency == Frequency.WEEKLY:
        days = (day - anchor).days
        return days // 7 if days % 7 == 0 else None
    if frequency == Frequency.MONTHLY:
        months = (day.year - anchor.year) * 12 + (day.month - anchor.month)
        return months if advance(anchor, months, frequency) == day else None
    raise UnsupportedFrequency(frequency)
