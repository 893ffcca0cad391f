"""Data models for agenda events.

Events form a closed set of variants discriminated on ``kind``:

* ``SimpleEvent`` occurs once, on the date of its start.
* ``RepetitiveEvent`` repeats forever at a daily, weekly or monthly cadence.
* ``FixedTerminationEvent`` repeats until an inclusive end date or for a
  fixed number of occurrences.

Every variant answers ``is_in_day``. For repeating events the anchor date
(the date of ``start``) always occurs, even when it was added as an
exception; exceptions only suppress later occurrences.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Literal, NoReturn, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from agenda.config import get_settings
from agenda.logging_config import get_logger
from agenda.modules.calendar.errors import InvalidTermination
from agenda.modules.calendar.recurrence import (
    Frequency,
    advance,
    occurrence_index,
    steps_between,
)

logger = get_logger(__name__)


class _EventBase(BaseModel):
    """Fields and predicates shared by every event variant."""

    title: str
    start: dt.datetime = Field(frozen=True)
    duration: dt.timedelta = dt.timedelta(0)

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: dt.timedelta) -> dt.timedelta:
        if v < dt.timedelta(0):
            raise ValueError("duration must not be negative")
        return v

    @property
    def end(self) -> dt.datetime:
        """Moment the event finishes (exclusive)."""
        return self.start + self.duration

    @property
    def anchor_date(self) -> dt.date:
        """Calendar date of the first occurrence."""
        return self.start.date()

    def is_in_day(self, day: dt.date) -> bool:
        """Whether the event occurs on ``day``."""
        return day == self.anchor_date

    def overlaps(self, other: _EventBase) -> bool:
        """Strict overlap of the ``[start, end)`` intervals of both events.

        Repeating events contribute their first interval only.
        """
        return self.start < other.end and other.start < self.end

    def occurrences(
        self,
        start: Optional[dt.date] = None,
        end: Optional[dt.date] = None,
    ) -> list[dt.date]:
        """Occurrence dates between ``start`` and ``end`` inclusive."""
        day = self.anchor_date
        if (start is None or start <= day) and (end is None or day <= end):
            return [day]
        return []

    def __str__(self) -> str:
        return f"{self.title} {self.start:%Y-%m-%d %H:%M} ({self.duration})"


class SimpleEvent(_EventBase):
    """An event that happens exactly once."""

    kind: Literal["simple"] = "simple"


class _RecurringEvent(_EventBase):
    """Cadence and exception handling shared by repeating events."""

    frequency: Frequency = Field(frozen=True)
    exceptions: set[dt.date] = Field(default_factory=set)

    @field_validator("frequency", mode="before")
    @classmethod
    def parse_frequency(cls, v: object) -> Frequency:
        return Frequency.parse(v)

    def add_exception(self, day: dt.date) -> None:
        """Skip the occurrence on ``day``. Non-occurrence dates are accepted."""
        if isinstance(day, dt.datetime):
            day = day.date()
        self.exceptions.add(day)
        logger.debug("exception_added", title=self.title, day=day.isoformat())

    def _last_index(self) -> Optional[int]:
        return None

    def _horizon(self) -> dt.date:
        return self.anchor_date + dt.timedelta(days=get_settings().agenda_probe_window_days)

    def occurrences(
        self,
        start: Optional[dt.date] = None,
        end: Optional[dt.date] = None,
    ) -> list[dt.date]:
        """Occurrence dates between ``start`` and ``end`` inclusive.

        Without ``end`` the listing stops at the last occurrence of a bounded
        event, or after the configured probe window for an unbounded one.
        """
        anchor = self.anchor_date
        start = start or anchor
        end = end or self._horizon()
        last = self._last_index()

        index = max(0, steps_between(anchor, start, self.frequency))
        found: list[dt.date] = []
        while last is None or index <= last:
            day = advance(anchor, index, self.frequency)
            if day > end:
                break
            if day >= start and self.is_in_day(day):
                found.append(day)
            index += 1
        return found

    def __str__(self) -> str:
        text = f"{super().__str__()} every {self.frequency.unit}"
        if self.exceptions:
            text += f", {len(self.exceptions)} exception(s)"
        return text


class RepetitiveEvent(_RecurringEvent):
    """An event repeating forever at a fixed cadence."""

    kind: Literal["repetitive"] = "repetitive"

    def is_in_day(self, day: dt.date) -> bool:
        if super().is_in_day(day):
            return True
        if day in self.exceptions:
            return False
        return occurrence_index(self.anchor_date, day, self.frequency) is not None


class FixedTerminationEvent(_RecurringEvent):
    """A repeating event bounded by an end date or an occurrence count.

    Supply either ``termination_date`` (inclusive) or ``occurrence_count``;
    the other is derived at construction and both stay fixed afterwards.
    """

    kind: Literal["fixed_termination"] = "fixed_termination"
    termination_date: Optional[dt.date] = Field(default=None, frozen=True)
    occurrence_count: Optional[int] = Field(default=None, frozen=True)

    @classmethod
    def until(
        cls,
        title: str,
        start: dt.datetime,
        duration: dt.timedelta,
        frequency: Frequency | str,
        termination_date: dt.date,
    ) -> FixedTerminationEvent:
        """Build an event whose last possible occurrence is ``termination_date``."""
        return cls(
            title=title,
            start=start,
            duration=duration,
            frequency=frequency,
            termination_date=termination_date,
        )

    @classmethod
    def repeated(
        cls,
        title: str,
        start: dt.datetime,
        duration: dt.timedelta,
        frequency: Frequency | str,
        occurrence_count: int,
    ) -> FixedTerminationEvent:
        """Build an event occurring ``occurrence_count`` times, anchor included."""
        return cls(
            title=title,
            start=start,
            duration=duration,
            frequency=frequency,
            occurrence_count=occurrence_count,
        )

    @model_validator(mode="after")
    def derive_bound(self) -> FixedTerminationEvent:
        anchor = self.anchor_date
        if self.termination_date is None and self.occurrence_count is None:
            self._reject("termination_date or occurrence_count is required")

        if self.termination_date is not None:
            if self.termination_date < anchor:
                self._reject(
                    f"termination date {self.termination_date} is before start {anchor}"
                )
            count = steps_between(anchor, self.termination_date, self.frequency) + 1
            if self.occurrence_count is not None and self.occurrence_count != count:
                self._reject(
                    f"occurrence count {self.occurrence_count} does not match "
                    f"termination date {self.termination_date} ({count} occurrences)"
                )
            # Frozen fields are assigned once, here
            object.__setattr__(self, "occurrence_count", count)
        else:
            if self.occurrence_count < 1:
                self._reject(f"occurrence count must be at least 1, got {self.occurrence_count}")
            try:
                terminates = advance(anchor, self.occurrence_count - 1, self.frequency)
            except (OverflowError, ValueError):
                self._reject(
                    f"{self.occurrence_count} {self.frequency.value} occurrences "
                    f"from {anchor} run past the last representable date"
                )
            object.__setattr__(self, "termination_date", terminates)
        return self

    def _reject(self, reason: str) -> NoReturn:
        logger.warning("invalid_termination", title=self.title, reason=reason)
        raise InvalidTermination(reason)

    def _last_index(self) -> Optional[int]:
        return self.occurrence_count - 1

    def _horizon(self) -> dt.date:
        return self.termination_date

    def is_in_day(self, day: dt.date) -> bool:
        if super().is_in_day(day):
            return True
        index = occurrence_index(self.anchor_date, day, self.frequency)
        if index is None or index > self._last_index():
            return False
        return day not in self.exceptions

    def __str__(self) -> str:
        return (
            f"{super().__str__()} until {self.termination_date}"
            f" ({self.occurrence_count} occurrences)"
        )


Event = Annotated[
    Union[SimpleEvent, RepetitiveEvent, FixedTerminationEvent],
    Field(discriminator="kind"),
]


class ConflictResult(BaseModel):
    """Outcome of checking a candidate event against an agenda."""

    has_conflict: bool = False
    conflicting_events: list[Event] = Field(default_factory=list)
