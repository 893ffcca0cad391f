"""Agenda service — an ordered collection of events and its day-level queries.

The agenda never does date arithmetic itself; every predicate is delegated to
the events. It is not thread-safe: callers sharing an agenda across threads
must serialise ``add_event`` against the queries.
"""

from __future__ import annotations

import datetime as dt
from typing import Iterator

from agenda.logging_config import get_logger
from agenda.modules.calendar.models import ConflictResult, Event

logger = get_logger(__name__)


class Agenda:
    """Events kept in insertion order."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    @property
    def events(self) -> list[Event]:
        """Snapshot of the stored events."""
        return list(self._events)

    def add_event(self, event: Event) -> None:
        """Append an event. Duplicates are kept."""
        self._events.append(event)
        logger.debug("event_added", title=event.title, kind=event.kind, total=len(self._events))

    def events_in_day(self, day: dt.date) -> list[Event]:
        """Events occurring on ``day``, in insertion order."""
        return [e for e in self._events if e.is_in_day(day)]

    def find_by_title(self, title: str) -> list[Event]:
        """Events whose title equals ``title`` exactly (case-sensitive)."""
        return [e for e in self._events if e.title == title]

    def detect_conflicts(self, candidate: Event) -> ConflictResult:
        """Stored events whose interval overlaps the candidate's.

        Each stored event contributes only its first ``[start, end)``
        interval; later occurrences of repeating events are not expanded.
        """
        conflicts = [e for e in self._events if candidate.overlaps(e)]
        if conflicts:
            logger.info(
                "conflicts_detected",
                title=candidate.title,
                conflicting=[e.title for e in conflicts],
            )
        return ConflictResult(
            has_conflict=len(conflicts) > 0,
            conflicting_events=conflicts,
        )

    def is_free_for(self, candidate: Event) -> bool:
        """Whether ``candidate`` fits without overlapping a stored event."""
        return not self.detect_conflicts(candidate).has_conflict
