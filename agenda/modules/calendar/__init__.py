"""Calendar events, recurrence and agenda management."""

from agenda.modules.calendar.errors import AgendaError, InvalidTermination, UnsupportedFrequency
from agenda.modules.calendar.models import (
    ConflictResult,
    Event,
    FixedTerminationEvent,
    RepetitiveEvent,
    SimpleEvent,
)
from agenda.modules.calendar.recurrence import Frequency
from agenda.modules.calendar.service import Agenda

__all__ = [
    "Agenda",
    "AgendaError",
    "ConflictResult",
    "Event",
    "FixedTerminationEvent",
    "Frequency",
    "InvalidTermination",
    "RepetitiveEvent",
    "SimpleEvent",
    "UnsupportedFrequency",
]
