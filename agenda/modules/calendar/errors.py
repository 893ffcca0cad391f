"""Domain errors raised while building calendar events."""

from __future__ import annotations


class AgendaError(Exception):
    """Base class for agenda domain errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class InvalidTermination(AgendaError):
    """The termination bound of a repeating event is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_TERMINATION", message)


class UnsupportedFrequency(AgendaError):
    """The cadence is not one of daily, weekly or monthly."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("UNSUPPORTED_FREQUENCY", f"Unsupported frequency: {value!r}")
