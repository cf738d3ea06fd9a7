"""Clock abstraction so time-dependent logic never reads wall-clock time directly."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta


class Clock(ABC):
    """Supplies the current instant. Inject a fake in tests."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""


class SystemClock(Clock):
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock that returns a fixed instant until it is moved explicitly."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by ``delta`` and return the new instant."""
        self._instant = self._instant + delta
        return self._instant
