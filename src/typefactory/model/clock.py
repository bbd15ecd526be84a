"""Clocks used to derive date/time leaf values.

Date and time leaves never read the wall clock directly.  Every leaf draw
takes exactly one :meth:`Clock.now` reading from the injected clock, so a
:class:`FixedClock` makes date/time output reproducible.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the ``tzinfo`` for an IANA zone name (``None``/``"UTC"`` is UTC)."""

    if name is None or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


class Clock(ABC):
    """Source of the current instant."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz: tzinfo = tz or timezone.utc

    @abstractmethod
    def now(self) -> datetime:
        """Return a timezone-aware datetime in :attr:`tz`."""


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!s})"


class FixedClock(Clock):
    """A clock pinned to a single instant (the Unix epoch by default)."""

    def __init__(self, instant: datetime = EPOCH, tz: tzinfo | None = None) -> None:
        super().__init__(tz)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.tz)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant.astimezone(self.tz)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return self.instant == other.instant and self.tz == other.tz

    def __hash__(self) -> int:
        return hash((self.instant, self.tz))

    def __repr__(self) -> str:
        return f"FixedClock(instant={self.instant.isoformat()}, tz={self.tz!s})"


class RandomClock(Clock):
    """Return a uniformly drawn instant between ``start`` and ``end``.

    ``end`` defaults to the wall-clock time of each reading.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        start: datetime = EPOCH,
        end: datetime | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        super().__init__(tz)
        if end is not None and end < start:
            raise ValueError("end must not be before start")
        self.rng = rng or random.Random()
        self.start = start
        self.end = end

    def now(self) -> datetime:
        end = self.end or datetime.now(self.tz)
        span = end - self.start
        return (self.start + span * self.rng.random()).astimezone(self.tz)

    def __repr__(self) -> str:
        return f"RandomClock(start={self.start.isoformat()}, end={self.end!r}, tz={self.tz!s})"


__all__ = ["EPOCH", "Clock", "SystemClock", "FixedClock", "RandomClock", "resolve_timezone"]
