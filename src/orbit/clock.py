"""Minute-resolution timestamps captured from the process-local clock."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

_DISPLAY_PATTERN = re.compile(
    r"^(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2})$"
)


@dataclass(frozen=True, order=True)
class Timestamp:
    """Wall-clock time truncated to the minute.

    Field order makes comparison chronological.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute)

    @classmethod
    def now(cls, timezone: str | None = None) -> Timestamp:
        """Capture the current local time, or the time in an IANA timezone."""
        tz = ZoneInfo(timezone) if timezone else None
        return cls.from_datetime(datetime.now(tz))

    @classmethod
    def parse(cls, text: str) -> Timestamp:
        """Parse the ``DD/MM/YYYY HH:MM`` display form.

        Raises:
            ValueError: If the text is not in display form.
        """
        match = _DISPLAY_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid timestamp: {text!r}")
        return cls(**{k: int(v) for k, v in match.groupdict().items()})

    def __str__(self) -> str:
        return (
            f"{self.day:02d}/{self.month:02d}/{self.year:04d} "
            f"{self.hour:02d}:{self.minute:02d}"
        )


Clock = Callable[[], Timestamp]


def system_clock(timezone: str | None = None) -> Clock:
    """Build a clock bound to a timezone (``None`` = local time)."""

    def _now() -> Timestamp:
        return Timestamp.now(timezone)

    return _now
