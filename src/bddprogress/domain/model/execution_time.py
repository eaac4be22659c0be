"""Execution time value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class ExecutionTime:
    """When something started and how long it ran.

    Attributes:
        start: Start timestamp
        duration: Elapsed time (must be >= 0)
    """

    start: datetime
    duration: timedelta

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start is None:
            raise TypeError("start must not be None")
        if self.duration < timedelta(0):
            raise ValueError(f"duration must be >= 0, got {self.duration}")

    def format_pretty(self) -> str:
        """Format duration, e.g. '1m 5s 20ms'."""
        return format_pretty(self.duration)


def format_pretty(duration: timedelta) -> str:
    """Format duration as '<d>d <h>h <m>m <s>s <ms>ms'.

    Zero components are omitted. Zero duration renders '0ms'.

    Args:
        duration: Non-negative duration

    Returns:
        Human-readable duration
    """
    total_ms = duration // timedelta(milliseconds=1)
    seconds, ms = divmod(total_ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    parts = [
        f"{value}{unit}"
        for value, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s"), (ms, "ms"))
        if value
    ]
    return " ".join(parts) or "0ms"
