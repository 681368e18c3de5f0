"""Core types for spanparse."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

NANOS_PER_SECOND = 1_000_000_000


class TimeUnit(Enum):
    """The ten canonical units, each with its exact length in nanoseconds."""

    NANOSECOND = ("nanoseconds", 1)
    MICROSECOND = ("microseconds", 1_000)
    MILLISECOND = ("milliseconds", 1_000_000)
    SECOND = ("seconds", NANOS_PER_SECOND)
    MINUTE = ("minutes", 60 * NANOS_PER_SECOND)
    HOUR = ("hours", 3_600 * NANOS_PER_SECOND)
    DAY = ("days", 86_400 * NANOS_PER_SECOND)
    WEEK = ("weeks", 604_800 * NANOS_PER_SECOND)
    # Gregorian 400-year average: a year is 365.2425 days, a month a twelfth of it
    MONTH = ("months", 2_629_746 * NANOS_PER_SECOND)
    YEAR = ("years", 31_556_952 * NANOS_PER_SECOND)

    def __init__(self, full_name: str, nanos: int) -> None:
        self.full_name = full_name
        self.nanos = nanos

    @property
    def is_subsecond(self) -> bool:
        return self.nanos < NANOS_PER_SECOND

    @property
    def seconds(self) -> int:
        """Whole seconds per unit. Only exact for units of a second or more."""
        return self.nanos // NANOS_PER_SECOND


@dataclass(frozen=True, slots=True)
class RawToken:
    """A single scanned value with its optional decimal part and unit word."""

    text: str  # Whole matched substring, used in error reports
    integer: str  # Optional "-" followed by digits
    fraction: str | None  # Digits after the decimal point
    unit: str | None  # Trailing word, not yet resolved


@dataclass(frozen=True, slots=True)
class Duration:
    """A non-negative span of time: whole seconds plus sub-second nanoseconds."""

    seconds: int
    nanoseconds: int

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, dropping anything below a microsecond.

        Raises OverflowError if the span is longer than ``timedelta.max``.
        """
        return timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // 1_000
        )
