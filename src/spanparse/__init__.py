"""spanparse - Parse human-written durations into exact seconds and nanoseconds."""

# Parsing
from spanparse.duration import parse, parse_timedelta

# Errors
from spanparse.errors import (
    DurationError,
    DurationOverflowError,
    ExpNotSupportedError,
    NoUnitFoundError,
    NoValueFoundError,
    OutOfBoundsError,
    ParseIntError,
    UnknownUnitError,
)

# Core types
from spanparse.types import Duration, TimeUnit
from spanparse.units import resolve_unit

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "DurationError",
    "DurationOverflowError",
    "ExpNotSupportedError",
    "NoUnitFoundError",
    "NoValueFoundError",
    "OutOfBoundsError",
    "ParseIntError",
    "TimeUnit",
    "UnknownUnitError",
    "parse",
    "parse_timedelta",
    "resolve_unit",
]
