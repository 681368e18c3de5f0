"""Duration parsing.

The accepted syntax is a sequence of ``<value> <unit>`` pairs in any order,
such as ``"15 days 20 seconds 100 milliseconds"`` or
``"15days20seconds100milliseconds"``. Anything other than ASCII letters,
digits, ``_`` and ``μ`` only separates fields, so
``".:++++]][][[][15[]][seconds][]:}}}}"`` reads as ``"15 seconds"``.
Repeated units are summed and values may be negative as long as the total
is not.

A lone integer with no unit anywhere in the input is read as seconds.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta

from spanparse.errors import (
    DurationOverflowError,
    NoUnitFoundError,
    NoValueFoundError,
    OutOfBoundsError,
    ParseIntError,
    UnknownUnitError,
)
from spanparse.scanner import match_bare_seconds, scan
from spanparse.types import NANOS_PER_SECOND, Duration, RawToken, TimeUnit
from spanparse.units import resolve_unit

logger = logging.getLogger(__name__)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1
_U32_MAX = 2**32 - 1


def _checked(value: int) -> int:
    """Fail if value has left the signed 64-bit range."""
    if not _I64_MIN <= value <= _I64_MAX:
        raise DurationOverflowError(value)
    return value


def _parse_i64(text: str) -> int:
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ParseIntError(text)
    return value


def _div_toward_zero(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _resolve(word: str) -> TimeUnit:
    unit = resolve_unit(word)
    if not isinstance(unit, TimeUnit):
        raise UnknownUnitError(word)
    return unit


@dataclass(slots=True)
class UnitTotals:
    """Signed running total per unit, kept apart until conversion."""

    totals: dict[TimeUnit, int] = field(
        default_factory=lambda: dict.fromkeys(TimeUnit, 0)
    )

    def add(self, token: RawToken) -> None:
        """Add one scanned token to the matching total."""
        if token.unit is None:
            raise NoUnitFoundError(token.text)

        integer = _parse_i64(token.integer)
        if token.fraction is None:
            unit = _resolve(token.unit)
            self.totals[unit] = _checked(self.totals[unit] + integer)
            return

        # The fraction is added unsigned: "-1.5" scales to -10 + 5
        fraction = _parse_i64(token.fraction)
        scale = _checked(10 ** len(token.fraction))
        scaled = _checked(_checked(integer * scale) + fraction)

        unit = _resolve(token.unit)
        nanos = _div_toward_zero(_checked(scaled * unit.nanos), scale)
        self.totals[TimeUnit.NANOSECOND] = _checked(
            self.totals[TimeUnit.NANOSECOND] + nanos
        )

    def to_duration(self) -> Duration:
        """Fold every total into seconds and nanoseconds.

        Raises OutOfBoundsError if the result is negative or too large.
        """
        seconds = 0
        nanoseconds = 0
        for unit, total in self.totals.items():
            if unit.is_subsecond:
                nanoseconds = _checked(nanoseconds + _checked(unit.nanos * total))
            else:
                seconds = _checked(seconds + _checked(unit.seconds * total))

        carry = _div_toward_zero(nanoseconds, NANOS_PER_SECOND)
        seconds = _checked(seconds + carry)
        nanoseconds -= carry * NANOS_PER_SECOND

        if not 0 <= seconds <= _U64_MAX:
            raise OutOfBoundsError(seconds)
        if not 0 <= nanoseconds <= _U32_MAX:
            raise OutOfBoundsError(nanoseconds)
        return Duration(seconds, nanoseconds)


def parse(text: str) -> Duration:
    """Parse a human-written duration such as ``"1 day -1 hour"``.

    Raises a DurationError subclass on the first problem found.
    """
    bare = match_bare_seconds(text)
    if bare is not None:
        seconds = _parse_i64(bare)
        if seconds < 0:
            raise DurationOverflowError(seconds)
        logger.debug("Parsed %r as %d bare seconds", text, seconds)
        return Duration(seconds, 0)

    totals = UnitTotals()
    found = False
    for token in scan(text):
        totals.add(token)
        found = True
    if not found:
        raise NoValueFoundError(text)

    duration = totals.to_duration()
    logger.debug("Parsed %r as %s", text, duration)
    return duration


def parse_timedelta(text: str) -> timedelta:
    """Parse a duration string straight into a timedelta."""
    return parse(text).to_timedelta()
