"""Errors raised while parsing a duration string.

Every error aborts the whole parse. Each one carries the offending text or
number as ``value``.
"""

from typing import Any


class DurationError(ValueError):
    """Base class for all duration parsing errors."""

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message)
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DurationError):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))


class ParseIntError(DurationError):
    """A digit run does not fit in a signed 64-bit integer."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f'Failed to parse "{text}" as an integer')


class UnknownUnitError(DurationError):
    """A unit word matched none of the known units."""

    def __init__(self, word: str) -> None:
        super().__init__(word, f'"{word}" is not a known unit')


class OutOfBoundsError(DurationError):
    """The final seconds or nanoseconds are negative or too large."""

    def __init__(self, number: int) -> None:
        super().__init__(number, f'"{number}" cannot be converted to u64')


class DurationOverflowError(DurationError):
    """Signed 64-bit arithmetic overflowed while combining values."""

    def __init__(self, number: int | None = None) -> None:
        super().__init__(
            number, "Value too high or too low (maximum is around ±9.2e18)"
        )


class ExpNotSupportedError(DurationError):
    """A value was written in exponential notation, e.g. ``2.3e4``."""

    def __init__(self, text: str) -> None:
        super().__init__(
            text, f'Exponential notation not supported (i.e. not 2.3e4): "{text}"'
        )


class NoUnitFoundError(DurationError):
    """A value had no unit and was not the only thing in the input."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f'No unit found for the value "{text}"')


class NoValueFoundError(DurationError):
    """The input holds no value at all."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f'No value found in the string "{text}"')
