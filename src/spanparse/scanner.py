"""Token scanning for duration strings."""

import re
from collections.abc import Iterator

from spanparse.errors import ExpNotSupportedError
from spanparse.types import RawToken

# ASCII word characters plus the Greek and micro-sign mu for "μs"
_WORD = r"0-9a-zA-Z_\u03bc\u00b5"

# An input made of nothing but one (possibly negative) integer and junk
_BARE_SECONDS_PATTERN = re.compile(rf"[^{_WORD}-]*(-?[0-9]+)[^{_WORD}-]*")

_TOKEN_PATTERN = re.compile(
    rf"""
    (?P<int>-?[0-9]+)               # the sign must touch the digits
    \.?(?P<dec>[0-9]+)?             # only reachable after a decimal point
    (?:[eE](?P<exp>[-+]?[0-9]+))?   # matched so it can be rejected
    (?:
        [^{_WORD}]*                 # separators
        (?P<unit>[a-zA-Z_\u03bc\u00b5]+) # a word with no digits
    )?
    """,
    re.VERBOSE,
)


def match_bare_seconds(text: str) -> str | None:
    """Return the signed digits if the input is a lone integer, else None."""
    match = _BARE_SECONDS_PATTERN.fullmatch(text)
    if not match:
        return None
    return match.group(1)


def scan(text: str) -> Iterator[RawToken]:
    """Yield value tokens left to right.

    Words with no value in front of them never form a token and are skipped.
    Raises ExpNotSupportedError on the first value written with an exponent.
    """
    for match in _TOKEN_PATTERN.finditer(text):
        if match.group("exp") is not None:
            raise ExpNotSupportedError(match.group(0))
        yield RawToken(
            text=match.group(0),
            integer=match.group("int"),
            fraction=match.group("dec"),
            unit=match.group("unit"),
        )
