"""Unit name resolution.

Any initial segment of a unit's full name (or of its short alias) is
accepted, case-insensitively, as long as it is not ambiguous. The exception
is ``m``: a lowercase ``m`` means minutes and an uppercase ``M`` means
months.
"""

from spanparse.types import TimeUnit


def _abbreviates(folded: str, *names: str) -> bool:
    return any(name.startswith(folded) for name in names)


def resolve_unit(word: str) -> TimeUnit | str:
    """Map a unit word to its TimeUnit, or return the word if none matches."""
    folded = word.casefold()

    if folded.startswith("n") and _abbreviates(folded, "nanoseconds", "nsecs"):
        return TimeUnit.NANOSECOND
    if (
        (folded.startswith("mic") and _abbreviates(folded, "microseconds"))
        or (folded.startswith("u") and _abbreviates(folded, "usecs"))
        or (folded.startswith("μ") and _abbreviates(folded, "μsecs"))
    ):
        return TimeUnit.MICROSECOND
    if (folded.startswith("mil") and _abbreviates(folded, "milliseconds")) or (
        folded.startswith("ms") and _abbreviates(folded, "msecs")
    ):
        return TimeUnit.MILLISECOND
    if folded.startswith("s") and _abbreviates(folded, "seconds", "secs"):
        return TimeUnit.SECOND
    # Case-sensitive on purpose: "m" is minutes, "M" is months
    if (folded.startswith("min") or word.startswith("m")) and _abbreviates(
        folded, "minutes", "mins"
    ):
        return TimeUnit.MINUTE
    if folded.startswith("h") and _abbreviates(folded, "hours", "hrs"):
        return TimeUnit.HOUR
    if folded.startswith("d") and _abbreviates(folded, "days"):
        return TimeUnit.DAY
    if folded.startswith("w") and _abbreviates(folded, "weeks", "wks"):
        return TimeUnit.WEEK
    if (folded.startswith("mo") or word.startswith("M")) and _abbreviates(
        folded, "months"
    ):
        return TimeUnit.MONTH
    if folded.startswith("y") and _abbreviates(folded, "years", "yrs"):
        return TimeUnit.YEAR
    return word
