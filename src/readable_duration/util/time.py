"""Duration parsing and formatting utilities."""

from __future__ import annotations

import math
import re
from datetime import timedelta

from readable_duration.errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_NEGATIVE,
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_UNIT_ORDER,
    InvalidEncodingError,
    NegativeDurationError,
    UnitOrderError,
)

# Unit weights in milliseconds
MS = 1
SECOND = MS * 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000

# Largest millisecond count an interchange value can carry (unsigned 64-bit)
MAX_MILLIS = 2**64 - 1

# Units in canonical (descending) order
UNITS: tuple[tuple[str, int], ...] = (
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
    ("s", SECOND),
    ("ms", MS),
)

_UNIT_CHARS = frozenset("dhms")
_SINGLE_CHAR_UNITS = {"d": DAY, "h": HOUR, "m": MINUTE, "s": SECOND}

# Float literal grammar: sign, digits with optional fraction, optional exponent,
# or the inf/infinity/nan words. Stricter than float(), which also takes "1_000".
_NUMBER_PATTERN = re.compile(
    r"^[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)$",
    re.IGNORECASE,
)


def _find_unit(text: str, start: int) -> int:
    """Return the index of the next unit character at or after start, or -1."""
    for idx in range(start, len(text)):
        if text[idx] in _UNIT_CHARS:
            return idx
    return -1


def _parse_number(literal: str, text: str) -> float:
    """Parse the numeric literal of one segment."""
    literal = literal.strip()
    if not _NUMBER_PATTERN.match(literal):
        raise InvalidEncodingError(ERR_MSG_INVALID_DURATION, text)

    number = float(literal)
    if not math.isfinite(number):
        raise InvalidEncodingError(ERR_MSG_INVALID_DURATION, text)
    return number


def parse_millis(value: str) -> int:
    """Parse a duration string into whole milliseconds.

    The grammar is zero or more ``<number><unit>`` segments with no
    separators, units taken from d, h, m, s, ms in strictly decreasing
    magnitude:
    - "500ms" -> 500
    - "1h30m" -> 5_400_000
    - "1.5s" -> 1500
    - "" -> 0

    Segments are summed in floating point and the total is floored to the
    millisecond.

    Raises:
        InvalidEncodingError: Non-ASCII input, a bad number, trailing text,
            or a total beyond an unsigned 64-bit millisecond count.
        UnitOrderError: A unit is not smaller than the one before it.
        NegativeDurationError: The segments sum to a negative total.
    """
    text = value.strip()
    if not text.isascii():
        raise InvalidEncodingError(f"unexpect ascii string: {text}", text)

    pos = 0
    last_unit = DAY + 1
    total = 0.0

    while (idx := _find_unit(text, pos)) != -1:
        # "ms" must win over "m" followed by a stray "s"
        if text.startswith("ms", idx):
            unit = MS
            end = idx + 2
        else:
            unit = _SINGLE_CHAR_UNITS[text[idx]]
            end = idx + 1

        if unit >= last_unit:
            raise UnitOrderError(ERR_MSG_UNIT_ORDER, text)

        total += _parse_number(text[pos:idx], text) * unit
        last_unit = unit
        pos = end

    if pos != len(text):
        raise InvalidEncodingError(ERR_MSG_INVALID_DURATION, text)
    # Finite segments can still overflow to inf, or cancel to nan
    if not math.isfinite(total):
        raise InvalidEncodingError(ERR_MSG_OUT_OF_RANGE, text)
    if total < 0:
        raise NegativeDurationError(ERR_MSG_NEGATIVE, text)

    millis = int(total)
    if millis > MAX_MILLIS:
        raise InvalidEncodingError(ERR_MSG_OUT_OF_RANGE, text)
    return millis


def format_millis(millis: int) -> str:
    """Format a millisecond count in canonical form, e.g. 5_400_000 -> "1h30m"."""
    if millis < 0:
        raise ValueError(f"Cannot format a negative duration: {millis}ms")

    parts = []
    remainder = millis
    for token, weight in UNITS:
        if remainder >= weight:
            quotient, remainder = divmod(remainder, weight)
            parts.append(f"{quotient}{token}")

    if not parts:
        return "0s"
    return "".join(parts)


def duration_to_ms(td: timedelta) -> int:
    """Convert a timedelta to whole milliseconds (floored)."""
    return td // timedelta(milliseconds=1)


def duration_to_sec(td: timedelta) -> float:
    """Convert a timedelta to fractional seconds."""
    return td.total_seconds()


def duration_to_nanos(td: timedelta) -> int:
    """Convert a timedelta to nanoseconds."""
    return (td // timedelta(microseconds=1)) * 1000
