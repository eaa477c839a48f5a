"""Exception hierarchy for duration parsing."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Why a duration string was rejected."""

    INVALID_ENCODING = "invalid_encoding"
    UNIT_ORDER_VIOLATION = "unit_order_violation"
    NEGATIVE_DURATION = "negative_duration"


class DurationParseError(ValueError):
    """Base exception for duration parse failures.

    Subclasses ValueError so pydantic validators can raise it directly and
    have the message surface unchanged in the ValidationError.
    """

    kind: ParseErrorKind = ParseErrorKind.INVALID_ENCODING

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.text = text


class InvalidEncodingError(DurationParseError):
    """Raised for non-ASCII input, a bad number, or unconsumed trailing text."""

    kind = ParseErrorKind.INVALID_ENCODING


class UnitOrderError(DurationParseError):
    """Raised when units do not appear in strictly decreasing magnitude."""

    kind = ParseErrorKind.UNIT_ORDER_VIOLATION


class NegativeDurationError(DurationParseError):
    """Raised when a segment or the total is negative."""

    kind = ParseErrorKind.NEGATIVE_DURATION


ERR_MSG_INVALID_DURATION = "valid duration, only d, h, m, s, ms are supported."
ERR_MSG_UNIT_ORDER = "d, h, m, s, ms should occur in given order."
ERR_MSG_NEGATIVE = "duration should be positive."
ERR_MSG_OUT_OF_RANGE = "duration out of range."
