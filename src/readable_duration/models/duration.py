"""Duration value models - the readable interval and its interchange value."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from readable_duration.util.time import (
    MAX_MILLIS,
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    SECOND,
    format_millis,
    parse_millis,
)


class ConfigValueKind(str, Enum):
    """Variants of a named configuration value.

    Only durations are carried for now.
    """

    DURATION = "duration"


class ConfigValue(BaseModel):
    """A tagged value for passing a duration through a generic config system."""

    model_config = ConfigDict(frozen=True)

    kind: ConfigValueKind = Field(
        default=ConfigValueKind.DURATION,
        description="Which variant this value holds",
    )
    value: int = Field(
        ge=0,
        le=MAX_MILLIS,
        description="Payload; whole milliseconds for DURATION",
    )

    @classmethod
    def duration(cls, millis: int) -> ConfigValue:
        """Create a duration value from whole milliseconds."""
        return cls(kind=ConfigValueKind.DURATION, value=millis)

    def __str__(self) -> str:
        return f"{self.value}ms"

    def __repr__(self) -> str:
        return str(self)


class ReadableDuration(BaseModel):
    """A non-negative time interval written as text like "1h30m" or "500ms".

    Stored as whole seconds plus sub-second nanoseconds. In configuration
    models it validates from the textual form and always serializes back to
    the canonical string, never to a number.
    """

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(default=0, ge=0, description="Whole seconds")
    nanos: int = Field(
        default=0,
        ge=0,
        lt=NANOS_PER_SEC,
        description="Sub-second remainder in nanoseconds",
    )

    @model_validator(mode="before")
    @classmethod
    def _coerce_text(cls, data: Any) -> Any:
        """Accept the textual encoding; reject bare numbers."""
        if isinstance(data, str):
            millis = parse_millis(data)
            return {
                "seconds": millis // SECOND,
                "nanos": (millis % SECOND) * NANOS_PER_MILLI,
            }
        if isinstance(data, (bool, int, float)):
            raise ValueError("duration must be a string such as '1h30m'")
        return data

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    @classmethod
    def parse(cls, text: str) -> ReadableDuration:
        """Parse a duration string.

        Raises:
            DurationParseError: If the text is not a valid duration.
        """
        return cls.from_millis(parse_millis(text))

    @classmethod
    def from_secs(cls, secs: int) -> ReadableDuration:
        """Create a duration from whole seconds."""
        return cls(seconds=secs, nanos=0)

    @classmethod
    def from_millis(cls, millis: int) -> ReadableDuration:
        """Create a duration from whole milliseconds."""
        return cls(seconds=millis // SECOND, nanos=(millis % SECOND) * NANOS_PER_MILLI)

    @classmethod
    def from_minutes(cls, minutes: int) -> ReadableDuration:
        """Create a duration from whole minutes."""
        return cls.from_secs(minutes * 60)

    @classmethod
    def from_hours(cls, hours: int) -> ReadableDuration:
        """Create a duration from whole hours."""
        return cls.from_minutes(hours * 60)

    @classmethod
    def from_days(cls, days: int) -> ReadableDuration:
        """Create a duration from whole days."""
        return cls.from_hours(days * 24)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> ReadableDuration:
        """Create a duration from a non-negative timedelta."""
        if td < timedelta(0):
            raise ValueError(f"Duration cannot be negative: {td}")
        micros = td // timedelta(microseconds=1)
        seconds, micros = divmod(micros, 1_000_000)
        return cls(seconds=seconds, nanos=micros * 1000)

    @classmethod
    def from_config_value(cls, value: ConfigValue) -> ReadableDuration:
        """Rebuild a duration from an interchange value.

        The result has exactly ``value.value`` milliseconds. Passing anything
        other than a DURATION value is a caller bug, not bad input.
        """
        if not isinstance(value, ConfigValue) or value.kind != ConfigValueKind.DURATION:
            raise AssertionError(f"expect: ConfigValue.DURATION, got: {value!r}")
        return cls.from_millis(value.value)

    def to_config_value(self) -> ConfigValue:
        """Convert to an interchange value, dropping sub-millisecond precision."""
        return ConfigValue.duration(self.as_millis())

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta (truncated to microseconds)."""
        return timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    def as_secs(self) -> int:
        return self.seconds

    def as_millis(self) -> int:
        return self.seconds * SECOND + self.nanos // NANOS_PER_MILLI

    def as_nanos(self) -> int:
        return self.seconds * NANOS_PER_SEC + self.nanos

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.nanos == 0

    def __lt__(self, other: ReadableDuration) -> bool:
        if not isinstance(other, ReadableDuration):
            return NotImplemented
        return self.as_nanos() < other.as_nanos()

    def __le__(self, other: ReadableDuration) -> bool:
        if not isinstance(other, ReadableDuration):
            return NotImplemented
        return self.as_nanos() <= other.as_nanos()

    def __gt__(self, other: ReadableDuration) -> bool:
        if not isinstance(other, ReadableDuration):
            return NotImplemented
        return self.as_nanos() > other.as_nanos()

    def __ge__(self, other: ReadableDuration) -> bool:
        if not isinstance(other, ReadableDuration):
            return NotImplemented
        return self.as_nanos() >= other.as_nanos()

    def __str__(self) -> str:
        return format_millis(self.as_millis())

    def __repr__(self) -> str:
        return f"ReadableDuration({str(self)!r})"


def parse_duration(value: str) -> ReadableDuration:
    """Parse a duration string like "1h30m" or "500ms".

    Raises:
        DurationParseError: If the format is invalid.
    """
    return ReadableDuration.parse(value)


def format_duration(value: ReadableDuration | timedelta) -> str:
    """Format a duration or timedelta in canonical form."""
    if isinstance(value, timedelta):
        value = ReadableDuration.from_timedelta(value)
    return str(value)
