"""Tests for the duration codec."""

from __future__ import annotations

from datetime import timedelta

import pytest

from readable_duration.errors import (
    DurationParseError,
    InvalidEncodingError,
    NegativeDurationError,
    ParseErrorKind,
    UnitOrderError,
)
from readable_duration.util.time import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    duration_to_ms,
    duration_to_nanos,
    duration_to_sec,
    format_millis,
    parse_millis,
)


class TestParsing:
    """Test duration string parsing."""

    def test_parse_milliseconds(self):
        assert parse_millis("500ms") == 500

    def test_parse_seconds(self):
        assert parse_millis("30s") == 30 * SECOND

    def test_parse_minutes(self):
        assert parse_millis("15m") == 15 * MINUTE

    def test_parse_hours(self):
        assert parse_millis("2h") == 2 * HOUR

    def test_parse_days(self):
        assert parse_millis("3d") == 3 * DAY

    def test_parse_combined(self):
        assert parse_millis("1h2m") == 3_720_000

    def test_parse_all_units(self):
        assert parse_millis("1d2h3m4s5ms") == 93_784_005

    def test_parse_skipped_units(self):
        assert parse_millis("1d30m") == DAY + 30 * MINUTE

    def test_parse_fractional(self):
        assert parse_millis("1.5h") == 5_400_000

    def test_parse_fraction_below_millisecond_is_floored(self):
        assert parse_millis("1s0.9ms") == 1000
        assert parse_millis("0.0001ms") == 0

    def test_parse_exponent(self):
        assert parse_millis("1e3ms") == 1000

    def test_parse_explicit_plus_sign(self):
        assert parse_millis("+5s") == 5000

    def test_parse_trims_surrounding_whitespace(self):
        assert parse_millis("  1h30m \n") == 5_400_000

    def test_parse_whitespace_between_segments(self):
        assert parse_millis("1h 30m") == 5_400_000

    def test_parse_empty_is_zero(self):
        assert parse_millis("") == 0
        assert parse_millis("   ") == 0

    def test_parse_zero(self):
        assert parse_millis("0s") == 0

    def test_ms_is_not_minutes_plus_seconds(self):
        assert parse_millis("500ms") == 500
        assert parse_millis("5m") == 5 * MINUTE

    def test_minutes_then_milliseconds(self):
        assert parse_millis("1m5ms") == MINUTE + 5

    def test_negative_segment_with_positive_total(self):
        assert parse_millis("5s-1ms") == 4999

    def test_negative_zero_is_zero(self):
        assert parse_millis("-0s") == 0

    def test_unit_magnitude_not_capped(self):
        assert parse_millis("12h360m") == 18 * HOUR


class TestParseErrors:
    """Test rejection of malformed durations."""

    def test_out_of_order_units(self):
        with pytest.raises(UnitOrderError) as exc_info:
            parse_millis("1m2h")
        assert exc_info.value.kind == ParseErrorKind.UNIT_ORDER_VIOLATION
        assert str(exc_info.value) == "d, h, m, s, ms should occur in given order."

    def test_repeated_unit(self):
        with pytest.raises(UnitOrderError):
            parse_millis("1h2h")

    def test_milliseconds_before_seconds(self):
        with pytest.raises(UnitOrderError):
            parse_millis("1ms1s")

    def test_trailing_garbage(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            parse_millis("10s!")
        assert exc_info.value.kind == ParseErrorKind.INVALID_ENCODING
        assert str(exc_info.value) == "valid duration, only d, h, m, s, ms are supported."

    def test_number_without_unit(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("10")

    def test_unit_without_number(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("h")

    def test_not_a_number(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("xs")

    def test_underscore_digits_rejected(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("1_000ms")

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("infs")
        with pytest.raises(InvalidEncodingError):
            parse_millis("nanms")

    def test_non_ascii_rejected(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            parse_millis("1h30mé")
        assert str(exc_info.value).startswith("unexpect ascii string:")

    def test_out_of_range(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            parse_millis("1e20d")
        assert str(exc_info.value) == "duration out of range."

    def test_negative_rejected(self):
        with pytest.raises(NegativeDurationError) as exc_info:
            parse_millis("-5s")
        assert exc_info.value.kind == ParseErrorKind.NEGATIVE_DURATION
        assert str(exc_info.value) == "duration should be positive."

    def test_negative_fraction_rejected(self):
        with pytest.raises(NegativeDurationError):
            parse_millis("-0.5ms")

    def test_negative_total_rejected(self):
        with pytest.raises(NegativeDurationError):
            parse_millis("1s-2000ms")

    def test_overflow_to_infinity_rejected(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            parse_millis("1e308d")
        assert str(exc_info.value) == "duration out of range."

    def test_overflow_across_segments_rejected(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("1e308d1e308h")

    def test_cancelling_infinities_rejected(self):
        with pytest.raises(InvalidEncodingError):
            parse_millis("1e308d-1e308h")

    def test_error_keeps_input(self):
        with pytest.raises(DurationParseError) as exc_info:
            parse_millis(" 1m2h ")
        assert exc_info.value.text == "1m2h"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_millis("bogus")


class TestFormatting:
    """Test canonical duration formatting."""

    def test_format_zero(self):
        assert format_millis(0) == "0s"

    def test_format_milliseconds(self):
        assert format_millis(500) == "500ms"

    def test_format_seconds(self):
        assert format_millis(45 * SECOND) == "45s"

    def test_format_combined(self):
        assert format_millis(MINUTE + SECOND + 1) == "1m1s1ms"

    def test_format_skips_zero_units(self):
        assert format_millis(DAY + 30 * MINUTE) == "1d30m"

    def test_format_all_units(self):
        assert format_millis(93_784_005) == "1d2h3m4s5ms"

    def test_format_carries_into_larger_units(self):
        assert format_millis(90 * MINUTE) == "1h30m"
        assert format_millis(25 * HOUR) == "1d1h"

    def test_format_negative_fails(self):
        with pytest.raises(ValueError):
            format_millis(-1)

    @pytest.mark.parametrize(
        "millis",
        [0, 1, 999, 1000, 59_999, 3_600_000, 93_784_005, 7 * DAY + 1, 2**53 - 1],
    )
    def test_round_trip(self, millis):
        assert parse_millis(format_millis(millis)) == millis


class TestTimedeltaHelpers:
    """Test timedelta conversions."""

    def test_duration_to_ms_floors(self):
        assert duration_to_ms(timedelta(seconds=1, microseconds=1500)) == 1001

    def test_duration_to_sec(self):
        assert duration_to_sec(timedelta(milliseconds=1500)) == 1.5

    def test_duration_to_nanos(self):
        assert duration_to_nanos(timedelta(seconds=2, microseconds=3)) == 2_000_003_000
