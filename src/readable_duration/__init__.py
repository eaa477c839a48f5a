"""readable-duration - human-readable durations as a configuration value type."""

__version__ = "0.1.0"

from readable_duration.errors import (  # noqa: E402
    DurationParseError,
    InvalidEncodingError,
    NegativeDurationError,
    ParseErrorKind,
    UnitOrderError,
)
from readable_duration.models.duration import (  # noqa: E402
    ConfigValue,
    ConfigValueKind,
    ReadableDuration,
    format_duration,
    parse_duration,
)

__all__ = [
    "__version__",
    "ConfigValue",
    "ConfigValueKind",
    "DurationParseError",
    "InvalidEncodingError",
    "NegativeDurationError",
    "ParseErrorKind",
    "ReadableDuration",
    "UnitOrderError",
    "format_duration",
    "parse_duration",
]
