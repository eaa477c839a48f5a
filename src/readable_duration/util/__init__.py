"""Utility functions - duration codec and console output."""

from readable_duration.util.output import format_json, print_json, print_rich
from readable_duration.util.time import format_millis, parse_millis

__all__ = [
    "format_json",
    "print_json",
    "print_rich",
    "parse_millis",
    "format_millis",
]
