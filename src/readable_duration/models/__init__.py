"""Data models - durations, interchange values, and CLI envelopes."""
