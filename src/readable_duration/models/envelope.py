"""JSON output envelope for CLI commands."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """Wrapper for all --json output: ok flag, payload, and message."""

    ok: bool = Field(description="Whether the command succeeded")
    data: Any = Field(default=None, description="Command result payload")
    message: str | None = Field(default=None, description="Error message when ok is false")

    @classmethod
    def success(cls, data: Any = None) -> Envelope:
        return cls(ok=True, data=data)

    @classmethod
    def error(cls, message: str, data: Any = None) -> Envelope:
        return cls(ok=False, data=data, message=message)
