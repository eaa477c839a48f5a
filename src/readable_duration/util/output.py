"""Console output helpers - rich text and JSON."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
        "command": "bold magenta",
        "duration": "bold cyan",
    }
)

console = Console(theme=THEME, highlight=False)


def format_json(data: Any) -> str:
    """Format data as indented JSON."""
    return json.dumps(data, indent=2, default=str)


def print_json(data: Any) -> None:
    """Print data as JSON to stdout, bypassing rich markup."""
    print(format_json(data))


def print_rich(message: str, style: str | None = None) -> None:
    """Print a message with an optional theme style."""
    console.print(message, style=style)
