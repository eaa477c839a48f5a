"""readable-duration parse/format commands - convert between text and milliseconds."""

from __future__ import annotations

import logging

import typer
from rich.markup import escape

from readable_duration.errors import DurationParseError
from readable_duration.models.duration import ReadableDuration
from readable_duration.models.envelope import Envelope
from readable_duration.util.output import console, print_json

logger = logging.getLogger(__name__)


def parse_command(
    text: str = typer.Argument(
        ...,
        help="Duration to parse, e.g. '1h30m' or '500ms'.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format.",
    ),
) -> None:
    """Parse a duration and show its canonical form and milliseconds."""
    try:
        duration = ReadableDuration.parse(text)
    except DurationParseError as e:
        logger.debug("Rejected %r: %s", text, e.kind.value)
        if json_output:
            envelope = Envelope.error(str(e), data={"input": text, "kind": e.kind.value})
            print_json(envelope.model_dump())
        else:
            console.print(f"[error]Invalid duration:[/error] {escape(str(e))}")
        raise typer.Exit(1) from e

    result = {
        "input": text,
        "canonical": str(duration),
        "millis": duration.as_millis(),
    }

    if json_output:
        print_json(Envelope.success(result).model_dump())
    else:
        console.print(f"[duration]{duration}[/duration] [muted]({duration.as_millis()}ms)[/muted]")


def format_command(
    millis: int = typer.Argument(
        ...,
        min=0,
        help="Duration in whole milliseconds.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format.",
    ),
) -> None:
    """Format a millisecond count as a canonical duration."""
    duration = ReadableDuration.from_millis(millis)

    if json_output:
        print_json(Envelope.success({"millis": millis, "canonical": str(duration)}).model_dump())
    else:
        console.print(f"[duration]{duration}[/duration]")
