"""readable-duration CLI entry point."""

from __future__ import annotations

import logging
import sys

import typer

from readable_duration import __version__
from readable_duration.cli.commands.codec import format_command, parse_command
from readable_duration.cli.commands.fields import check_command, normalize_command
from readable_duration.util.output import console

app = typer.Typer(
    name="readable-duration",
    help="Parse, format, and normalize human-readable durations like '1h30m'.",
    no_args_is_help=True,
)

app.command(name="parse")(parse_command)
app.command(name="format")(format_command)
app.command(name="check")(check_command)
app.command(name="normalize")(normalize_command)


def _setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup package logging to stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logger = logging.getLogger("readable_duration")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Drop handlers from a previous invocation in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    return logger


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"readable-duration {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Human-readable durations for configuration files."""
    _setup_logging(verbose)


if __name__ == "__main__":
    app()
