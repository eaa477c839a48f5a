"""readable-duration check/normalize commands - duration fields in YAML config files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.markup import escape

from readable_duration.config.loader import (
    ConfigError,
    get_field,
    load_document,
    save_document,
    set_field,
)
from readable_duration.errors import DurationParseError
from readable_duration.models.duration import ReadableDuration
from readable_duration.models.envelope import Envelope
from readable_duration.util.output import console, print_json

logger = logging.getLogger(__name__)


def _inspect_field(data: dict[str, Any], field: str) -> dict[str, Any]:
    """Parse one dotted field of a document as a duration."""
    try:
        value = get_field(data, field)
    except ConfigError as e:
        return {"field": field, "ok": False, "message": str(e)}

    if not isinstance(value, str):
        return {
            "field": field,
            "value": value,
            "ok": False,
            "message": f"expected a duration string, got {type(value).__name__}",
        }

    try:
        duration = ReadableDuration.parse(value)
    except DurationParseError as e:
        return {"field": field, "value": value, "ok": False, "message": str(e)}

    return {
        "field": field,
        "value": value,
        "ok": True,
        "canonical": str(duration),
        "millis": duration.as_millis(),
    }


def _failure(failed: list[dict[str, Any]], results: list[dict[str, Any]]) -> dict[str, Any]:
    return Envelope.error(f"{len(failed)} invalid duration field(s)", data=results).model_dump()


def _exit_with_error(error: Exception, json_output: bool) -> NoReturn:
    suggested_action = getattr(error, "suggested_action", None)
    if json_output:
        print_json(Envelope.error(str(error)).model_dump())
    else:
        console.print(f"[error]{escape(str(error))}[/error]")
        if suggested_action:
            console.print(f"[muted]{escape(suggested_action)}[/muted]")
    raise typer.Exit(1) from error


def _load_or_exit(file: Path, json_output: bool) -> dict[str, Any]:
    try:
        return load_document(file)
    except ConfigError as e:
        _exit_with_error(e, json_output)


def check_command(
    file: Path = typer.Argument(
        ...,
        help="YAML config file to check.",
    ),
    fields: list[str] = typer.Option(
        ...,
        "--field",
        "-f",
        help="Dotted path of a duration field (repeatable), e.g. server.timeout.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format.",
    ),
) -> None:
    """Check that fields of a YAML config file are valid durations."""
    data = _load_or_exit(file, json_output)
    results = [_inspect_field(data, field) for field in fields]
    failed = [r for r in results if not r["ok"]]
    logger.debug("Checked %d fields in %s, %d failed", len(results), file, len(failed))

    if json_output:
        if failed:
            print_json(_failure(failed, results))
        else:
            print_json(Envelope.success(results).model_dump())
    else:
        for r in results:
            if r["ok"]:
                console.print(
                    f"[success]ok[/success]    {r['field']} = [duration]{r['canonical']}[/duration]"
                )
            else:
                console.print(f"[error]error[/error] {r['field']}: {escape(r['message'])}")

    if failed:
        raise typer.Exit(1)


def normalize_command(
    file: Path = typer.Argument(
        ...,
        help="YAML config file to normalize.",
    ),
    fields: list[str] = typer.Option(
        ...,
        "--field",
        "-f",
        help="Dotted path of a duration field (repeatable), e.g. server.timeout.",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        "-w",
        help="Write canonical values back to the file.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format.",
    ),
) -> None:
    """Rewrite duration fields into canonical form (e.g. '90m' -> '1h30m')."""
    data = _load_or_exit(file, json_output)
    results = [_inspect_field(data, field) for field in fields]
    failed = [r for r in results if not r["ok"]]

    if failed:
        if json_output:
            print_json(_failure(failed, results))
        else:
            for r in failed:
                console.print(f"[error]error[/error] {r['field']}: {escape(r['message'])}")
            console.print("[muted]Nothing written.[/muted]")
        raise typer.Exit(1)

    changes = [
        {"field": r["field"], "old": r["value"], "new": r["canonical"]}
        for r in results
        if r["value"] != r["canonical"]
    ]

    if write and changes:
        for change in changes:
            set_field(data, change["field"], change["new"])
        try:
            save_document(data, file)
        except (ConfigError, OSError) as e:
            logger.debug("Failed to write %s: %s", file, e)
            _exit_with_error(e, json_output)
        logger.info("Normalized %d field(s) in %s", len(changes), file)

    if json_output:
        print_json(
            Envelope.success({"changes": changes, "written": write and bool(changes)}).model_dump()
        )
        return

    if not changes:
        console.print("[success]Already canonical.[/success]")
        return

    for change in changes:
        console.print(
            f"  {change['field']}: {escape(change['old'])} -> [duration]{change['new']}[/duration]"
        )
    if write:
        console.print(f"[success]Wrote {len(changes)} change(s) to {file}[/success]")
    else:
        console.print("[muted]Dry run; use --write to apply.[/muted]")
