"""Month lookup CLI commands.

Contents:
    * :func:`cli_month` - Print the month name for a date.
    * :func:`cli_months` - Print the loaded month table.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from datetime import datetime
from typing import Any, TypeVar

import lib_log_rich.runtime
import orjson
import rich_click as click

from monthname.application.month_lookup import MonthLookup
from monthname.domain.enums import OutputFormat
from monthname.domain.errors import ConfigurationError, InvalidTableSize, ResourceUnavailable

from ..constants import CLICK_CONTEXT_SETTINGS, DATE_FORMATS
from ..context import CLIContext, get_cli_context
from ..exit_codes import exit_code_for

logger = logging.getLogger(__name__)

T = TypeVar("T")

_source_option = click.option(
    "--source",
    type=str,
    default=None,
    metavar="PATH_OR_URL",
    help="Month list to load instead of months.source (file path, file:// or http(s):// URL)",
)


def _fail(message: str, exc: Exception) -> SystemExit:
    click.echo(f"Error: {message}", err=True)
    return SystemExit(exit_code_for(exc))


def _build_lookup(cli_ctx: CLIContext, source: str | None) -> MonthLookup:
    try:
        return cli_ctx.build_lookup(source)
    except ConfigurationError as exc:
        logger.error("Invalid months configuration", extra={"error": str(exc)})
        raise _fail(str(exc), exc) from exc


def _run_lookup(awaitable: Coroutine[Any, Any, T], location: str) -> T:
    """Drive *awaitable* to completion, turning lookup failures into exit codes."""
    try:
        return asyncio.run(awaitable)
    except ResourceUnavailable as exc:
        logger.error("Month list unavailable", extra={"location": location, "reason": exc.reason})
        raise _fail(str(exc), exc) from exc
    except InvalidTableSize as exc:
        logger.error("Month list malformed", extra={"location": location, "entries": exc.count})
        raise _fail(f"{location}: {exc}", exc) from exc


@click.command("month", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("date", required=False, type=click.DateTime(formats=DATE_FORMATS))
@_source_option
@click.pass_context
def cli_month(ctx: click.Context, date: datetime | None, source: str | None) -> None:
    """Print the month name for DATE (YYYY-MM-DD), or for today when omitted."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "month", "date": date.isoformat() if date else None}
    with lib_log_rich.runtime.bind(job_id="cli-month", extra=extra):
        lookup = _build_lookup(cli_ctx, source)
        label = _run_lookup(lookup.month_from_date(date), lookup.location)
        logger.info("Resolved month", extra={"label": label, "location": lookup.location})
        click.echo(label)


@click.command("months", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (one label per line, or a JSON array)",
)
@_source_option
@click.pass_context
def cli_months(ctx: click.Context, output_format: str, source: str | None) -> None:
    """Load the month list and print all twelve labels in calendar order."""
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-months", extra={"command": "months", "format": fmt.value}):
        lookup = _build_lookup(cli_ctx, source)
        _run_lookup(lookup.initialize(), lookup.location)
        labels = list(lookup.table)
        if fmt is OutputFormat.JSON:
            click.echo(orjson.dumps(labels).decode("utf-8"))
        else:
            for label in labels:
                click.echo(label)


__all__ = ["cli_month", "cli_months"]
