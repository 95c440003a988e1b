"""The ``monthname`` command group.

Loads configuration (profile plus ``--set`` overrides), starts logging, and
stores a :class:`~.context.CLIContext` for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from monthname import __init__conf__
from monthname.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from monthname.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read layered configuration and apply the root ``--set`` values.

    Raises:
        click.BadParameter: The profile name is rejected.
        click.UsageError: An override string is malformed.
    """
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. months.source=/srv/months.txt",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Turn ``ctx.obj`` from a services factory into a :class:`~.context.CLIContext`.

    Prints the help text when no subcommand is given.

    Example:
        >>> from click.testing import CliRunner
        >>> from monthname.composition import build_production
        >>> result = CliRunner().invoke(cli, ["hello"], obj=build_production)
        >>> "Hello World" in result.stdout
        True
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here: the command modules import this package.
    from .commands import cli_config, cli_hello, cli_info, cli_month, cli_months

    for command in (cli_info, cli_hello, cli_month, cli_months, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
