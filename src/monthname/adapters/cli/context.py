"""Per-invocation CLI state and traceback flag bookkeeping.

Contents:
    * :class:`CLIContext` - Config, services, and root options shared with subcommands.
    * :class:`TracebackState` - Snapshot of the ``lib_cli_exit_tools`` traceback flags.
    * Helpers to store and fetch the context on a Click context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from monthname.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from monthname.application.month_lookup import MonthLookup
    from monthname.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags as found in ``lib_cli_exit_tools.config``."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State the root command hands to every subcommand.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Configuration with the root ``--set`` overrides applied.
        services: Port implementations from the composition layer.
        profile: Profile the configuration was loaded for.
        set_overrides: Raw ``--set`` strings, kept for profile reloads.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def build_lookup(self, source: str | None = None) -> MonthLookup:
        """Return an uninitialised MonthLookup for *source* or the configured list."""
        return self.services.build_month_lookup(self.config, source=source)

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return configuration for *profile* and the profile actually used.

        Without a profile the root configuration is reused. With one, the
        configuration is reloaded and the root ``--set`` overrides are
        applied again so they keep winning.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: If the root command has not stored a context.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        False
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for ``lib_cli_exit_tools``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags.

    Example:
        >>> apply_traceback_preferences(False)
        >>> snapshot_traceback_state()
        TracebackState(enabled=False, force_color=False)
    """
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
