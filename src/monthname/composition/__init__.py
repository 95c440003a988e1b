"""Composition root: the only place that picks concrete adapters.

The CLI receives a zero-argument factory returning :class:`AppServices`;
production passes :func:`build_production`, tests pass
:func:`build_testing` or their own partial wiring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.sources.selector import build_month_lookup

if TYPE_CHECKING:
    from ..adapters.memory.sources import InMemoryByteSource
    from ..application.ports import BuildMonthLookup, DisplayConfig, GetConfig, InitLogging

    # pyright checks the production adapters against their ports here.
    _ports: tuple[GetConfig, DisplayConfig, InitLogging, BuildMonthLookup] = (
        get_config,
        display_config,
        init_logging,
        build_month_lookup,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations one CLI run works with.

    Attributes:
        get_config: Loads layered configuration for an optional profile.
        display_config: Renders a Config for the ``config`` command.
        init_logging: Starts lib_log_rich from the ``[lib_log_rich]`` section.
        build_month_lookup: Creates the MonthLookup for ``month`` and ``months``.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    build_month_lookup: BuildMonthLookup


def build_production() -> AppServices:
    """Real filesystem, network, configuration and logging adapters."""
    return AppServices(get_config, display_config, init_logging, build_month_lookup)


def build_testing(*, source: InMemoryByteSource | None = None) -> AppServices:
    """In-memory adapters; nothing touches disk, network or the log runtime.

    Pass *source* to inspect fetches afterwards. Without one, a fresh
    InMemoryByteSource serving the English month names is used.
    """
    from ..adapters import memory

    byte_source = source or memory.InMemoryByteSource()
    return AppServices(
        get_config=memory.get_config_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        build_month_lookup=byte_source.build_month_lookup,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
