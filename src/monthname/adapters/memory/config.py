"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but never read configuration files.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def config_in_memory(data: Mapping[str, Any]) -> Config:
    """Return a Config built from *data* with no provenance.

    Example:
        >>> config_in_memory({"months": {"timeout": 1.0}}).get("months.timeout")
        1.0
    """
    return Config(dict(data), {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "config_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
]
