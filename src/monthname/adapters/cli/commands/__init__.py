"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info commands from :mod:`.info`
    * Month lookup commands from :mod:`.month`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_hello, cli_info
from .month import cli_month, cli_months

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_month",
    "cli_months",
]
