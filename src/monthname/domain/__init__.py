"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting, month table parsing, month index
    * :mod:`.month_table` - Immutable MonthTable value object
    * :mod:`.enums` - Domain enumerations (OutputFormat, SourceKind)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    month_index,
    parse_month_table,
)
from .enums import OutputFormat, SourceKind
from .errors import ConfigurationError, FetchTimeout, InvalidTableSize, ResourceUnavailable
from .month_table import MONTH_COUNT, MonthTable

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    "month_index",
    "parse_month_table",
    # Month table
    "MONTH_COUNT",
    "MonthTable",
    # Enums
    "OutputFormat",
    "SourceKind",
    # Errors
    "ConfigurationError",
    "FetchTimeout",
    "InvalidTableSize",
    "ResourceUnavailable",
]
