"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.month_lookup` - Lazily initialised month-name lookup
    * :mod:`.ports` - Protocol definitions for adapter functions
"""

from __future__ import annotations

from .month_lookup import MonthLookup
from .ports import (
    BuildMonthLookup,
    ByteSource,
    DisplayConfig,
    GetConfig,
    InitLogging,
)

__all__ = [
    "BuildMonthLookup",
    "ByteSource",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "MonthLookup",
]
