"""Public package surface exposing the month lookup, greeting, and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: greeting, MonthTable, error types
- Application exports: MonthLookup
- Composition exports: wired adapter services (configuration, lookup factory)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.month_lookup import MonthLookup

# Composition exports (wired adapters)
from .composition import build_month_lookup, get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    parse_month_table,
)
from .domain.errors import ConfigurationError, FetchTimeout, InvalidTableSize, ResourceUnavailable
from .domain.month_table import MonthTable

__all__ = [
    "CANONICAL_GREETING",
    "ConfigurationError",
    "FetchTimeout",
    "InvalidTableSize",
    "MonthLookup",
    "MonthTable",
    "ResourceUnavailable",
    "build_greeting",
    "build_month_lookup",
    "get_config",
    "parse_month_table",
    "print_info",
]
