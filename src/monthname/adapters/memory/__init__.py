"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no network, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.sources` - In-memory byte source (InMemoryByteSource spy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    config_in_memory,
    display_config_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory
from .sources import ENGLISH_MONTHS, InMemoryByteSource

# Static conformance assertions
if TYPE_CHECKING:
    from monthname.application.ports import (
        ByteSource,
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_byte_source: ByteSource = InMemoryByteSource()

__all__ = [
    "ENGLISH_MONTHS",
    "InMemoryByteSource",
    "config_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
