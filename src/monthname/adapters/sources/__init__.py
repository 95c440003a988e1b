"""Byte source adapters - filesystem and HTTP transports for the month list.

Contents:
    * :mod:`.file` - FileRead via pathlib
    * :mod:`.network` - NetworkFetch via httpx
    * :mod:`.selector` - Source selection and MonthLookup construction
"""

from __future__ import annotations

from .file import FileRead
from .network import NetworkFetch
from .selector import build_month_lookup, get_bundled_months_path, resolve_location, select_byte_source

__all__ = [
    "FileRead",
    "NetworkFetch",
    "build_month_lookup",
    "get_bundled_months_path",
    "resolve_location",
    "select_byte_source",
]
