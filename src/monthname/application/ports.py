"""Application ports: Protocol definitions for adapter implementations.

Callable protocols define a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).
:class:`ByteSource` is an object protocol because fetching is a method on
stateful transports.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .month_lookup import MonthLookup


class ByteSource(Protocol):
    """Return the raw bytes stored at a path or URL.

    Implementations raise :class:`~monthname.domain.errors.ResourceUnavailable`
    when the resource cannot be read.
    """

    async def fetch(self, location: str) -> bytes: ...


class BuildMonthLookup(Protocol):
    """Construct an uninitialised MonthLookup for the resolved resource."""

    def __call__(self, config: Config, *, source: str | None = ...) -> MonthLookup: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildMonthLookup",
    "ByteSource",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
