"""Byte source selection and month lookup construction.

Contents:
    * :func:`select_byte_source` - Pick FileRead or NetworkFetch for a location.
    * :func:`get_bundled_months_path` - Locate the packaged ``months.txt``.
    * :func:`resolve_location` - Apply the ``--source`` / config / bundled precedence.
    * :func:`build_month_lookup` - Wire settings and a source into a MonthLookup.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config

from monthname.adapters.config.months import DEFAULT_FETCH_TIMEOUT, MonthsSettings, load_months_settings
from monthname.application.month_lookup import MonthLookup
from monthname.application.ports import ByteSource
from monthname.domain.enums import SourceKind

from .file import FileRead
from .network import NetworkFetch

logger = logging.getLogger(__name__)


def select_byte_source(location: str, *, timeout: float | None = None) -> ByteSource:
    """Return the byte source able to serve *location*.

    Examples:
        >>> type(select_byte_source("https://example.com/months.txt")).__name__
        'NetworkFetch'
        >>> type(select_byte_source("/srv/months.txt")).__name__
        'FileRead'
    """
    if SourceKind.for_location(location) is SourceKind.NETWORK:
        return NetworkFetch(timeout=timeout if timeout is not None else DEFAULT_FETCH_TIMEOUT)
    return FileRead()


@lru_cache(maxsize=1)
def get_bundled_months_path() -> Path:
    """Return the path to the month list shipped with the package.

    Example:
        >>> path = get_bundled_months_path()
        >>> path.name
        'months.txt'
        >>> path.exists()
        True
    """
    return Path(__file__).resolve().parent.parent.parent / "months.txt"


def resolve_location(settings: MonthsSettings, source: str | None = None) -> str:
    """Return the effective resource location.

    An explicit *source* wins over ``months.source``; the bundled file is the
    fallback when neither is set.

    Examples:
        >>> resolve_location(MonthsSettings(source="cfg.txt"), "cli.txt")
        'cli.txt'
        >>> resolve_location(MonthsSettings(source="cfg.txt"))
        'cfg.txt'
    """
    if source:
        return source
    if settings.source:
        return settings.source
    return str(get_bundled_months_path())


def build_month_lookup(config: Config, *, source: str | None = None) -> MonthLookup:
    """Construct an uninitialised MonthLookup from configuration.

    Args:
        config: Loaded layered configuration holding the ``[months]`` section.
        source: Optional path or URL overriding ``months.source``.

    Returns:
        MonthLookup bound to the selected byte source.

    Raises:
        ConfigurationError: If the ``[months]`` section is invalid.
    """
    settings = load_months_settings(config.as_dict())
    location = resolve_location(settings, source)
    byte_source = select_byte_source(location, timeout=settings.timeout)
    logger.debug(
        "Built month lookup",
        extra={"location": location, "source_kind": SourceKind.for_location(location).value},
    )
    return MonthLookup(byte_source, location, timeout=settings.timeout, encoding=settings.encoding)


__all__ = [
    "build_month_lookup",
    "get_bundled_months_path",
    "resolve_location",
    "select_byte_source",
]
