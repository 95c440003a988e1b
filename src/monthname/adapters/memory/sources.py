"""In-memory byte source for testing.

Contents:
    * :class:`InMemoryByteSource` - Serves a fixed payload and records fetches.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from lib_layered_config import Config

from ...application.month_lookup import MonthLookup
from ..config.months import load_months_settings

#: The twelve English month names, newline-delimited.
ENGLISH_MONTHS = (
    b"January\nFebruary\nMarch\nApril\nMay\nJune\nJuly\nAugust\nSeptember\nOctober\nNovember\nDecember\n"
)


def _empty_location_list() -> list[str]:
    return []


@dataclass
class InMemoryByteSource:
    """Byte source double that never touches disk or network.

    Each test should create its own instance. :meth:`build_month_lookup`
    matches the port expected by AppServices, so the same spy can back the
    CLI and be inspected afterwards.

    Attributes:
        payload: Bytes returned by every successful fetch.
        fetched: Locations requested, in call order.
        raise_exception: When set, fetch raises this exception instead.
        delay: Seconds to sleep before answering, to exercise concurrency and timeouts.

    Example:
        >>> import asyncio
        >>> spy = InMemoryByteSource()
        >>> asyncio.run(spy.fetch("months.txt"))[:7]
        b'January'
        >>> spy.fetch_count
        1
    """

    payload: bytes = ENGLISH_MONTHS
    fetched: list[str] = field(default_factory=_empty_location_list)
    raise_exception: Exception | None = None
    delay: float = 0.0

    @property
    def fetch_count(self) -> int:
        return len(self.fetched)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.fetched.clear()
        self.raise_exception = None

    async def fetch(self, location: str) -> bytes:
        self.fetched.append(location)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raise_exception is not None:
            raise self.raise_exception
        return self.payload

    def build_month_lookup(self, config: Config, *, source: str | None = None) -> MonthLookup:
        """Construct a MonthLookup reading from this spy.

        The ``[months]`` section is still validated so configuration errors
        surface the same way as in production.
        """
        settings = load_months_settings(config.as_dict())
        location = source or settings.source or "memory://months.txt"
        return MonthLookup(self, location, timeout=settings.timeout, encoding=settings.encoding)


__all__ = ["ENGLISH_MONTHS", "InMemoryByteSource"]
