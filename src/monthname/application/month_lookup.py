"""Lazily initialised month-name lookup.

Contents:
    * :class:`MonthLookup` - Owns the month table and maps dates to labels.

System Role:
    Application use case. Depends on the :class:`~.ports.ByteSource` port for
    I/O and on the domain layer for parsing and validation. Each instance owns
    its own initialisation state; callers construct one and pass it around.
"""

from __future__ import annotations

import asyncio
import datetime as dt
import logging
from collections.abc import Callable

from ..domain.behaviors import month_index, parse_month_table
from ..domain.errors import FetchTimeout, ResourceUnavailable
from ..domain.month_table import MonthTable
from .ports import ByteSource

logger = logging.getLogger(__name__)


class MonthLookup:
    """Map dates to month names from a word list loaded at most once.

    The table is fetched on the first :meth:`initialize` call. Concurrent
    callers share one in-flight fetch through an :class:`asyncio.Lock`; a
    failed fetch leaves the lookup uninitialised so the next call retries.
    :meth:`month_from_date` awaits initialisation itself.

    Args:
        source: Byte source used to fetch the resource.
        location: Path or URL of the newline-delimited month list.
        timeout: Optional upper bound in seconds for a single fetch.
        clock: Returns the current moment; used when no date is given.
        encoding: Text encoding of the resource.

    Example:
        >>> import asyncio
        >>> from monthname.adapters.memory import InMemoryByteSource
        >>> source = InMemoryByteSource(b"Jan\\nFeb\\nMar\\nApr\\nMay\\nJun\\nJul\\nAug\\nSep\\nOct\\nNov\\nDec\\n")
        >>> lookup = MonthLookup(source, "months.txt")
        >>> asyncio.run(lookup.month_from_date(dt.date(2022, 3, 23)))
        'Mar'
    """

    def __init__(
        self,
        source: ByteSource,
        location: str,
        *,
        timeout: float | None = None,
        clock: Callable[[], dt.datetime] = dt.datetime.now,
        encoding: str = "utf-8",
    ) -> None:
        self._source = source
        self._location = location
        self._timeout = timeout
        self._clock = clock
        self._encoding = encoding
        self._table: MonthTable | None = None
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @property
    def location(self) -> str:
        return self._location

    @property
    def is_initialized(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> MonthTable:
        """Loaded month table.

        Raises:
            RuntimeError: If :meth:`initialize` has not completed yet.
        """
        if self._table is None:
            raise RuntimeError("Month lookup not initialized. Await initialize() first.")
        return self._table

    async def initialize(self) -> None:
        """Fetch, decode, and validate the month table unless already loaded.

        Raises:
            ResourceUnavailable: The resource could not be read or decoded.
            FetchTimeout: The fetch exceeded ``timeout``.
            InvalidTableSize: The resource did not hold twelve entries.
        """
        if self._table is not None:
            return
        async with self._loop_lock():
            if self._table is not None:
                return
            payload = await self._fetch()
            try:
                text = payload.decode(self._encoding)
            except UnicodeDecodeError as exc:
                raise ResourceUnavailable(self._location, f"not valid {self._encoding} text") from exc
            table = parse_month_table(text)
            self._table = table
        logger.info("Initialized months", extra={"location": self._location})
        logger.debug("Current month", extra={"label": table.label_for(month_index(self._clock()))})

    async def month_from_date(self, date: dt.date | None = None) -> str:
        """Return the month name for *date*, defaulting to the current moment.

        Args:
            date: Any ``datetime.date`` or ``datetime.datetime``. ``None``
                uses the injected clock.

        Returns:
            Label at the zero-based calendar month of *date*.
        """
        await self.initialize()
        timestamp = date if date is not None else self._clock()
        return self.table.label_for(month_index(timestamp))

    def _loop_lock(self) -> asyncio.Lock:
        # An asyncio.Lock is bound to the loop that first waits on it.
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _fetch(self) -> bytes:
        logger.debug("Fetching month table", extra={"location": self._location})
        if self._timeout is None:
            return await self._source.fetch(self._location)
        try:
            return await asyncio.wait_for(self._source.fetch(self._location), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise FetchTimeout(self._location, self._timeout) from exc


__all__ = ["MonthLookup"]
