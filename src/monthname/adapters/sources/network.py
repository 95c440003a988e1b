"""HTTP byte source backed by httpx."""

from __future__ import annotations

import logging

import httpx

from monthname.domain.errors import FetchTimeout, ResourceUnavailable

logger = logging.getLogger(__name__)


class NetworkFetch:
    """Download resources over HTTP(S).

    Args:
        timeout: Per-request timeout in seconds handed to httpx.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Example:
        >>> import asyncio
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"January\\n"))
        >>> asyncio.run(NetworkFetch(transport=transport).fetch("https://example.com/months.txt"))
        b'January\\n'
    """

    def __init__(self, *, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, location: str) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(location)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ResourceUnavailable(location, f"HTTP {exc.response.status_code}") from exc
        except httpx.TimeoutException as exc:
            raise FetchTimeout(location, self._timeout) from exc
        except httpx.HTTPError as exc:
            raise ResourceUnavailable(location, str(exc) or type(exc).__name__) from exc
        logger.debug("Downloaded resource", extra={"location": location, "bytes": len(response.content)})
        return response.content


__all__ = ["NetworkFetch"]
