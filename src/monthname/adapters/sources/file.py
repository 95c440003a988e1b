"""Filesystem byte source."""

from __future__ import annotations

import asyncio
from pathlib import Path
from urllib.parse import unquote, urlparse

from monthname.domain.errors import ResourceUnavailable


def _path_for(location: str) -> Path:
    """Resolve a plain path or ``file://`` URL to a filesystem path.

    Examples:
        >>> _path_for("file:///srv/months.txt").as_posix()
        '/srv/months.txt'
        >>> _path_for("months.txt").as_posix()
        'months.txt'
    """
    if location.startswith("file://"):
        return Path(unquote(urlparse(location).path))
    return Path(location).expanduser()


class FileRead:
    """Read resources from the local filesystem.

    The blocking read runs in a worker thread so the event loop keeps
    serving other tasks while the file loads.
    """

    async def fetch(self, location: str) -> bytes:
        path = _path_for(location)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise ResourceUnavailable(location, exc.strerror or str(exc)) from exc


__all__ = ["FileRead"]
