"""Type-safe domain enums for output formats and byte source kinds."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class SourceKind(str, Enum):
    """Transport used to obtain the month-name resource.

    Attributes:
        FILE: Local filesystem path.
        NETWORK: ``http://`` or ``https://`` URL.

    Example:
        >>> SourceKind.for_location("https://example.com/months.txt")
        <SourceKind.NETWORK: 'network'>
        >>> SourceKind.for_location("/srv/months.txt")
        <SourceKind.FILE: 'file'>
    """

    FILE = "file"
    NETWORK = "network"

    @classmethod
    def for_location(cls, location: str) -> SourceKind:
        """Classify *location* by its URL scheme."""
        scheme = location.split("://", maxsplit=1)[0].lower() if "://" in location else ""
        return cls.NETWORK if scheme in ("http", "https") else cls.FILE


__all__ = [
    "OutputFormat",
    "SourceKind",
]
