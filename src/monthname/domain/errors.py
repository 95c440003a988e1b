"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ResourceUnavailable(Exception):
    """The month-name resource could not be read or decoded.

    Raised by byte sources when a file is missing, a network request fails,
    or the payload is not valid text. The month lookup stays uninitialised
    so that a later ``initialize()`` call may retry.

    Attributes:
        location: Path or URL that failed to load.

    Example:
        >>> from monthname.domain.errors import ResourceUnavailable
        >>> err = ResourceUnavailable("months.txt", "No such file")
        >>> str(err)
        'Cannot read months.txt: No such file'
        >>> err.location
        'months.txt'
    """

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Cannot read {location}: {reason}")
        self.location = location
        self.reason = reason


class FetchTimeout(ResourceUnavailable):
    """The month-name resource did not arrive within the configured timeout.

    Example:
        >>> err = FetchTimeout("https://example.com/months.txt", 2.5)
        >>> str(err)
        'Cannot read https://example.com/months.txt: timed out after 2.5s'
        >>> isinstance(err, ResourceUnavailable)
        True
    """

    def __init__(self, location: str, timeout: float) -> None:
        super().__init__(location, f"timed out after {timeout}s")
        self.timeout = timeout


class InvalidTableSize(ValueError):
    """The decoded resource did not yield exactly twelve month labels.

    Inherits from ValueError because the payload itself is malformed.

    Example:
        >>> err = InvalidTableSize(11)
        >>> str(err)
        'Month table must contain 12 entries, got 11'
        >>> err.count
        11
    """

    def __init__(self, count: int, expected: int = 12) -> None:
        super().__init__(f"Month table must contain {expected} entries, got {count}")
        self.count = count
        self.expected = expected


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[months]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("months.timeout must be positive")
        >>> str(err)
        'months.timeout must be positive'
    """


__all__ = [
    "ConfigurationError",
    "FetchTimeout",
    "InvalidTableSize",
    "ResourceUnavailable",
]
