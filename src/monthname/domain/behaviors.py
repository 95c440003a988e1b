"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from datetime import date

from .month_table import MonthTable

CANONICAL_GREETING = "Hello World"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello World'
    """
    return CANONICAL_GREETING


def parse_month_table(text: str) -> MonthTable:
    """Split a newline-delimited word list into a validated MonthTable.

    Lines are split on any line break, stripped, and empty entries dropped,
    so trailing blank lines and ``\\r\\n`` endings do not leak into labels.

    Args:
        text: Decoded resource content, one month name per line.

    Returns:
        Immutable table of exactly twelve labels.

    Raises:
        InvalidTableSize: If the cleaned list does not have twelve entries.

    Example:
        >>> table = parse_month_table("Jan\\nFeb\\nMar\\nApr\\nMay\\nJun\\nJul\\nAug\\nSep\\nOct\\nNov\\nDec\\n\\n")
        >>> len(table)
        12
        >>> table.label_for(2)
        'Mar'
    """
    labels = tuple(line.strip() for line in text.splitlines() if line.strip())
    return MonthTable(labels)


def month_index(timestamp: date) -> int:
    """Return the zero-based calendar month of *timestamp* (0 = January).

    Example:
        >>> month_index(date(2022, 3, 23))
        2
    """
    return timestamp.month - 1


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "month_index",
    "parse_month_table",
]
