"""Immutable table of month labels."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import Final

from .errors import InvalidTableSize

#: Number of labels a month table must hold.
MONTH_COUNT: Final[int] = 12


@dataclass(frozen=True, slots=True)
class MonthTable:
    """Ordered month labels indexed 0 (January) through 11 (December).

    Example:
        >>> names = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
        >>> table = MonthTable(names)
        >>> table.label_for_date(date(2022, 1, 1))
        'Jan'
        >>> MonthTable(names[:11])  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidTableSize: Month table must contain 12 entries, got 11
    """

    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != MONTH_COUNT:
            raise InvalidTableSize(len(self.labels), MONTH_COUNT)

    def label_for(self, index: int) -> str:
        """Return the label at zero-based *index*."""
        if not 0 <= index < MONTH_COUNT:
            raise IndexError(f"Month index must be in 0..{MONTH_COUNT - 1}, got {index}")
        return self.labels[index]

    def label_for_date(self, timestamp: date) -> str:
        """Return the label for the calendar month of *timestamp*."""
        return self.labels[timestamp.month - 1]

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)


__all__ = ["MONTH_COUNT", "MonthTable"]
