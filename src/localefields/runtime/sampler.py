"""Reference instants for building field-name tables.

Field names are obtained by formatting fixed sample dates, so the tables do
not depend on any caller data. All samples are floating (universal) instants:

    - months: day 1 of each month of SAMPLE_YEAR
    - weekdays: seven consecutive days starting Monday 2016-11-14, so index i
      is the weekday with datetime.weekday() == i (Monday = 0, Sunday = 6)
    - meridiems: an AM and a PM hour on the weekday anchor day

Python 3.13+.
"""

from collections.abc import Callable

from localefields.constants import (
    MERIDIEM_SAMPLE_HOURS,
    SAMPLE_YEAR,
    WEEKDAY_ANCHOR_DAY,
    WEEKDAY_ANCHOR_MONTH,
)
from localefields.instant import Instant

__all__ = ["map_meridiems", "map_months", "map_weekdays"]


def map_months[T](func: Callable[[Instant], T]) -> list[T]:
    """Apply ``func`` to one sample instant per month, January first."""
    return [func(Instant.from_fields(SAMPLE_YEAR, month, 1)) for month in range(1, 13)]


def map_weekdays[T](func: Callable[[Instant], T]) -> list[T]:
    """Apply ``func`` to one sample instant per weekday, Monday first."""
    return [
        func(Instant.from_fields(SAMPLE_YEAR, WEEKDAY_ANCHOR_MONTH, WEEKDAY_ANCHOR_DAY + offset))
        for offset in range(7)
    ]


def map_meridiems[T](func: Callable[[Instant], T]) -> list[T]:
    """Apply ``func`` to an AM sample and then a PM sample."""
    return [
        func(Instant.from_fields(SAMPLE_YEAR, WEEKDAY_ANCHOR_MONTH, WEEKDAY_ANCHOR_DAY, hour))
        for hour in MERIDIEM_SAMPLE_HOURS
    ]
