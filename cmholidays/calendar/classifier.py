from __future__ import annotations

import bisect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

from cmholidays.calendar.holidays import HOLIDAYS, MAX_YEAR, MIN_YEAR
from cmholidays.calendar.utils import day_of_week
from cmholidays.domain.types import HolidayKind

if TYPE_CHECKING:
    from cmholidays.domain.date import HolidayDate

# 全ての HolidayKind を列挙すること(デフォルト値は持たない)
IS_HOLIDAY: Final[Mapping[HolidayKind, bool]] = {
    HolidayKind.REGULAR_HOLIDAY: True,
    HolidayKind.G0101_HOLIDAY: True,
    HolidayKind.L0101_HOLIDAY: True,
    HolidayKind.S05_HOLIDAY: True,
    HolidayKind.G0501_HOLIDAY: True,
    HolidayKind.L0505_HOLIDAY: True,
    HolidayKind.L0815_HOLIDAY: True,
    HolidayKind.G1001_HOLIDAY: True,
    HolidayKind.REGULAR_WORKDAY: False,
    HolidayKind.G0101_WORKDAY: False,
    HolidayKind.L0101_WORKDAY: False,
    HolidayKind.S05_WORKDAY: False,
    HolidayKind.G0501_WORKDAY: False,
    HolidayKind.L0505_WORKDAY: False,
    HolidayKind.L0815_WORKDAY: False,
    HolidayKind.G1001_WORKDAY: False,
}


def ensure_exhaustive(mapping: Mapping[HolidayKind, bool]) -> None:
    miss = set(HolidayKind) - set(mapping)
    if miss:
        names = sorted(k.name for k in miss)
        raise RuntimeError(f"holiday mapping is missing kinds: {names}")


ensure_exhaustive(IS_HOLIDAY)


def in_recorded_range(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def lookup_override(d: HolidayDate) -> HolidayKind | None:
    """Binary-search the override table. Returns None when the date is not recorded."""
    i = bisect.bisect_left(HOLIDAYS, d, key=lambda entry: entry[0])
    if i < len(HOLIDAYS) and HOLIDAYS[i][0] == d:
        return HOLIDAYS[i][1]
    return None


def classify(d: HolidayDate) -> HolidayKind | None:
    """
    Returns the holiday kind of a date.

    None when the year is less than MIN_YEAR or greater than MAX_YEAR.
    A recorded override wins over the weekend/weekday default.
    """
    if not in_recorded_range(d.year):
        return None
    kind = lookup_override(d)
    if kind is not None:
        return kind
    match day_of_week(d.year, d.month, d.day):
        case 0 | 6:
            return HolidayKind.REGULAR_HOLIDAY
        case 1 | 2 | 3 | 4 | 5:
            return HolidayKind.REGULAR_WORKDAY
        case dow:
            raise RuntimeError(f"day_of_week out of range: {dow} for {d.isoformat()}")


def resolve_is_holiday(kind: HolidayKind) -> bool:
    return IS_HOLIDAY[kind]
