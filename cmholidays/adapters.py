"""
Adapters from foreign date representations to :class:`HolidayDate`.

``datetime.date`` and naive ``datetime.datetime`` are taken as civil dates in
Chinese Mainland. Aware datetimes are normalized to UTC+8 first.
"""

from __future__ import annotations

import datetime as dt

from cmholidays.calendar.classifier import in_recorded_range
from cmholidays.domain.date import HolidayDate, HolidayLike, civil_ymd
from cmholidays.domain.types import HolidayKind

DateLike = HolidayLike | dt.date


class ForeignDate(HolidayLike):
    """Wraps a ``datetime.date``/``datetime.datetime`` so it can be classified."""

    __slots__ = ("value",)

    def __init__(self, value: dt.date) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ForeignDate({self.value!r})"

    def to_holiday_date(self) -> HolidayDate:
        return HolidayDate.from_foreign(self.value)

    def holiday_kind(self) -> HolidayKind | None:
        # UTC+8 へのずらしで 0001-01-01 より前になる場合も範囲外として扱う
        year, month, day = civil_ymd(self.value)
        if not in_recorded_range(year):
            return None
        return HolidayDate(year, month, day).holiday_kind()


def adapt(value: DateLike) -> HolidayLike:
    if isinstance(value, HolidayLike):
        return value
    if isinstance(value, dt.date):
        return ForeignDate(value)
    raise TypeError(f"cannot classify {type(value).__name__}: expected a date or datetime")


def holiday_kind(value: DateLike) -> HolidayKind | None:
    return adapt(value).holiday_kind()


def is_holiday(value: DateLike) -> bool | None:
    return adapt(value).is_holiday()
