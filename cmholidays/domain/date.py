from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final

from cmholidays.calendar.utils import is_valid_ymd, ymd_key
from cmholidays.domain.types import HolidayKind

# 中国標準時 (UTC+8, 夏時間なし)
CHINA_STANDARD_OFFSET: Final[dt.timedelta] = dt.timedelta(hours=8)
CHINA_STANDARD_TIME: Final[dt.timezone] = dt.timezone(CHINA_STANDARD_OFFSET, "CST")

_MAX_ORDINAL: Final[int] = dt.date.max.toordinal()


def civil_ymd(value: dt.date) -> tuple[int, int, int]:
    """
    Civil (year, month, day) of a ``datetime.date`` or ``datetime.datetime``.

    Aware datetimes are shifted to UTC+8 by ordinal arithmetic, so values next
    to ``datetime.min``/``datetime.max`` never overflow: the result may be
    (0, 12, 31) or a day in January 10000, which ``datetime`` cannot represent.
    """
    if isinstance(value, dt.datetime):
        offset = value.utcoffset()
        if offset is not None:
            elapsed = (
                dt.timedelta(
                    hours=value.hour,
                    minutes=value.minute,
                    seconds=value.second,
                    microseconds=value.microsecond,
                )
                + CHINA_STANDARD_OFFSET
                - offset
            )
            # |offset| < 24h なので繰り上がりは -1..2 日
            ordinal = value.toordinal() + elapsed.days
            if ordinal < 1:
                return (0, 12, 31)
            if ordinal > _MAX_ORDINAL:
                return (10000, 1, ordinal - _MAX_ORDINAL)
            value = dt.date.fromordinal(ordinal)
    return (value.year, value.month, value.day)


class HolidayLike(ABC):
    """Anything that can be classified as a holiday or working day."""

    @abstractmethod
    def holiday_kind(self) -> HolidayKind | None:
        """Returns the holiday kind, or None when the year is outside MIN_YEAR..MAX_YEAR."""

    def is_holiday(self) -> bool | None:
        """Returns whether the date is a holiday, or None when the year is not recorded."""
        kind = self.holiday_kind()
        if kind is None:
            return None
        return kind.is_holiday


@dataclass(frozen=True, order=True, slots=True)
class HolidayDate(HolidayLike):
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_ymd(self.year, self.month, self.day):
            raise ValueError(f"invalid date: {self.year}-{self.month}-{self.day}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> HolidayDate | None:
        """Constructs from year, month and day.

        Returns None when the given date is invalid or the year is less than 1.
        """
        if not is_valid_ymd(year, month, day):
            return None
        return cls(year, month, day)

    @classmethod
    def from_foreign(cls, value: dt.date) -> HolidayDate:
        """
        Converts a ``datetime.date`` or ``datetime.datetime``.

        Aware datetimes are first converted to UTC+8 and only the civil date is
        kept. Naive datetimes keep their own date part.

        Raises:
            ValueError: only when the UTC+8 date falls before 0001-01-01.
        """
        return cls(*civil_ymd(value))

    def numeric_key(self) -> int:
        return ymd_key(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def holiday_kind(self) -> HolidayKind | None:
        from cmholidays.calendar.classifier import classify

        return classify(self)
