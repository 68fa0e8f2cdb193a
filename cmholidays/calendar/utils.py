from __future__ import annotations

from typing import TYPE_CHECKING, Final

from cmholidays.domain.types import Weekday

if TYPE_CHECKING:
    from cmholidays.domain.date import HolidayDate

WEEKDAY_LIST = list(Weekday)

MAX_SUPPORTED_YEAR: Final[int] = 65535

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# うるう年判定
def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Whether (year, month, day) names a real proleptic Gregorian date with year >= 1."""
    # bool は int のサブクラスなので type で判定
    if type(year) is not int or type(month) is not int or type(day) is not int:
        return False
    if not 1 <= year <= MAX_SUPPORTED_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def ymd_key(year: int, month: int, day: int) -> int:
    """
    Compact sortable projection of a date.

    Not a day count, so never use it for date arithmetic. It preserves
    (year, month, day) ordering within a year only: month * 31 + day reaches
    403 in December, so the last days of a year overlap the first days of the
    next. The override table is searched by HolidayDate order instead.
    """
    return year * 366 + month * 31 + day


def day_of_week(year: int, month: int, day: int) -> int:
    """
    Returns day of week represented by 0-6, where Sunday is 0.

    Zeller's congruence as given in RFC 3339 appendix B. January and February
    are counted as months 11 and 12 of the previous year.
    The date must already be valid.
    """
    if month > 2:
        m = month - 2
        y = year
    else:
        m = month + 10
        y = year - 1
    c = y // 100
    y %= 100
    return ((13 * m - 1) // 5 + day + y + y // 4 + c // 4 + 5 * c) % 7


# 曜日判定
def weekday_of(d: HolidayDate) -> Weekday:
    return WEEKDAY_LIST[day_of_week(d.year, d.month, d.day)]


# 週末判定(0=Sun ... 6=Sat)
def is_weekend(d: HolidayDate) -> bool:
    return day_of_week(d.year, d.month, d.day) in (0, 6)


# 指定年・月の全日付を生成
def generate_monthly_dates(year: int, month: int) -> list[HolidayDate]:
    from cmholidays.domain.date import HolidayDate

    return [HolidayDate(year, month, day) for day in range(1, days_in_month(year, month) + 1)]
