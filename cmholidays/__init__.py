"""中国大陆法定节假日判定

指定した日付が法定休日・调休上班日・通常の土日/平日のいずれかを判定する。
"""

try:
    from importlib.metadata import version

    __version__ = version("chinese-mainland-holidays")
except (ImportError, Exception):
    # Fallback for development installs or when package is not installed
    __version__ = "0.1.0"

from cmholidays.adapters import adapt, holiday_kind, is_holiday
from cmholidays.calendar.classifier import classify
from cmholidays.calendar.holidays import MAX_YEAR, MIN_YEAR
from cmholidays.domain.date import HolidayDate, HolidayLike
from cmholidays.domain.types import Festival, HolidayKind, Weekday

__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "Festival",
    "HolidayDate",
    "HolidayKind",
    "HolidayLike",
    "Weekday",
    "__version__",
    "adapt",
    "classify",
    "holiday_kind",
    "is_holiday",
]
