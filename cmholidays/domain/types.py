from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    # Zeller の結果 (0=日曜) と同じ並び
    SUNDAY = "周日"
    MONDAY = "周一"
    TUESDAY = "周二"
    WEDNESDAY = "周三"
    THURSDAY = "周四"
    FRIDAY = "周五"
    SATURDAY = "周六"


class Festival(str, Enum):
    NEW_YEAR = "元旦"
    CHINESE_NEW_YEAR = "春节"
    QINGMING = "清明节"
    MAY_DAY = "劳动节"
    DRAGON_BOAT = "端午节"
    MID_AUTUMN = "中秋节"
    NATIONAL_DAY = "国庆节"


class HolidayKind(str, Enum):
    """The type of a holiday or working day.

    Each ``*_HOLIDAY`` is a weekday that is a holiday, each ``*_WORKDAY`` is
    a Saturday or Sunday that is an adjusted working day. Festival codes:
    ``G`` = Gregorian date, ``L`` = lunar date, ``S`` = solar term.

    New festivals may be added; every member must also be listed in
    ``cmholidays.calendar.classifier.IS_HOLIDAY``.
    """

    REGULAR_HOLIDAY = "休息日"
    REGULAR_WORKDAY = "工作日"
    G0101_HOLIDAY = "元旦放假"
    G0101_WORKDAY = "元旦调休上班"
    L0101_HOLIDAY = "春节放假"
    L0101_WORKDAY = "春节调休上班"
    S05_HOLIDAY = "清明节放假"
    S05_WORKDAY = "清明节调休上班"
    G0501_HOLIDAY = "劳动节放假"
    G0501_WORKDAY = "劳动节调休上班"
    L0505_HOLIDAY = "端午节放假"
    L0505_WORKDAY = "端午节调休上班"
    L0815_HOLIDAY = "中秋节放假"
    L0815_WORKDAY = "中秋节调休上班"
    G1001_HOLIDAY = "国庆节放假"
    G1001_WORKDAY = "国庆节调休上班"

    @property
    def festival(self) -> Festival | None:
        return _FESTIVAL_BY_CODE.get(self.name.rsplit("_", 1)[0])

    @property
    def is_holiday(self) -> bool:
        from cmholidays.calendar.classifier import resolve_is_holiday

        return resolve_is_holiday(self)


_FESTIVAL_BY_CODE: dict[str, Festival] = {
    "G0101": Festival.NEW_YEAR,
    "L0101": Festival.CHINESE_NEW_YEAR,
    "S05": Festival.QINGMING,
    "G0501": Festival.MAY_DAY,
    "L0505": Festival.DRAGON_BOAT,
    "L0815": Festival.MID_AUTUMN,
    "G1001": Festival.NATIONAL_DAY,
}
