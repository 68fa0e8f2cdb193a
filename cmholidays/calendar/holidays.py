"""
Statutory holiday schedules of Chinese Mainland.

Only exceptions to the weekend/weekday default are recorded: weekday
holidays and weekend working days. Weekend days inside a holiday block are
ordinary rest days and are not listed.

Entries must stay sorted by date (binary search relies on it).
"""

from __future__ import annotations

from typing import Final

from cmholidays.domain.date import HolidayDate
from cmholidays.domain.types import HolidayKind

# Minimum year of which holidays are recorded.
MIN_YEAR: Final[int] = 2024
# Maximum year of which holidays are recorded.
MAX_YEAR: Final[int] = 2026


def _record(
    year: int, month: int, day: int, kind: HolidayKind
) -> tuple[HolidayDate, HolidayKind]:
    return (HolidayDate(year, month, day), kind)


HOLIDAYS: Final[tuple[tuple[HolidayDate, HolidayKind], ...]] = (
    # ---------- 2024 ----------
    # https://www.gov.cn/zhengce/zhengceku/202310/content_6911528.htm
    _record(2024, 1, 1, HolidayKind.G0101_HOLIDAY),
    _record(2024, 2, 4, HolidayKind.L0101_WORKDAY),
    _record(2024, 2, 12, HolidayKind.L0101_HOLIDAY),
    _record(2024, 2, 13, HolidayKind.L0101_HOLIDAY),
    _record(2024, 2, 14, HolidayKind.L0101_HOLIDAY),
    _record(2024, 2, 15, HolidayKind.L0101_HOLIDAY),
    _record(2024, 2, 16, HolidayKind.L0101_HOLIDAY),
    _record(2024, 2, 18, HolidayKind.L0101_WORKDAY),
    _record(2024, 4, 4, HolidayKind.S05_HOLIDAY),
    _record(2024, 4, 5, HolidayKind.S05_HOLIDAY),
    _record(2024, 4, 7, HolidayKind.S05_WORKDAY),
    _record(2024, 4, 28, HolidayKind.G0501_WORKDAY),
    _record(2024, 5, 1, HolidayKind.G0501_HOLIDAY),
    _record(2024, 5, 2, HolidayKind.G0501_HOLIDAY),
    _record(2024, 5, 3, HolidayKind.G0501_HOLIDAY),
    _record(2024, 5, 11, HolidayKind.G0501_WORKDAY),
    _record(2024, 6, 10, HolidayKind.L0505_HOLIDAY),
    _record(2024, 9, 14, HolidayKind.L0815_WORKDAY),
    _record(2024, 9, 16, HolidayKind.L0815_HOLIDAY),
    _record(2024, 9, 17, HolidayKind.L0815_HOLIDAY),
    _record(2024, 9, 29, HolidayKind.G1001_WORKDAY),
    _record(2024, 10, 1, HolidayKind.G1001_HOLIDAY),
    _record(2024, 10, 2, HolidayKind.G1001_HOLIDAY),
    _record(2024, 10, 3, HolidayKind.G1001_HOLIDAY),
    _record(2024, 10, 4, HolidayKind.G1001_HOLIDAY),
    _record(2024, 10, 7, HolidayKind.G1001_HOLIDAY),
    _record(2024, 10, 12, HolidayKind.G1001_WORKDAY),
    # ---------- 2025 ----------
    # 国务院办公厅关于2025年部分节假日安排的通知
    _record(2025, 1, 1, HolidayKind.G0101_HOLIDAY),
    _record(2025, 1, 26, HolidayKind.L0101_WORKDAY),
    _record(2025, 1, 28, HolidayKind.L0101_HOLIDAY),
    _record(2025, 1, 29, HolidayKind.L0101_HOLIDAY),
    _record(2025, 1, 30, HolidayKind.L0101_HOLIDAY),
    _record(2025, 1, 31, HolidayKind.L0101_HOLIDAY),
    _record(2025, 2, 3, HolidayKind.L0101_HOLIDAY),
    _record(2025, 2, 4, HolidayKind.L0101_HOLIDAY),
    _record(2025, 2, 8, HolidayKind.L0101_WORKDAY),
    _record(2025, 4, 4, HolidayKind.S05_HOLIDAY),
    _record(2025, 4, 27, HolidayKind.G0501_WORKDAY),
    _record(2025, 5, 1, HolidayKind.G0501_HOLIDAY),
    _record(2025, 5, 2, HolidayKind.G0501_HOLIDAY),
    _record(2025, 5, 5, HolidayKind.G0501_HOLIDAY),
    _record(2025, 6, 2, HolidayKind.L0505_HOLIDAY),
    # National Day and Mid-Autumn share one block; only 10-06 is Mid-Autumn
    _record(2025, 9, 28, HolidayKind.G1001_WORKDAY),
    _record(2025, 10, 1, HolidayKind.G1001_HOLIDAY),
    _record(2025, 10, 2, HolidayKind.G1001_HOLIDAY),
    _record(2025, 10, 3, HolidayKind.G1001_HOLIDAY),
    _record(2025, 10, 6, HolidayKind.L0815_HOLIDAY),
    _record(2025, 10, 7, HolidayKind.G1001_HOLIDAY),
    _record(2025, 10, 8, HolidayKind.G1001_HOLIDAY),
    _record(2025, 10, 11, HolidayKind.G1001_WORKDAY),
    # ---------- 2026 ----------
    # 国务院办公厅关于2026年部分节假日安排的通知
    _record(2026, 1, 1, HolidayKind.G0101_HOLIDAY),
    _record(2026, 1, 2, HolidayKind.G0101_HOLIDAY),
    _record(2026, 1, 4, HolidayKind.G0101_WORKDAY),
    _record(2026, 2, 14, HolidayKind.L0101_WORKDAY),
    _record(2026, 2, 16, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 17, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 18, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 19, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 20, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 23, HolidayKind.L0101_HOLIDAY),
    _record(2026, 2, 28, HolidayKind.L0101_WORKDAY),
    _record(2026, 4, 6, HolidayKind.S05_HOLIDAY),
    _record(2026, 5, 1, HolidayKind.G0501_HOLIDAY),
    _record(2026, 5, 4, HolidayKind.G0501_HOLIDAY),
    _record(2026, 5, 5, HolidayKind.G0501_HOLIDAY),
    _record(2026, 5, 9, HolidayKind.G0501_WORKDAY),
    _record(2026, 6, 19, HolidayKind.L0505_HOLIDAY),
    _record(2026, 9, 20, HolidayKind.G1001_WORKDAY),
    _record(2026, 9, 25, HolidayKind.L0815_HOLIDAY),
    _record(2026, 10, 1, HolidayKind.G1001_HOLIDAY),
    _record(2026, 10, 2, HolidayKind.G1001_HOLIDAY),
    _record(2026, 10, 5, HolidayKind.G1001_HOLIDAY),
    _record(2026, 10, 6, HolidayKind.G1001_HOLIDAY),
    _record(2026, 10, 7, HolidayKind.G1001_HOLIDAY),
    _record(2026, 10, 10, HolidayKind.G1001_WORKDAY),
)
