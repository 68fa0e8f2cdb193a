from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from cmholidays.calendar.utils import weekday_of
from cmholidays.domain.date import HolidayDate
from cmholidays.domain.types import HolidayKind, Weekday


@dataclass(frozen=True)
class DayReport:
    date: HolidayDate
    weekday: Weekday
    kind: HolidayKind | None  # None: 記録範囲外の年
    is_holiday: bool | None

    @property
    def is_adjusted(self) -> bool:
        return self.kind is not None and self.kind.festival is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "weekday": self.weekday.value,
            "kind": self.kind.name if self.kind is not None else None,
            "label": self.kind.value if self.kind is not None else None,
            "festival": self.kind.festival.value if self.is_adjusted else None,
            "is_holiday": self.is_holiday,
        }


def build_report(dates: Iterable[HolidayDate]) -> list[DayReport]:
    rows = []
    for d in dates:
        kind = d.holiday_kind()
        rows.append(
            DayReport(
                date=d,
                weekday=weekday_of(d),
                kind=kind,
                is_holiday=None if kind is None else kind.is_holiday,
            )
        )
    return rows


def summarize(rows: Iterable[DayReport]) -> dict[str, int]:
    """
    rows を集計して件数を返す。
    adjusted は祝日/调休に該当する日の数(holiday/workday と重複して数える)。
    """
    summary = {"holiday": 0, "workday": 0, "adjusted": 0, "unknown": 0}
    for r in rows:
        if r.is_holiday is None:
            summary["unknown"] += 1
            continue
        summary["holiday" if r.is_holiday else "workday"] += 1
        if r.is_adjusted:
            summary["adjusted"] += 1
    return summary
