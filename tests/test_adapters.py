# tests/test_adapters.py
import datetime as dt

import pytest

import cmholidays
from cmholidays.adapters import ForeignDate, adapt, holiday_kind, is_holiday
from cmholidays.domain.date import HolidayDate, HolidayLike
from cmholidays.domain.types import HolidayKind


def test_public_api_example():
    assert cmholidays.is_holiday(dt.date(2024, 10, 7)) is True


def test_adapt_returns_native_value_unchanged():
    d = HolidayDate(2024, 10, 1)
    assert adapt(d) is d


def test_adapt_wraps_date():
    wrapped = adapt(dt.date(2024, 2, 4))
    assert isinstance(wrapped, ForeignDate)
    assert wrapped.to_holiday_date() == HolidayDate(2024, 2, 4)


def test_adapt_rejects_other_types():
    with pytest.raises(TypeError):
        adapt("2024-10-01")  # type: ignore[arg-type]


def test_date_and_naive_datetime():
    assert holiday_kind(dt.date(2024, 2, 4)) == HolidayKind.L0101_WORKDAY
    assert holiday_kind(dt.datetime(2024, 9, 14, 12, 0)) == HolidayKind.L0815_WORKDAY
    assert is_holiday(dt.datetime(2024, 10, 1, 8, 30)) is True


def test_aware_datetime_is_normalized_to_utc8():
    # 2024-10-11 20:00 UTC == 2024-10-12 04:00 UTC+8 (国庆节调休上班)
    value = dt.datetime(2024, 10, 11, 20, 0, tzinfo=dt.UTC)
    assert holiday_kind(value) == HolidayKind.G1001_WORKDAY
    assert is_holiday(value) is False


def test_unknown_propagates_through_adapters():
    assert holiday_kind(dt.date(2023, 10, 1)) is None
    assert is_holiday(dt.datetime(2030, 1, 1, tzinfo=dt.UTC)) is None


def test_aware_datetime_past_datetime_max_is_unknown():
    # UTC+8 では 10000-01-01 になる
    value = dt.datetime(9999, 12, 31, 20, tzinfo=dt.UTC)
    assert holiday_kind(value) is None
    assert is_holiday(value) is None
    assert adapt(value).to_holiday_date() == HolidayDate(10000, 1, 1)


def test_aware_datetime_before_datetime_min_is_unknown():
    # UTC+8 では 0001-01-01 の前日(0年)になる
    value = dt.datetime(1, 1, 1, 0, tzinfo=dt.timezone(dt.timedelta(hours=10)))
    assert holiday_kind(value) is None
    assert is_holiday(value) is None


class _Fixed(HolidayLike):
    def __init__(self, kind):
        self.kind = kind

    def holiday_kind(self):
        return self.kind


def test_is_holiday_default_implementation():
    assert _Fixed(HolidayKind.S05_HOLIDAY).is_holiday() is True
    assert _Fixed(HolidayKind.REGULAR_WORKDAY).is_holiday() is False
    assert _Fixed(None).is_holiday() is None
    assert adapt(_Fixed(None)).is_holiday() is None
