import datetime as dt
import textwrap

import pytest

from cmholidays.calendar.holidays import MAX_YEAR, MIN_YEAR


@pytest.fixture
def write_toml(tmp_path):
    """tmp_path 配下に TOML を書き出してパスを返す"""

    def _writer(content: str, name: str = "dates.toml"):
        p = tmp_path / name
        p.write_text(textwrap.dedent(content), encoding="utf-8")
        return p

    return _writer


@pytest.fixture(scope="session")
def recorded_days() -> list[dt.date]:
    """MIN_YEAR..MAX_YEAR の全日付"""
    d = dt.date(MIN_YEAR, 1, 1)
    end = dt.date(MAX_YEAR + 1, 1, 1)
    days = []
    while d < end:
        days.append(d)
        d += dt.timedelta(days=1)
    return days
