from __future__ import annotations

import datetime as dt
import logging
import re
import tomllib

from cmholidays.calendar.utils import generate_monthly_dates
from cmholidays.domain.date import HolidayDate

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_iso_date(text: str) -> HolidayDate:
    """Parse ``YYYY-MM-DD`` into a HolidayDate.

    Raises:
        ValueError: when the text is malformed or the date does not exist.
    """
    m = _ISO_DATE.match(text.strip())
    if not m:
        raise ValueError(f"YYYY-MM-DD 形式の日付を期待しましたが '{text}' が見つかりました")
    d = HolidayDate.from_ymd(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    if d is None:
        raise ValueError(f"存在しない日付です: '{text}'")
    return d


def load_query_dates(config_path: str) -> list[HolidayDate]:
    """Load the dates to classify from a TOML file.

    Args:
        config_path (str): Path to the TOML file. ``dates`` holds ISO strings
            or TOML dates, each ``[[months]]`` table holds ``year`` and ``month``.

    Returns:
        list[HolidayDate]: ``dates`` in file order, then every day of each month.
    """
    result: list[HolidayDate] = []

    with open(config_path, "rb") as f:
        config = tomllib.loads(f.read().decode("utf-8-sig"))

    for idx, raw in enumerate(config.get("dates", []), start=1):
        if isinstance(raw, dt.date | str):
            try:
                if isinstance(raw, dt.date):
                    d = HolidayDate.from_foreign(raw)
                else:
                    d = parse_iso_date(raw)
            except ValueError as e:
                raise ValueError(f"{config_path}: dates[{idx}]: {e}") from e
            result.append(d)
        else:
            raise ValueError(
                f"{config_path}: dates[{idx}]: 日付を期待しましたが {raw!r} が見つかりました"
            )

    for idx, month in enumerate(config.get("months", []), start=1):
        entry = month if isinstance(month, dict) else {}
        year = entry.get("year")
        mon = entry.get("month")
        if HolidayDate.from_ymd(year, mon, 1) is None:
            raise ValueError(
                f"{config_path}: months[{idx}]: 無効な年月です (year={year!r}, month={mon!r})"
            )
        result.extend(generate_monthly_dates(year, mon))

    logger.debug("loaded %d dates from %s", len(result), config_path)
    return result
