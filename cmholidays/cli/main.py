# cmholidays/cli/main.py
from __future__ import annotations

import argparse
import json
import logging
import pathlib

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cmholidays import __version__
from cmholidays.calendar.holidays import MAX_YEAR, MIN_YEAR
from cmholidays.calendar.utils import generate_monthly_dates
from cmholidays.domain.date import HolidayDate
from cmholidays.io.dates_loader import load_query_dates, parse_iso_date
from cmholidays.io.export_excel import UNKNOWN_LABEL, export_calendar_to_excel
from cmholidays.report import DayReport, build_report, summarize

logger = logging.getLogger(__name__)


def collect_dates(
    dates: list[str],
    year: int | None,
    month: int | None,
    dates_file: pathlib.Path | str | None,
) -> list[HolidayDate]:
    """-d, -y/-m, -f の順に判定対象の日付を集める。入力不正は ValueError。"""
    result = [parse_iso_date(s) for s in dates]

    if month is not None and year is None:
        raise ValueError("--month は --year と一緒に指定してください")
    if year is not None:
        months = [month] if month is not None else list(range(1, 13))
        for m in months:
            if HolidayDate.from_ymd(year, m, 1) is None:
                raise ValueError(f"無効な年月です: year={year}, month={m}")
            result.extend(generate_monthly_dates(year, m))

    if dates_file:
        result.extend(load_query_dates(str(dates_file)))

    return result


def classify_and_report(
    dates: list[HolidayDate], json_out: bool, xlsx: pathlib.Path | str | None
) -> None:
    rows = build_report(dates)

    if json_out:
        payload = {"days": [r.to_dict() for r in rows], "summary": summarize(rows)}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_report_rich(rows)

    # Excel 出力(指定があれば)
    if xlsx:
        export_calendar_to_excel(rows=rows, out_path=str(xlsx))
        Console(stderr=True).print(f":white_check_mark: Exported to {xlsx}")


def print_report_rich(rows: list[DayReport]) -> None:
    console = Console()
    console.rule("[bold]Holiday Classification")
    t = Table("Date", "Weekday", "Kind", "Holiday")
    for r in rows:
        if r.kind is None:
            t.add_row(r.date.isoformat(), r.weekday.value, UNKNOWN_LABEL, "?", style="dim")
            continue
        style = "bold red" if r.is_adjusted else ("green" if r.is_holiday else None)
        t.add_row(
            r.date.isoformat(),
            r.weekday.value,
            r.kind.value,
            "yes" if r.is_holiday else "no",
            style=style,
        )
    console.print(t)

    summary = summarize(rows)
    ts = Table(show_header=False)
    for k, v in summary.items():
        ts.add_row(k, str(v))
    console.print(ts)
    if summary["unknown"]:
        console.print(f"[yellow]Recorded years are {MIN_YEAR}-{MAX_YEAR}; other years are unknown.")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        description="中国大陆法定节假日判定 - 指定日の放假/调休上班を表示"
    )

    # Version option
    ap.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"cmholidays {__version__}",
        help="バージョン情報を表示",
    )

    ap.add_argument(
        "-d",
        "--date",
        action="append",
        default=[],
        help="判定する日付 YYYY-MM-DD (複数指定可)",
    )
    ap.add_argument("-y", "--year", type=int, help="対象年 (例: 2025)")
    ap.add_argument("-m", "--month", type=int, help="対象月 (1-12)。省略時は年全体")
    ap.add_argument(
        "-f",
        "--dates-file",
        type=pathlib.Path,
        help="判定する日付を記載した toml ファイル",
    )
    ap.add_argument(
        "-x",
        "--xlsx",
        type=pathlib.Path,
        help="Excel 出力パス (例: output/holidays_2025.xlsx)",
    )
    ap.add_argument("-j", "--json", action="store_true", help="テキストの代わりにJSON形式で出力")
    ap.add_argument("-v", "--verbose", action="store_true", help="デバッグログを表示")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)

    try:
        dates = collect_dates(args.date, args.year, args.month, args.dates_file)
    except (ValueError, OSError) as e:
        ap.error(str(e))
    if not dates:
        ap.error("--date, --year, --dates-file のいずれかを指定してください")
    logger.debug("classifying %d dates", len(dates))

    classify_and_report(dates, args.json, args.xlsx)


if __name__ == "__main__":
    main()
