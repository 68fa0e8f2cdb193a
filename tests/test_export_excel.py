# tests/test_export_excel.py
from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook

from cmholidays.domain.date import HolidayDate
from cmholidays.domain.types import HolidayKind, Weekday
from cmholidays.io.export_excel import (
    ADJUSTED_COLOR,
    HOLIDAY_COLOR,
    UNKNOWN_COLOR,
    UNKNOWN_LABEL,
    export_calendar_to_excel,
)
from cmholidays.report import build_report


def _rgb(cell):
    """openpyxl の色は '00FFF4CC' のように先頭にアルファが付くことがあるので末尾6桁で比較"""
    fill = cell.fill
    if not fill or fill.fill_type != "solid":
        return None
    c = fill.start_color
    rgb = getattr(c, "rgb", None)
    if not rgb:
        return None
    return rgb[-6:].upper()


def test_export_excel_grid_and_styles(tmp_path: Path):
    days = [
        HolidayDate(2024, 10, 1),  # 国庆节
        HolidayDate(2024, 10, 5),  # 土曜
        HolidayDate(2024, 10, 8),  # 平日
        HolidayDate(2024, 10, 12),  # 调休上班
        HolidayDate(2023, 10, 1),  # 範囲外
    ]
    out = tmp_path / "holidays.xlsx"

    export_calendar_to_excel(rows=build_report(days), out_path=str(out))

    assert out.exists(), "Excelファイルが作成されていません"
    wb = load_workbook(out)
    ws = wb.active

    assert ws.title == "节假日"
    assert [ws.cell(1, j).value for j in range(1, 5)] == ["日期", "星期", "类型", "放假"]
    assert ws.freeze_panes == "A2"

    assert [ws.cell(2, j).value for j in range(1, 5)] == [
        "2024-10-01",
        Weekday.TUESDAY.value,
        HolidayKind.G1001_HOLIDAY.value,
        "是",
    ]
    assert ws.cell(5, 3).value == HolidayKind.G1001_WORKDAY.value
    assert ws.cell(5, 4).value == "否"
    assert ws.cell(6, 3).value == UNKNOWN_LABEL
    assert ws.cell(6, 4).value == UNKNOWN_LABEL

    assert _rgb(ws.cell(2, 1)) == ADJUSTED_COLOR
    assert _rgb(ws.cell(3, 1)) == HOLIDAY_COLOR
    assert _rgb(ws.cell(4, 1)) is None
    assert _rgb(ws.cell(5, 4)) == ADJUSTED_COLOR
    assert _rgb(ws.cell(6, 2)) == UNKNOWN_COLOR

    assert ws.max_row == 1 + len(days)
