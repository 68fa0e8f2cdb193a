from __future__ import annotations

import logging
from typing import Final, cast

from openpyxl import Workbook
from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from cmholidays.report import DayReport

logger = logging.getLogger(__name__)

SHEET_TITLE: Final[str] = "节假日"
HEADERS: Final[tuple[str, ...]] = ("日期", "星期", "类型", "放假")
UNKNOWN_LABEL: Final[str] = "未知"

HOLIDAY_COLOR: Final[str] = "FFF4CC"
ADJUSTED_COLOR: Final[str] = "FFC7CE"
UNKNOWN_COLOR: Final[str] = "D9D9D9"


def export_calendar_to_excel(*, rows: list[DayReport], out_path: str) -> None:
    wb = Workbook()

    ws_like = wb.active
    # None/Chartsheet の可能性を潰す
    if not isinstance(ws_like, Worksheet):
        ws_like = wb.create_sheet(title=SHEET_TITLE)
    ws: Worksheet = cast(Worksheet, ws_like)
    ws.title = SHEET_TITLE

    # 列幅・見た目
    for letter, width in zip("ABCD", (12, 6, 16, 6), strict=True):
        ws.column_dimensions[letter].width = width

    bold = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center")
    border = Border(
        left=Side(style="thin"),
        right=Side(style="thin"),
        top=Side(style="thin"),
        bottom=Side(style="thin"),
    )
    holiday_fill = PatternFill(
        fill_type="solid", start_color=HOLIDAY_COLOR, end_color=HOLIDAY_COLOR
    )
    adjusted_fill = PatternFill(
        fill_type="solid", start_color=ADJUSTED_COLOR, end_color=ADJUSTED_COLOR
    )
    unknown_fill = PatternFill(
        fill_type="solid", start_color=UNKNOWN_COLOR, end_color=UNKNOWN_COLOR
    )

    # 見出し
    for j, title in enumerate(HEADERS, start=1):
        cell: Cell = ws.cell(row=1, column=j, value=title)
        cell.font = bold
        cell.alignment = center
        cell.border = border

    # 本体行
    for i, r in enumerate(rows, start=2):
        label = r.kind.value if r.kind is not None else UNKNOWN_LABEL
        if r.is_holiday is None:
            off = UNKNOWN_LABEL
        else:
            off = "是" if r.is_holiday else "否"
        values = (r.date.isoformat(), r.weekday.value, label, off)

        # 祝日/调休 > 休日 > 範囲外 の優先で色付け
        fill = None
        if r.is_adjusted:
            fill = adjusted_fill
        elif r.is_holiday:
            fill = holiday_fill
        elif r.is_holiday is None:
            fill = unknown_fill

        for j, v in enumerate(values, start=1):
            cell = ws.cell(row=i, column=j, value=v)
            cell.alignment = center
            cell.border = border
            if fill is not None:
                cell.fill = fill

    ws.freeze_panes = "A2"
    wb.save(out_path)
    logger.info("exported %d rows to %s", len(rows), out_path)
