from __future__ import annotations

from typing import Iterable

from invoice_pro.core.calculations.invoice_calculator import format_currency, format_quantity
from invoice_pro.core.models.line_item import LineItem
from invoice_pro.utils.pdf.core.layout_common import (
    BODY_SIZE,
    COL_AMOUNT_RIGHT,
    COL_DESCRIPTION_X,
    COL_QTY_X,
    COL_RATE_X,
    CONTENT_W,
    MARGIN_X,
    TABLE_FIRST_ROW_OFFSET,
    TABLE_HEADER_BASELINE,
    TABLE_HEADER_HEIGHT,
    TABLE_ROW_STEP,
    color,
)
from invoice_pro.utils.pdf.core.ops import ALIGN_RIGHT, DrawOp, FilledRect, TextRun

HEADERS = ("Description", "Qty", "Rate", "Amount")


def render_items_table(items: Iterable[LineItem], start_y: float) -> tuple[list[DrawOp], float]:
    """
    Render header band + one row per item. Returns (ops, y after the last row).
    """
    ops: list[DrawOp] = [FilledRect(MARGIN_X, start_y, CONTENT_W, TABLE_HEADER_HEIGHT, color("header_band"))]
    header_y = start_y + TABLE_HEADER_BASELINE
    white = color("header_text")
    ops.append(TextRun(HEADERS[0], COL_DESCRIPTION_X, header_y, BODY_SIZE, bold=True, color=white))
    ops.append(TextRun(HEADERS[1], COL_QTY_X, header_y, BODY_SIZE, bold=True, color=white))
    ops.append(TextRun(HEADERS[2], COL_RATE_X, header_y, BODY_SIZE, bold=True, color=white))
    ops.append(TextRun(HEADERS[3], COL_AMOUNT_RIGHT, header_y, BODY_SIZE, bold=True, align=ALIGN_RIGHT, color=white))

    row_y = start_y + TABLE_FIRST_ROW_OFFSET
    for item in items:
        ops.append(TextRun(item.description, COL_DESCRIPTION_X, row_y, BODY_SIZE))
        ops.append(TextRun(format_quantity(item.quantity), COL_QTY_X, row_y, BODY_SIZE))
        ops.append(TextRun(format_currency(item.rate), COL_RATE_X, row_y, BODY_SIZE))
        ops.append(TextRun(format_currency(item.amount), COL_AMOUNT_RIGHT, row_y, BODY_SIZE, align=ALIGN_RIGHT))
        row_y += TABLE_ROW_STEP
    return ops, row_y
