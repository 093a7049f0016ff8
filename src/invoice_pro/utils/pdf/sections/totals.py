from __future__ import annotations

from invoice_pro.core.calculations.invoice_calculator import InvoiceTotals, format_currency, format_quantity
from invoice_pro.core.models.invoice import DISCOUNT_PERCENTAGE, Invoice
from invoice_pro.utils.pdf.core.layout_common import (
    BODY_SIZE,
    COL_AMOUNT_RIGHT,
    TOTAL_SIZE,
    TOTALS_LABEL_X,
    TOTALS_ROW_STEP,
)
from invoice_pro.utils.pdf.core.ops import ALIGN_RIGHT, DrawOp, TextRun


def build_totals_lines(invoice: Invoice, totals: InvoiceTotals) -> list[tuple[str, str]]:
    """
    (label, value) pairs. Tax and discount rows appear only when non-zero;
    the last pair is always the grand total.
    """
    lines = [("Subtotal:", format_currency(totals.subtotal))]
    if invoice.tax_rate > 0:
        lines.append((f"Tax ({format_quantity(invoice.tax_rate)}%):", format_currency(totals.tax_amount)))
    if invoice.discount > 0:
        if invoice.discount_type == DISCOUNT_PERCENTAGE:
            label = f"Discount ({format_quantity(invoice.discount)}%):"
        else:
            label = "Discount:"
        lines.append((label, f"-{format_currency(totals.discount_amount)}"))
    lines.append(("Total:", format_currency(totals.total)))
    return lines


def render_totals(invoice: Invoice, totals: InvoiceTotals, start_y: float) -> tuple[list[DrawOp], float]:
    """Returns (ops, baseline y of the Total row)."""
    ops: list[DrawOp] = []
    lines = build_totals_lines(invoice, totals)
    y = start_y
    for idx, (label, value) in enumerate(lines):
        is_total = idx == len(lines) - 1
        size = TOTAL_SIZE if is_total else BODY_SIZE
        ops.append(TextRun(label, TOTALS_LABEL_X, y, size, bold=is_total))
        ops.append(TextRun(value, COL_AMOUNT_RIGHT, y, size, bold=is_total, align=ALIGN_RIGHT))
        if not is_total:
            y += TOTALS_ROW_STEP
    return ops, y
