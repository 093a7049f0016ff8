from __future__ import annotations

from invoice_pro.core.models.invoice import Invoice
from invoice_pro.utils.pdf.core.layout_common import BODY_SIZE, LINE_STEP, META_Y, RIGHT_X, TITLE_SIZE, TITLE_Y
from invoice_pro.utils.pdf.core.ops import ALIGN_RIGHT, DrawOp, TextRun

TITLE = "INVOICE"


def build_meta_lines(invoice: Invoice) -> list[str]:
    issued = invoice.date.isoformat() if invoice.date else "-"
    due = invoice.due_date.isoformat() if invoice.due_date else "-"
    return [
        f"Invoice #: {invoice.invoice_number}",
        f"Date: {issued}",
        f"Due: {due}",
    ]


def render_header(invoice: Invoice) -> list[DrawOp]:
    ops: list[DrawOp] = [TextRun(TITLE, RIGHT_X, TITLE_Y, TITLE_SIZE, bold=True, align=ALIGN_RIGHT)]
    for idx, line in enumerate(build_meta_lines(invoice)):
        ops.append(TextRun(line, RIGHT_X, META_Y + idx * LINE_STEP, BODY_SIZE, align=ALIGN_RIGHT))
    return ops
