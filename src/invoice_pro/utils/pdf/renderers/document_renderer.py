"""
Turn an invoice, its client and the company profile into the ordered draw
ops of a one-page invoice document.
"""

from __future__ import annotations

from typing import Optional

from invoice_pro.core.calculations.invoice_calculator import summarize
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.core.models.invoice import Invoice
from invoice_pro.utils.pdf.core.layout_common import (
    NOTES_GAP,
    QR_SIDE,
    QR_Y,
    RIGHT_X,
    TABLE_Y,
    TOTALS_GAP,
)
from invoice_pro.utils.pdf.core.ops import DrawOp, QrCode
from invoice_pro.utils.pdf.sections.bill_to import render_bill_to
from invoice_pro.utils.pdf.sections.company import render_company
from invoice_pro.utils.pdf.sections.header import render_header
from invoice_pro.utils.pdf.sections.items_table import render_items_table
from invoice_pro.utils.pdf.sections.notes import render_notes
from invoice_pro.utils.pdf.sections.totals import render_totals
from invoice_pro.utils.qr import make_qr_matrix, payment_reference


def _render_qr(invoice: Invoice, amount: float) -> QrCode:
    matrix = make_qr_matrix(payment_reference(invoice.invoice_number, amount))
    module = max(1, QR_SIDE // len(matrix))
    return QrCode(matrix, RIGHT_X - module * len(matrix), QR_Y, module)


def render_document(
    invoice: Invoice,
    client: Optional[Client],
    company: CompanyProfile,
    include_qr: bool = False,
) -> list[DrawOp]:
    """
    Sections are laid out top-down: company, title/metadata, bill-to, item
    table, totals, notes. The table starts at a fixed offset; totals and notes
    follow the last item row. A missing client renders as "Unknown Client".
    """
    totals = summarize(invoice)

    ops: list[DrawOp] = []
    ops.extend(render_company(company))
    ops.extend(render_header(invoice))
    if include_qr:
        ops.append(_render_qr(invoice, totals.total))
    ops.extend(render_bill_to(client))

    table_ops, table_end = render_items_table(invoice.items, TABLE_Y)
    ops.extend(table_ops)

    totals_ops, total_y = render_totals(invoice, totals, table_end + TOTALS_GAP)
    ops.extend(totals_ops)

    ops.extend(render_notes(invoice.notes, total_y + NOTES_GAP))
    return ops
