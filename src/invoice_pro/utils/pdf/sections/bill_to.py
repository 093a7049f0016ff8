from __future__ import annotations

from typing import Optional

from invoice_pro.core.models.client import UNKNOWN_CLIENT, Client
from invoice_pro.utils.pdf.core.layout_common import (
    BILL_TO_LINES_Y,
    BILL_TO_Y,
    BODY_SIZE,
    LINE_STEP,
    MARGIN_X,
    SECTION_TITLE_SIZE,
)
from invoice_pro.utils.pdf.core.ops import DrawOp, TextRun


def build_bill_to_lines(client: Optional[Client]) -> list[str]:
    """Client name followed by the contact fields that are filled in."""
    if client is None:
        return [UNKNOWN_CLIENT]
    return [client.name or UNKNOWN_CLIENT] + client.contact_lines()


def render_bill_to(client: Optional[Client]) -> list[DrawOp]:
    ops: list[DrawOp] = [TextRun("Bill To:", MARGIN_X, BILL_TO_Y, SECTION_TITLE_SIZE, bold=True)]
    for idx, line in enumerate(build_bill_to_lines(client)):
        ops.append(TextRun(line, MARGIN_X, BILL_TO_LINES_Y + idx * LINE_STEP, BODY_SIZE))
    return ops
