from __future__ import annotations

from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.utils.pdf.core.layout_common import (
    BODY_SIZE,
    COMPANY_LINES_Y,
    COMPANY_NAME_SIZE,
    COMPANY_Y,
    LINE_STEP,
    MARGIN_X,
)
from invoice_pro.utils.pdf.core.ops import DrawOp, TextRun


def render_company(company: CompanyProfile) -> list[DrawOp]:
    ops: list[DrawOp] = [TextRun(company.name, MARGIN_X, COMPANY_Y, COMPANY_NAME_SIZE, bold=True)]
    y = COMPANY_LINES_Y
    for line in company.contact_lines():
        ops.append(TextRun(line, MARGIN_X, y, BODY_SIZE))
        y += LINE_STEP
    return ops
