"""
QR helper for the optional payment code printed on invoices.
"""

from __future__ import annotations

from typing import Sequence

import qrcode


def make_qr_matrix(data: str) -> Sequence[Sequence[bool]]:
    qr = qrcode.QRCode(border=1, box_size=1)
    qr.add_data(data)
    qr.make(fit=True)
    return qr.get_matrix()


def payment_reference(invoice_number: str, amount: float) -> str:
    return f"{invoice_number}|{amount:.2f}"
