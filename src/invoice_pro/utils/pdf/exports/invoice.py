from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from invoice_pro.core.errors import ClientNotFoundError
from invoice_pro.core.models.invoice import Invoice
from invoice_pro.core.services.store import InvoiceStore
from invoice_pro.utils.logs import logger
from invoice_pro.utils.pdf.core.builder import build_pdf_bytes
from invoice_pro.utils.pdf.core.drawing import draw_ops
from invoice_pro.utils.pdf.core.ops import DrawOp
from invoice_pro.utils.pdf.renderers.document_renderer import render_document

log = logger(__file__)

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|]')


def pdf_filename(invoice: Invoice) -> str:
    """``{invoiceNumber}.pdf`` with path separators and reserved characters replaced."""
    stem = _UNSAFE_CHARS.sub("-", invoice.invoice_number).strip() or "invoice"
    return f"{stem}.pdf"


def write_pdf(path: Path, ops: Iterable[DrawOp]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_pdf_bytes([draw_ops(ops)]))
    return path


def export_invoice_pdf(
    store: InvoiceStore,
    invoice_id: str,
    directory: Path,
    include_qr: bool = False,
    filename: str | None = None,
) -> Path:
    """
    Render the invoice and write ``<directory>/<filename>``; the name
    defaults to `pdf_filename`. Raises ClientNotFoundError when the
    invoice's client no longer exists.
    """
    invoice = store.get_invoice(invoice_id)
    client = store.resolve_client(invoice)
    if client is None:
        log.warning("PDF export of %s aborted: client %s missing", invoice.invoice_number, invoice.client_id)
        raise ClientNotFoundError(invoice.client_id)
    ops = render_document(invoice, client, store.company, include_qr=include_qr)
    name = Path(filename).name if filename else pdf_filename(invoice)
    target = write_pdf(Path(directory) / name, ops)
    log.info("Exported %s to %s", invoice.invoice_number, target)
    return target
