from __future__ import annotations

from typing import Iterable

from invoice_pro.core.errors import ClientValidationError, InvoiceValidationError
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.invoice import Invoice


def validate_invoice(invoice: Invoice, clients: Iterable[Client]) -> None:
    """Raise InvoiceValidationError for the first rule the invoice breaks."""
    client_ids = {client.id for client in clients}
    if not invoice.client_id or invoice.client_id not in client_ids:
        raise InvoiceValidationError("client", "Please select a client")
    if not invoice.invoice_number.strip():
        raise InvoiceValidationError("invoice_number", "Invoice number is required")
    if invoice.due_date is None:
        raise InvoiceValidationError("due_date", "Due date is required")
    if not any(item.description.strip() for item in invoice.items):
        raise InvoiceValidationError("items", "Add at least one item with description")


def validate_client(client: Client) -> None:
    if not client.name.strip():
        raise ClientValidationError("name", "Client name is required")
