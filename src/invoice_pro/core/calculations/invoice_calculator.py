from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from invoice_pro.core.models.invoice import DISCOUNT_PERCENTAGE, Invoice
from invoice_pro.core.models.line_item import LineItem


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: float
    tax_amount: float
    discount_amount: float
    total: float


def subtotal(items: Iterable[LineItem]) -> float:
    """Sum of quantity x rate, unrounded."""
    return sum((item.quantity * item.rate for item in items), 0.0)


def tax_amount(invoice: Invoice, sub: float | None = None) -> float:
    base = subtotal(invoice.items) if sub is None else sub
    return base * (invoice.tax_rate / 100.0)


def discount_amount(invoice: Invoice, sub: float | None = None) -> float:
    base = subtotal(invoice.items) if sub is None else sub
    if invoice.discount_type == DISCOUNT_PERCENTAGE:
        return base * (invoice.discount / 100.0)
    return invoice.discount


def summarize(invoice: Invoice) -> InvoiceTotals:
    """
    Tax is charged on the undiscounted subtotal and the discount is taken
    off afterwards. The result is not clamped: an oversized fixed discount
    yields a negative total.
    """
    sub = subtotal(invoice.items)
    tax = tax_amount(invoice, sub)
    discount = discount_amount(invoice, sub)
    return InvoiceTotals(subtotal=sub, tax_amount=tax, discount_amount=discount, total=sub + tax - discount)


def total(invoice: Invoice) -> float:
    return summarize(invoice).total


def format_currency(value: float) -> str:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        numeric = 0.0
    sign = "-" if round(numeric, 2) < 0 else ""
    return f"{sign}${abs(numeric):,.2f}"


def format_quantity(value: float) -> str:
    numeric = float(value)
    if numeric.is_integer():
        return str(int(numeric))
    return f"{numeric:g}"
