from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional

from invoice_pro.core.models.line_item import LineItem, to_float

DISCOUNT_PERCENTAGE = "percentage"
DISCOUNT_FIXED = "fixed"
DISCOUNT_TYPES = (DISCOUNT_PERCENTAGE, DISCOUNT_FIXED)

STATUS_PAID = "paid"
STATUS_UNPAID = "unpaid"
STATUSES = (STATUS_PAID, STATUS_UNPAID)


def _parse_date(value) -> Optional[date]:
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _format_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


@dataclass
class Invoice:
    """
    Invoice header plus its ordered line items.
    Totals are never stored; see `invoice_calculator.summarize`.
    """

    invoice_number: str
    date: Optional[date]
    due_date: Optional[date]
    client_id: str
    items: List[LineItem] = field(default_factory=list)
    tax_rate: float = 0.0
    discount: float = 0.0
    discount_type: str = DISCOUNT_PERCENTAGE
    notes: str = ""
    status: str = STATUS_UNPAID
    id: str = ""

    @property
    def is_paid(self) -> bool:
        return self.status == STATUS_PAID

    @classmethod
    def draft(cls, invoice_number: str, today: date | None = None) -> "Invoice":
        """Blank invoice as shown in a fresh form: one empty row, no due date."""
        return cls(
            invoice_number=invoice_number,
            date=today or date.today(),
            due_date=None,
            client_id="",
            items=[LineItem()],
        )

    def copy(self) -> "Invoice":
        return deepcopy(self)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "invoiceNumber": self.invoice_number,
            "date": _format_date(self.date),
            "dueDate": _format_date(self.due_date),
            "clientId": self.client_id,
            "items": [item.to_dict() for item in self.items],
            "taxRate": self.tax_rate,
            "discount": self.discount,
            "discountType": self.discount_type,
            "notes": self.notes,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "Invoice":
        discount_type = str(data.get("discountType") or DISCOUNT_PERCENTAGE)
        if discount_type not in DISCOUNT_TYPES:
            discount_type = DISCOUNT_PERCENTAGE
        status = str(data.get("status") or STATUS_UNPAID)
        if status not in STATUSES:
            status = STATUS_UNPAID
        raw_id = data.get("id")
        raw_client = data.get("clientId")
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raw_items = []
        items = [LineItem.from_dict(item) for item in raw_items if isinstance(item, Mapping)]
        return cls(
            invoice_number=str(data.get("invoiceNumber") or ""),
            date=_parse_date(data.get("date")),
            due_date=_parse_date(data.get("dueDate")),
            client_id="" if raw_client is None else str(raw_client),
            items=items,
            tax_rate=to_float(data.get("taxRate"), 0.0),
            discount=to_float(data.get("discount"), 0.0),
            discount_type=discount_type,
            notes=str(data.get("notes") or ""),
            status=status,
            id="" if raw_id is None else str(raw_id),
        )
