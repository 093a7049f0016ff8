from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


def to_float(value, default: float) -> float:
    if value in (None, ""):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class LineItem:
    """One billable row of an invoice."""

    description: str = ""
    quantity: float = 1.0
    rate: float = 0.0

    @property
    def amount(self) -> float:
        return self.quantity * self.rate

    def to_dict(self) -> dict:
        return {"description": self.description, "quantity": self.quantity, "rate": self.rate}

    @classmethod
    def from_dict(cls, data: Mapping) -> "LineItem":
        return cls(
            description=str(data.get("description") or ""),
            quantity=to_float(data.get("quantity"), 0.0),
            rate=to_float(data.get("rate"), 0.0),
        )
