from __future__ import annotations

from datetime import date

PREFIX = "INV"


def next_number(existing_count: int, year: int | None = None) -> str:
    """
    Build ``INV-{year}-{seq}`` where seq is ``existing_count + 1`` padded to 4 digits.

    The sequence follows the number of stored invoices, not the highest number
    issued so far, so deleting an invoice can lead to a repeated number.
    """
    year = year or date.today().year
    return f"{PREFIX}-{year}-{existing_count + 1:04d}"
