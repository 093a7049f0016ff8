from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

DEFAULT_COMPANY = {
    "name": "Your Company Name",
    "email": "company@email.com",
    "phone": "(555) 123-4567",
    "address": "123 Business St, City, State 12345",
    "logo": "",
}


@dataclass
class CompanyProfile:
    """Issuer details printed at the top of every invoice."""

    name: str = DEFAULT_COMPANY["name"]
    email: str = DEFAULT_COMPANY["email"]
    phone: str = DEFAULT_COMPANY["phone"]
    address: str = DEFAULT_COMPANY["address"]
    logo: str = ""

    def contact_lines(self) -> list[str]:
        return [value for value in (self.email, self.phone, self.address) if value]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "logo": self.logo,
        }

    @classmethod
    def from_dict(cls, data: Mapping | None) -> "CompanyProfile":
        merged = dict(DEFAULT_COMPANY)
        for key, value in (data or {}).items():
            if key in merged and value is not None:
                merged[key] = str(value)
        return cls(**merged)
