from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

UNKNOWN_CLIENT = "Unknown Client"


@dataclass
class Client:
    """Billing contact. Only `name` is required; contact fields may be blank."""

    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    id: str = ""

    def contact_lines(self) -> list[str]:
        return [value for value in (self.email, self.phone, self.address) if value]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "Client":
        raw_id = data.get("id")
        return cls(
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            address=str(data.get("address") or ""),
            id="" if raw_id is None else str(raw_id),
        )


def client_labels(clients: Iterable[Client]) -> dict[str, str]:
    """
    Map a unique display label to each client id, in list order.

    Clients sharing a name are told apart by their email, then by a counter.
    """
    clients = list(clients)
    name_counts = Counter(client.name for client in clients)
    labels: dict[str, str] = {}
    for client in clients:
        base = client.name or UNKNOWN_CLIENT
        if name_counts[client.name] > 1 and client.email:
            base = f"{base} ({client.email})"
        label, n = base, 2
        while label in labels:
            label = f"{base} #{n}"
            n += 1
        labels[label] = client.id
    return labels
