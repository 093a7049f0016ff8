import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_client():
    from invoice_pro.core.models.client import Client

    return Client(name="Acme Corp", email="billing@acme.test", phone="", address="1 Main St")


@pytest.fixture
def make_invoice():
    from invoice_pro.core.models.invoice import Invoice
    from invoice_pro.core.models.line_item import LineItem

    def factory(items=None, **overrides):
        data = dict(
            invoice_number="INV-2024-0001",
            date=date(2024, 3, 1),
            due_date=date(2024, 3, 31),
            client_id="",
            items=[LineItem(description, qty, rate) for description, qty, rate in (items or [("Design", 2, 50.0)])],
        )
        data.update(overrides)
        return Invoice(**data)

    return factory


@pytest.fixture
def store(sample_client):
    """In-memory store holding one client."""
    from invoice_pro.core.services.store import InvoiceStore

    s = InvoiceStore()
    s.add_client(sample_client)
    return s


@pytest.fixture
def client_id(store):
    return store.clients[0].id
