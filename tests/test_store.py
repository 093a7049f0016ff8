import json
from datetime import date

import pytest

from invoice_pro.core.errors import EntityNotFoundError, InvoiceValidationError
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.core.models.invoice import STATUS_PAID, STATUS_UNPAID
from invoice_pro.core.services.storage import JsonStorage
from invoice_pro.core.services.store import InvoiceStore


def test_add_invoice_assigns_id_and_keeps_order(store, client_id, make_invoice):
    first = store.add_invoice(make_invoice(client_id=client_id, invoice_number="A"))
    second = store.add_invoice(make_invoice(client_id=client_id, invoice_number="B"))

    assert first.id and second.id and first.id != second.id
    assert [inv.invoice_number for inv in store.invoices] == ["A", "B"]


def test_rejected_save_leaves_store_untouched(store, make_invoice):
    with pytest.raises(InvoiceValidationError) as exc:
        store.add_invoice(make_invoice(client_id="missing"))
    assert exc.value.rule == "client"
    assert store.invoices == []


def test_update_keeps_id_and_position(store, client_id, make_invoice):
    a = store.add_invoice(make_invoice(client_id=client_id, invoice_number="A"))
    store.add_invoice(make_invoice(client_id=client_id, invoice_number="B"))

    edited = store.get_invoice(a.id).copy()
    edited.notes = "Thanks"
    edited.id = "ignored"
    store.update_invoice(a.id, edited)

    assert store.invoices[0].id == a.id
    assert store.invoices[0].notes == "Thanks"


def test_invalid_update_does_not_change_invoice(store, client_id, make_invoice):
    a = store.add_invoice(make_invoice(client_id=client_id))
    edited = store.get_invoice(a.id).copy()
    edited.due_date = None

    with pytest.raises(InvoiceValidationError):
        store.update_invoice(a.id, edited)

    assert store.get_invoice(a.id).due_date == date(2024, 3, 31)


def test_unknown_ids_raise(store):
    with pytest.raises(EntityNotFoundError):
        store.get_invoice("nope")
    with pytest.raises(KeyError):
        store.delete_client("nope")


def test_toggle_status(store, client_id, make_invoice):
    inv = store.add_invoice(make_invoice(client_id=client_id))
    assert store.toggle_status(inv.id) == STATUS_PAID
    assert store.toggle_status(inv.id) == STATUS_UNPAID


def test_duplicate_returns_unsaved_draft(store, client_id, make_invoice):
    inv = store.add_invoice(make_invoice(client_id=client_id, status=STATUS_PAID))

    draft = store.duplicate_invoice(inv.id, today=date(2025, 1, 9))

    assert draft.id == ""
    assert draft.invoice_number == "INV-2025-0002"
    assert draft.date == date(2025, 1, 9)
    assert draft.status == STATUS_UNPAID
    assert len(store.invoices) == 1
    draft.items[0].description = "changed"
    assert store.get_invoice(inv.id).items[0].description == "Design"


def test_new_invoice_draft(store):
    draft = store.new_invoice_draft(today=date(2024, 6, 1))
    assert draft.invoice_number == "INV-2024-0001"
    assert draft.due_date is None
    assert len(draft.items) == 1 and draft.items[0].quantity == 1


def test_deleting_client_keeps_invoices(store, client_id, make_invoice):
    inv = store.add_invoice(make_invoice(client_id=client_id))
    store.delete_client(client_id)

    assert store.get_invoice(inv.id).client_id == client_id
    assert store.resolve_client(inv) is None
    assert store.client_name(inv) == "Unknown Client"


def test_filter_by_search_and_status(store, client_id, make_invoice):
    other = store.add_client(Client(name="Globex"))
    a = store.add_invoice(make_invoice(client_id=client_id, invoice_number="INV-2024-0001"))
    store.add_invoice(make_invoice(client_id=other.id, invoice_number="INV-2024-0002"))
    store.toggle_status(a.id)

    assert [i.invoice_number for i in store.filter_invoices("globex")] == ["INV-2024-0002"]
    assert [i.invoice_number for i in store.filter_invoices("0001")] == ["INV-2024-0001"]
    assert [i.invoice_number for i in store.filter_invoices(status="paid")] == ["INV-2024-0001"]
    assert [i.invoice_number for i in store.filter_invoices("ACME", status="unpaid")] == []
    assert len(store.filter_invoices()) == 2


def test_stats(store, client_id, make_invoice):
    a = store.add_invoice(make_invoice(client_id=client_id, items=[("x", 1, 100)]))
    store.add_invoice(make_invoice(client_id=client_id, items=[("y", 1, 40)]))
    store.toggle_status(a.id)

    stats = store.stats()

    assert stats.total_revenue == pytest.approx(140)
    assert stats.paid_revenue == pytest.approx(100)
    assert stats.unpaid_revenue == pytest.approx(40)
    assert (stats.total_invoices, stats.paid_invoices, stats.unpaid_invoices) == (2, 1, 1)
    assert stats.total_clients == 1


def test_recent_invoices_newest_first(store, client_id, make_invoice):
    for n in range(7):
        store.add_invoice(make_invoice(client_id=client_id, invoice_number=f"N{n}"))
    assert [i.invoice_number for i in store.recent_invoices()] == ["N6", "N5", "N4", "N3", "N2"]


def test_every_mutation_is_persisted(tmp_path, sample_client, make_invoice):
    storage = JsonStorage(tmp_path)
    store = InvoiceStore(storage)
    client = store.add_client(sample_client)
    inv = store.add_invoice(make_invoice(client_id=client.id))
    store.toggle_status(inv.id)
    store.update_company(CompanyProfile(name="Studio", email="", phone="", address=""))

    reloaded = InvoiceStore(JsonStorage(tmp_path))

    assert reloaded.invoices == store.invoices
    assert reloaded.clients == store.clients
    assert reloaded.company.name == "Studio"
    assert reloaded.get_invoice(inv.id).status == STATUS_PAID


def test_empty_storage_gives_default_company(tmp_path):
    store = InvoiceStore(JsonStorage(tmp_path))
    assert store.invoices == [] and store.clients == []
    assert store.company == CompanyProfile()


@pytest.mark.parametrize("payload", ["5", "true", '{"a": 1}', '[1, "x", {"invoiceNumber": "ok", "items": 3}]'])
def test_malformed_invoice_file_does_not_break_startup(tmp_path, payload):
    (tmp_path / "invoices.json").write_text(payload, encoding="utf-8")
    (tmp_path / "clients.json").write_text("7", encoding="utf-8")

    store = InvoiceStore(JsonStorage(tmp_path))

    assert [inv.invoice_number for inv in store.invoices] == (["ok"] if payload.startswith("[") else [])
    assert store.clients == []


def test_duplicate_ids_on_disk_get_fresh_ids(tmp_path):
    rows = [{"id": "x", "invoiceNumber": "A"}, {"id": "x", "invoiceNumber": "B"}]
    (tmp_path / "invoices.json").write_text(json.dumps(rows), encoding="utf-8")

    store = InvoiceStore(JsonStorage(tmp_path))
    first, second = store.invoices

    assert first.id == "x" and second.id != "x"
    store.delete_invoice(second.id)
    assert [inv.invoice_number for inv in store.invoices] == ["A"]
