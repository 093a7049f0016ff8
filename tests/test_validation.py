import pytest

from invoice_pro.core.errors import ClientValidationError, InvoiceValidationError
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.line_item import LineItem
from invoice_pro.core.services.validation import validate_client, validate_invoice


@pytest.fixture
def clients():
    return [Client(name="Acme", id="c1")]


def test_valid_invoice_passes(make_invoice, clients):
    validate_invoice(make_invoice(client_id="c1"), clients)


def test_rejects_unknown_client(make_invoice, clients):
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(make_invoice(client_id="nope"), clients)
    assert exc.value.rule == "client"


def test_rejects_missing_client(make_invoice, clients):
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(make_invoice(client_id=""), clients)
    assert exc.value.rule == "client"


def test_rejects_blank_number(make_invoice, clients):
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(make_invoice(client_id="c1", invoice_number="  "), clients)
    assert exc.value.rule == "invoice_number"


def test_rejects_missing_due_date(make_invoice, clients):
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(make_invoice(client_id="c1", due_date=None), clients)
    assert exc.value.rule == "due_date"


def test_rejects_items_without_description(make_invoice, clients):
    invoice = make_invoice(client_id="c1", items=[("", 1, 10)])
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(invoice, clients)
    assert exc.value.rule == "items"

    invoice.items = []
    with pytest.raises(InvoiceValidationError):
        validate_invoice(invoice, clients)


def test_any_described_item_is_enough(make_invoice, clients):
    invoice = make_invoice(client_id="c1", items=[("", 1, 10)])
    invoice.items.append(LineItem("Hosting", 1, 5))
    validate_invoice(invoice, clients)


def test_first_failing_rule_is_reported(make_invoice, clients):
    invoice = make_invoice(client_id="", invoice_number="", due_date=None)
    with pytest.raises(InvoiceValidationError) as exc:
        validate_invoice(invoice, clients)
    assert exc.value.rule == "client"
    assert exc.value.message == "Please select a client"


def test_client_name_required():
    with pytest.raises(ClientValidationError) as exc:
        validate_client(Client(name=" "))
    assert exc.value.rule == "name"
