from invoice_pro.core.models.client import Client, client_labels
from invoice_pro.core.models.invoice import Invoice


def test_client_labels_keep_unique_names_plain():
    labels = client_labels([Client(name="Acme", id="1"), Client(name="Globex", id="2")])
    assert labels == {"Acme": "1", "Globex": "2"}


def test_client_labels_tell_namesakes_apart():
    clients = [
        Client(name="John Smith", email="john@a.test", id="1"),
        Client(name="John Smith", email="john@b.test", id="2"),
        Client(name="John Smith", id="3"),
        Client(name="John Smith", id="4"),
    ]

    labels = client_labels(clients)

    assert list(labels.values()) == ["1", "2", "3", "4"]
    assert labels["John Smith (john@b.test)"] == "2"
    assert labels["John Smith #2"] == "4"


def test_invoice_from_dict_is_lenient():
    invoice = Invoice.from_dict(
        {"id": 3, "clientId": 9, "items": None, "taxRate": "x", "discountType": "bogus", "status": "void"}
    )

    assert (invoice.id, invoice.client_id) == ("3", "9")
    assert invoice.items == []
    assert invoice.tax_rate == 0.0
    assert (invoice.discount_type, invoice.status) == ("percentage", "unpaid")
