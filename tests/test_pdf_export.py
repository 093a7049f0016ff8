import logging

import pytest

from invoice_pro.core.errors import ClientNotFoundError
from invoice_pro.core.models.client import Client
from invoice_pro.utils.pdf.core.drawing import draw_ops
from invoice_pro.utils.pdf.core.ops import TextRun
from invoice_pro.utils.pdf.exports.invoice import export_invoice_pdf, pdf_filename


def _read_pdf(path):
    data = path.read_bytes()
    assert data.startswith(b"%PDF")
    startxref = int(data.split(b"startxref\n")[1].split(b"\n")[0])
    assert data[startxref : startxref + 4] == b"xref"
    return data


def test_export_writes_named_pdf(tmp_path, store, client_id, make_invoice):
    invoice = store.add_invoice(make_invoice(client_id=client_id, tax_rate=10))

    path = export_invoice_pdf(store, invoice.id, tmp_path)

    assert path == tmp_path / "INV-2024-0001.pdf"
    data = _read_pdf(path)
    assert b"INV-2024-0001" in data
    assert b"$100.00" in data
    assert b"Tax \\(10%\\):" in data
    assert b"Acme Corp" in data


def test_export_with_qr(tmp_path, store, client_id, make_invoice):
    invoice = store.add_invoice(make_invoice(client_id=client_id))
    plain = _read_pdf(export_invoice_pdf(store, invoice.id, tmp_path / "a"))
    with_qr = _read_pdf(export_invoice_pdf(store, invoice.id, tmp_path / "b", include_qr=True))
    assert len(with_qr) > len(plain)


def test_export_refuses_missing_client(tmp_path, store, client_id, make_invoice):
    invoice = store.add_invoice(make_invoice(client_id=client_id))
    store.delete_client(client_id)

    with pytest.raises(ClientNotFoundError):
        export_invoice_pdf(store, invoice.id, tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_pdf_filename(make_invoice):
    assert pdf_filename(make_invoice(invoice_number="INV-2025-0042")) == "INV-2025-0042.pdf"


def test_draw_ops_flips_y_and_keeps_latin_text():
    stream = draw_ops([TextRun("Café", 57, 100, 10)])
    assert "(Café) Tj" in stream
    assert "57 742 Td" in stream


def test_draw_ops_folds_and_reports_unprintable_text(caplog):
    with caplog.at_level(logging.WARNING):
        stream = draw_ops([TextRun("Dvořák", 57, 100, 10), TextRun("Жук", 57, 120, 10)])

    assert "(Dvorák) Tj" in stream
    assert "() Tj" in stream
    assert "Жук" in caplog.text
    assert "Dvořák" not in caplog.text


def test_draw_ops_rejects_unknown_op():
    with pytest.raises(TypeError):
        draw_ops(["text"])


def test_latin_names_survive_in_pdf_bytes(tmp_path, store, make_invoice):
    client = store.add_client(Client(name="Müller GmbH"))
    invoice = store.add_invoice(make_invoice(client_id=client.id))

    data = export_invoice_pdf(store, invoice.id, tmp_path).read_bytes()

    assert "Müller GmbH".encode("cp1252") in data


def test_export_uses_chosen_filename(tmp_path, store, client_id, make_invoice):
    invoice = store.add_invoice(make_invoice(client_id=client_id))

    path = export_invoice_pdf(store, invoice.id, tmp_path, filename="custom.pdf")

    assert path == tmp_path / "custom.pdf"
    assert [p.name for p in tmp_path.iterdir()] == ["custom.pdf"]


@pytest.mark.parametrize(
    "number, expected",
    [("INV/2024/7", "INV-2024-7.pdf"), ("a\\b:c", "a-b-c.pdf"), ("  ", "invoice.pdf")],
)
def test_pdf_filename_replaces_path_separators(make_invoice, number, expected):
    assert pdf_filename(make_invoice(invoice_number=number)) == expected


def test_slash_in_number_does_not_create_directories(tmp_path, store, client_id, make_invoice):
    invoice = store.add_invoice(make_invoice(client_id=client_id, invoice_number="INV/2024/7"))

    path = export_invoice_pdf(store, invoice.id, tmp_path)

    assert path == tmp_path / "INV-2024-7.pdf"
    assert all(p.is_file() for p in tmp_path.iterdir())
