import pytest

from invoice_pro.core.calculations.invoice_calculator import (
    format_currency,
    format_quantity,
    subtotal,
    summarize,
    total,
)
from invoice_pro.core.models.invoice import DISCOUNT_FIXED, DISCOUNT_PERCENTAGE
from invoice_pro.core.models.line_item import LineItem


def test_subtotal_of_no_items_is_zero():
    assert subtotal([]) == 0


def test_subtotal_ignores_item_order():
    items = [LineItem("a", 3, 19.99), LineItem("b", 1, 0.1), LineItem("c", 7, 2.5)]
    assert subtotal(items) == pytest.approx(subtotal(list(reversed(items))))


def test_subtotal_is_not_rounded():
    assert subtotal([LineItem("x", 3, 0.333)]) == pytest.approx(0.999)


def test_total_without_tax_or_discount_equals_subtotal(make_invoice):
    invoice = make_invoice(items=[("a", 2, 12.5), ("b", 1, 3.0)])
    assert total(invoice) == subtotal(invoice.items)


def test_full_percentage_discount_gives_zero(make_invoice):
    invoice = make_invoice(discount=100, discount_type=DISCOUNT_PERCENTAGE)
    assert total(invoice) == pytest.approx(0.0)


def test_tax_is_charged_on_undiscounted_subtotal(make_invoice):
    invoice = make_invoice(items=[("Design", 2, 50)], tax_rate=10, discount=5, discount_type=DISCOUNT_PERCENTAGE)

    totals = summarize(invoice)

    assert totals.subtotal == pytest.approx(100)
    assert totals.tax_amount == pytest.approx(10)
    assert totals.discount_amount == pytest.approx(5)
    assert totals.total == pytest.approx(105)


def test_fixed_discount_can_make_total_negative(make_invoice):
    invoice = make_invoice(items=[("Retainer", 1, 200)], discount=250, discount_type=DISCOUNT_FIXED)
    assert total(invoice) == pytest.approx(-50)


def test_fixed_discount_is_taken_as_amount(make_invoice):
    invoice = make_invoice(items=[("Retainer", 1, 200)], tax_rate=20, discount=15, discount_type=DISCOUNT_FIXED)
    assert summarize(invoice).discount_amount == 15
    assert total(invoice) == pytest.approx(225)


def test_format_currency_two_decimals():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(-50) == "-$50.00"
    assert format_currency(-0.001) == "$0.00"


def test_format_quantity():
    assert format_quantity(3) == "3"
    assert format_quantity(2.0) == "2"
    assert format_quantity(2.5) == "2.5"
