from __future__ import annotations

import tkinter as tk
from datetime import date
from typing import Callable, Optional, Sequence

import customtkinter as ctk

from invoice_pro.core.calculations.invoice_calculator import format_currency, format_quantity, summarize
from invoice_pro.core.models.client import Client, client_labels
from invoice_pro.core.models.invoice import DISCOUNT_FIXED, DISCOUNT_PERCENTAGE, Invoice
from invoice_pro.core.models.line_item import LineItem, to_float
from invoice_pro.ui.styles import theme


def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        return None


class _ItemRow:
    """Entry widgets for one line item, bound to StringVars."""

    def __init__(self, master: tk.Misc, row: int, item: LineItem, on_change, on_remove):
        self.description = tk.StringVar(value=item.description)
        self.quantity = tk.StringVar(value=format_quantity(item.quantity))
        self.rate = tk.StringVar(value=f"{item.rate:g}")
        self.amount = tk.StringVar()
        for var in (self.description, self.quantity, self.rate):
            var.trace_add("write", lambda *_: on_change())

        self.widgets = [
            ctk.CTkEntry(master, textvariable=self.description, placeholder_text="Description"),
            ctk.CTkEntry(master, textvariable=self.quantity, width=70),
            ctk.CTkEntry(master, textvariable=self.rate, width=90),
            ctk.CTkLabel(master, textvariable=self.amount, width=90, anchor="e"),
            ctk.CTkButton(master, text="x", width=28, command=lambda: on_remove(self)),
        ]
        for col, widget in enumerate(self.widgets):
            widget.grid(row=row, column=col, sticky="ew", padx=2, pady=2)

    def item(self) -> LineItem:
        return LineItem(
            description=self.description.get().strip(),
            quantity=max(0.0, to_float(self.quantity.get(), 0.0)),
            rate=max(0.0, to_float(self.rate.get(), 0.0)),
        )

    def destroy(self) -> None:
        for widget in self.widgets:
            widget.destroy()


class InvoiceDialog(ctk.CTkToplevel):
    """
    Create/edit form. `on_save` receives the edited invoice and returns True
    when it was accepted, which closes the dialog.
    """

    def __init__(
        self,
        master: tk.Misc,
        invoice: Invoice,
        clients: Sequence[Client],
        on_save: Callable[[Invoice], bool],
        title: str = "Invoice",
    ):
        super().__init__(master)
        self.title(title)
        self.transient(master)
        self.grab_set()
        self.geometry("760x640")
        self.minsize(680, 560)
        self._invoice = invoice.copy()
        self._client_ids = client_labels(clients)
        self._on_save = on_save
        self._rows: list[_ItemRow] = []

        self.number = tk.StringVar(value=invoice.invoice_number)
        self.issue_date = tk.StringVar(value=invoice.date.isoformat() if invoice.date else "")
        self.due_date = tk.StringVar(value=invoice.due_date.isoformat() if invoice.due_date else "")
        self.client_choice = tk.StringVar(value=self._client_label(invoice.client_id))
        self.tax_rate = tk.StringVar(value=f"{invoice.tax_rate:g}")
        self.discount = tk.StringVar(value=f"{invoice.discount:g}")
        self.discount_type = tk.StringVar(value=invoice.discount_type)
        self.totals_text = tk.StringVar()
        for var in (self.tax_rate, self.discount, self.discount_type):
            var.trace_add("write", lambda *_: self._refresh_totals())

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.pack(fill="both", expand=True, padx=12, pady=12)
        body.columnconfigure(1, weight=1)
        body.columnconfigure(3, weight=1)

        ctk.CTkLabel(body, text="Invoice #").grid(row=0, column=0, sticky="w")
        ctk.CTkEntry(body, textvariable=self.number).grid(row=0, column=1, sticky="ew", padx=(4, 12))
        ctk.CTkLabel(body, text="Client").grid(row=0, column=2, sticky="w")
        client_menu = ctk.CTkOptionMenu(
            body,
            variable=self.client_choice,
            values=list(self._client_ids) or ["-"],
        )
        client_menu.grid(row=0, column=3, sticky="ew", padx=(4, 0))

        ctk.CTkLabel(body, text="Date").grid(row=1, column=0, sticky="w", pady=(6, 0))
        ctk.CTkEntry(body, textvariable=self.issue_date, placeholder_text="YYYY-MM-DD").grid(
            row=1, column=1, sticky="ew", padx=(4, 12), pady=(6, 0)
        )
        ctk.CTkLabel(body, text="Due date").grid(row=1, column=2, sticky="w", pady=(6, 0))
        ctk.CTkEntry(body, textvariable=self.due_date, placeholder_text="YYYY-MM-DD").grid(
            row=1, column=3, sticky="ew", padx=(4, 0), pady=(6, 0)
        )

        ctk.CTkLabel(body, text="Items", font=("Segoe UI", 12, "bold")).grid(
            row=2, column=0, columnspan=4, sticky="w", pady=(12, 4)
        )
        self._items_frame = ctk.CTkScrollableFrame(body, height=220)
        self._items_frame.grid(row=3, column=0, columnspan=4, sticky="nsew")
        self._items_frame.columnconfigure(0, weight=1)
        body.rowconfigure(3, weight=1)
        for col, text in enumerate(("Description", "Qty", "Rate", "Amount")):
            ctk.CTkLabel(self._items_frame, text=text, font=("Segoe UI", 10, "bold")).grid(row=0, column=col, sticky="w")
        for item in invoice.items or [LineItem()]:
            self._add_row(item)
        ctk.CTkButton(body, text="+ Add item", command=lambda: self._add_row(LineItem())).grid(
            row=4, column=0, sticky="w", pady=(6, 0)
        )

        ctk.CTkLabel(body, text="Tax (%)").grid(row=5, column=0, sticky="w", pady=(10, 0))
        ctk.CTkEntry(body, textvariable=self.tax_rate, width=90).grid(row=5, column=1, sticky="w", padx=(4, 12), pady=(10, 0))
        ctk.CTkLabel(body, text="Discount").grid(row=5, column=2, sticky="w", pady=(10, 0))
        discount_box = ctk.CTkFrame(body, fg_color="transparent")
        discount_box.grid(row=5, column=3, sticky="w", padx=(4, 0), pady=(10, 0))
        ctk.CTkEntry(discount_box, textvariable=self.discount, width=90).pack(side="left")
        ctk.CTkOptionMenu(
            discount_box,
            variable=self.discount_type,
            values=[DISCOUNT_PERCENTAGE, DISCOUNT_FIXED],
            width=120,
        ).pack(side="left", padx=(6, 0))

        ctk.CTkLabel(body, text="Notes").grid(row=6, column=0, sticky="nw", pady=(10, 0))
        self._notes = ctk.CTkTextbox(body, height=70)
        self._notes.grid(row=6, column=1, columnspan=3, sticky="ew", padx=(4, 0), pady=(10, 0))
        self._notes.insert("1.0", invoice.notes)

        ctk.CTkLabel(body, textvariable=self.totals_text, justify="right", font=("Segoe UI", 11, "bold")).grid(
            row=7, column=0, columnspan=4, sticky="e", pady=(10, 0)
        )

        btns = ctk.CTkFrame(self, fg_color="transparent")
        btns.pack(fill="x", padx=12, pady=(0, 12))
        ctk.CTkButton(btns, text="Cancel", command=self.destroy).pack(side="right", padx=(6, 0))
        ctk.CTkButton(btns, text="Save", command=self._handle_save, **theme.accent_button_kwargs()).pack(side="right")
        self._refresh_totals()

    def _client_label(self, client_id: str) -> str:
        for label, known_id in self._client_ids.items():
            if known_id == client_id:
                return label
        return "Select a client"

    def _selected_client_id(self) -> str:
        return self._client_ids.get(self.client_choice.get(), "")

    def _add_row(self, item: LineItem) -> None:
        row = _ItemRow(self._items_frame, len(self._rows) + 1, item, self._refresh_totals, self._remove_row)
        self._rows.append(row)
        self._refresh_totals()

    def _remove_row(self, row: _ItemRow) -> None:
        row.destroy()
        self._rows.remove(row)
        self._refresh_totals()

    def build_invoice(self) -> Invoice:
        invoice = self._invoice.copy()
        invoice.invoice_number = self.number.get().strip()
        invoice.date = _parse_date(self.issue_date.get()) or invoice.date
        invoice.due_date = _parse_date(self.due_date.get())
        invoice.client_id = self._selected_client_id()
        invoice.items = [row.item() for row in self._rows]
        invoice.tax_rate = max(0.0, to_float(self.tax_rate.get(), 0.0))
        invoice.discount = max(0.0, to_float(self.discount.get(), 0.0))
        invoice.discount_type = self.discount_type.get()
        invoice.notes = self._notes.get("1.0", "end").strip() if hasattr(self, "_notes") else invoice.notes
        return invoice

    def _refresh_totals(self) -> None:
        for row in self._rows:
            row.amount.set(format_currency(row.item().amount))
        totals = summarize(self.build_invoice())
        self.totals_text.set(
            f"Subtotal {format_currency(totals.subtotal)}   "
            f"Tax {format_currency(totals.tax_amount)}   "
            f"Discount -{format_currency(totals.discount_amount)}   "
            f"Total {format_currency(totals.total)}"
        )

    def _handle_save(self) -> None:
        if self._on_save(self.build_invoice()):
            self.destroy()
