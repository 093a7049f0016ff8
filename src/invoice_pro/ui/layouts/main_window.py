import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

import customtkinter as ctk

from invoice_pro.core.calculations.invoice_calculator import format_currency, total
from invoice_pro.core.models.invoice import STATUSES
from invoice_pro.core.services.store import InvoiceStore
from invoice_pro.ui.components.company_form import CompanyForm
from invoice_pro.ui.controllers.actions_controller import ActionsController
from invoice_pro.ui.styles import theme

INVOICE_COLUMNS = (
    ("number", "Invoice #", 130),
    ("client", "Client", 200),
    ("date", "Date", 100),
    ("due", "Due", 100),
    ("total", "Total", 110),
    ("status", "Status", 80),
)
CLIENT_COLUMNS = (
    ("name", "Name", 200),
    ("email", "Email", 200),
    ("phone", "Phone", 130),
    ("address", "Address", 260),
)
STAT_LABELS = (
    ("total_revenue", "Total revenue"),
    ("paid_revenue", "Paid"),
    ("unpaid_revenue", "Outstanding"),
    ("total_invoices", "Invoices"),
    ("paid_invoices", "Paid invoices"),
    ("unpaid_invoices", "Unpaid invoices"),
    ("total_clients", "Clients"),
)


def _tree(master: tk.Misc, columns, palette: dict | None = None) -> ttk.Treeview:
    tree = ttk.Treeview(master, columns=[c[0] for c in columns], show="headings", height=14)
    for code, heading, width in columns:
        tree.heading(code, text=heading)
        tree.column(code, width=width, anchor="e" if code == "total" else "w")
    if palette:
        for status in STATUSES:
            tree.tag_configure(status, foreground=palette[status])
    return tree


class MainWindow(ctk.CTk):
    def __init__(self, store: InvoiceStore):
        super().__init__()
        self._palette = theme.apply_theme(self, "light")
        self.title("InvoicePro")
        self.geometry("1000x680")
        self.minsize(860, 560)
        self._store = store
        self._actions = ActionsController(self, store)

        self._search = tk.StringVar()
        self._status_filter = tk.StringVar(value="all")
        self._search.trace_add("write", lambda *_: self._refresh_invoices())

        tabs = ctk.CTkTabview(self)
        tabs.pack(fill="both", expand=True, padx=12, pady=12)
        self._build_dashboard(tabs.add("Dashboard"))
        self._build_invoices(tabs.add("Invoices"))
        self._build_clients(tabs.add("Clients"))
        self._build_settings(tabs.add("Settings"))
        self.refresh()

    # --- Layout ---
    def _build_dashboard(self, tab: ctk.CTkFrame) -> None:
        cards = ctk.CTkFrame(tab, fg_color="transparent")
        cards.pack(fill="x", pady=(0, 12))
        self._stat_vars: dict[str, tk.StringVar] = {}
        for col, (code, label) in enumerate(STAT_LABELS):
            card = ctk.CTkFrame(cards, fg_color=self._palette["panel"], corner_radius=8)
            card.grid(row=0, column=col, sticky="nsew", padx=4)
            cards.columnconfigure(col, weight=1)
            ctk.CTkLabel(card, text=label, text_color=self._palette["muted"]).pack(anchor="w", padx=8, pady=(6, 0))
            var = tk.StringVar()
            ctk.CTkLabel(card, textvariable=var, font=("Segoe UI", 14, "bold")).pack(anchor="w", padx=8, pady=(0, 6))
            self._stat_vars[code] = var

        ctk.CTkLabel(tab, text="Recent invoices", font=("Segoe UI", 12, "bold")).pack(anchor="w")
        self._recent_tree = _tree(tab, INVOICE_COLUMNS, self._palette)
        self._recent_tree.pack(fill="both", expand=True)

    def _build_invoices(self, tab: ctk.CTkFrame) -> None:
        bar = ctk.CTkFrame(tab, fg_color="transparent")
        bar.pack(fill="x", pady=(0, 8))
        ctk.CTkEntry(bar, textvariable=self._search, placeholder_text="Search number or client", width=260).pack(side="left")
        ctk.CTkOptionMenu(
            bar,
            variable=self._status_filter,
            values=["all", *STATUSES],
            command=lambda _: self._refresh_invoices(),
            width=110,
        ).pack(side="left", padx=6)
        ctk.CTkButton(bar, text="+ New invoice", command=self._actions.new_invoice, **theme.accent_button_kwargs()).pack(
            side="right"
        )

        self._invoice_tree = _tree(tab, INVOICE_COLUMNS, self._palette)
        self._invoice_tree.pack(fill="both", expand=True)
        self._invoice_tree.bind("<Double-1>", lambda _: self._with_invoice(self._actions.edit_invoice))

        actions = ctk.CTkFrame(tab, fg_color="transparent")
        actions.pack(fill="x", pady=(8, 0))
        for text, handler in (
            ("Edit", self._actions.edit_invoice),
            ("Duplicate", self._actions.duplicate_invoice),
            ("Paid / Unpaid", self._actions.toggle_status),
            ("Preview", self._actions.preview_invoice),
            ("Export PDF", self._actions.export_pdf),
            ("Delete", self._actions.delete_invoice),
        ):
            ctk.CTkButton(actions, text=text, width=110, command=lambda h=handler: self._with_invoice(h)).pack(
                side="left", padx=(0, 6)
            )

    def _build_clients(self, tab: ctk.CTkFrame) -> None:
        bar = ctk.CTkFrame(tab, fg_color="transparent")
        bar.pack(fill="x", pady=(0, 8))
        ctk.CTkButton(bar, text="+ New client", command=self._actions.new_client, **theme.accent_button_kwargs()).pack(
            side="right"
        )
        self._client_tree = _tree(tab, CLIENT_COLUMNS)
        self._client_tree.pack(fill="both", expand=True)
        self._client_tree.bind("<Double-1>", lambda _: self._with_client(self._actions.edit_client))

        actions = ctk.CTkFrame(tab, fg_color="transparent")
        actions.pack(fill="x", pady=(8, 0))
        ctk.CTkButton(actions, text="Edit", width=110, command=lambda: self._with_client(self._actions.edit_client)).pack(
            side="left", padx=(0, 6)
        )
        ctk.CTkButton(
            actions, text="Delete", width=110, command=lambda: self._with_client(self._actions.delete_client)
        ).pack(side="left")

    def _build_settings(self, tab: ctk.CTkFrame) -> None:
        self._company_form = CompanyForm(tab, self._store.company, self._actions.save_company)
        self._company_form.pack(fill="x")

        pdf = ctk.CTkFrame(tab, fg_color=self._palette["panel"], corner_radius=8)
        pdf.pack(fill="x", pady=(12, 0))
        ctk.CTkLabel(pdf, text="PDF", font=("Segoe UI", 12, "bold")).pack(anchor="w", padx=8, pady=(8, 4))
        self._include_qr = tk.BooleanVar(value=self._actions.include_qr)
        ctk.CTkCheckBox(
            pdf,
            text="Print payment QR code",
            variable=self._include_qr,
            command=lambda: setattr(self._actions, "include_qr", self._include_qr.get()),
        ).pack(anchor="w", padx=8, pady=(0, 8))

        data = ctk.CTkFrame(tab, fg_color=self._palette["panel"], corner_radius=8)
        data.pack(fill="x", pady=(12, 0))
        ctk.CTkLabel(data, text="Data", font=("Segoe UI", 12, "bold")).pack(anchor="w", padx=8, pady=(8, 4))
        ctk.CTkButton(data, text="Export backup", command=self._actions.export_backup).pack(side="left", padx=8, pady=8)
        ctk.CTkButton(data, text="Import backup", command=self._actions.import_backup).pack(side="left", pady=8)

    # --- Selection helpers ---
    @staticmethod
    def _selected(tree: ttk.Treeview) -> Optional[str]:
        selection = tree.selection()
        return selection[0] if selection else None

    def _with_invoice(self, handler: Callable[[str], None]) -> None:
        invoice_id = self._selected(self._invoice_tree)
        if invoice_id:
            handler(invoice_id)

    def _with_client(self, handler: Callable[[str], None]) -> None:
        client_id = self._selected(self._client_tree)
        if client_id:
            handler(client_id)

    # --- Refresh ---
    def refresh(self) -> None:
        self._refresh_stats()
        self._refresh_invoices()
        self._refresh_clients()
        self._company_form.set_data(self._store.company)

    def _invoice_values(self, invoice) -> tuple:
        return (
            invoice.invoice_number,
            self._store.client_name(invoice),
            invoice.date.isoformat() if invoice.date else "",
            invoice.due_date.isoformat() if invoice.due_date else "",
            format_currency(total(invoice)),
            invoice.status,
        )

    def _refresh_stats(self) -> None:
        stats = self._store.stats()
        for code, var in self._stat_vars.items():
            value = getattr(stats, code)
            var.set(format_currency(value) if isinstance(value, float) else str(value))
        self._recent_tree.delete(*self._recent_tree.get_children())
        for invoice in self._store.recent_invoices():
            self._recent_tree.insert("", tk.END, iid=invoice.id, values=self._invoice_values(invoice), tags=(invoice.status,))

    def _refresh_invoices(self) -> None:
        self._invoice_tree.delete(*self._invoice_tree.get_children())
        for invoice in self._store.filter_invoices(self._search.get(), self._status_filter.get()):
            self._invoice_tree.insert("", tk.END, iid=invoice.id, values=self._invoice_values(invoice), tags=(invoice.status,))

    def _refresh_clients(self) -> None:
        self._client_tree.delete(*self._client_tree.get_children())
        for client in self._store.clients:
            self._client_tree.insert("", tk.END, iid=client.id, values=(client.name, client.email, client.phone, client.address))
