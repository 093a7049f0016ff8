from __future__ import annotations

from pathlib import Path
from tkinter import filedialog, messagebox

from invoice_pro.core.errors import BackupImportError, EntityNotFoundError, ValidationError
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.core.models.invoice import Invoice
from invoice_pro.core.services import backup
from invoice_pro.core.services.store import InvoiceStore
from invoice_pro.ui.components.client_dialog import ClientDialog
from invoice_pro.ui.components.invoice_dialog import InvoiceDialog
from invoice_pro.ui.components.preview_dialog import PreviewDialog
from invoice_pro.utils.logs import logger
from invoice_pro.utils.pdf.exports.invoice import export_invoice_pdf, pdf_filename
from invoice_pro.utils.pdf.renderers.document_renderer import render_document

log = logger(__file__)


class ActionsController:
    """
    Handles the user actions of the main window: invoice and client CRUD,
    preview, PDF export and backup import/export.
    Keeps a reference to the window only to refresh its views.
    """

    def __init__(self, window, store: InvoiceStore) -> None:
        self.w = window
        self.store = store
        self.include_qr = False

    # --- Invoices ---
    def new_invoice(self) -> None:
        if not self.store.clients:
            messagebox.showwarning("New invoice", "Add a client first.")
            return
        InvoiceDialog(self.w, self.store.new_invoice_draft(), self.store.clients, self._create_invoice, title="New Invoice")

    def edit_invoice(self, invoice_id: str) -> None:
        invoice = self.store.get_invoice(invoice_id)
        InvoiceDialog(
            self.w,
            invoice,
            self.store.clients,
            lambda edited: self._update_invoice(invoice_id, edited),
            title=f"Edit {invoice.invoice_number}",
        )

    def duplicate_invoice(self, invoice_id: str) -> None:
        draft = self.store.duplicate_invoice(invoice_id)
        InvoiceDialog(self.w, draft, self.store.clients, self._create_invoice, title="Duplicate Invoice")

    def _create_invoice(self, invoice: Invoice) -> bool:
        try:
            self.store.add_invoice(invoice)
        except ValidationError as exc:
            log.warning("Invoice rejected (%s): %s", exc.rule, exc.message)
            messagebox.showerror("Invoice", exc.message)
            return False
        self.w.refresh()
        return True

    def _update_invoice(self, invoice_id: str, invoice: Invoice) -> bool:
        try:
            self.store.update_invoice(invoice_id, invoice)
        except ValidationError as exc:
            log.warning("Invoice update rejected (%s): %s", exc.rule, exc.message)
            messagebox.showerror("Invoice", exc.message)
            return False
        self.w.refresh()
        return True

    def delete_invoice(self, invoice_id: str) -> None:
        if not messagebox.askyesno("Delete invoice", "Are you sure you want to delete this invoice?"):
            return
        self.store.delete_invoice(invoice_id)
        self.w.refresh()

    def toggle_status(self, invoice_id: str) -> None:
        self.store.toggle_status(invoice_id)
        self.w.refresh()

    def preview_invoice(self, invoice_id: str) -> None:
        invoice = self.store.get_invoice(invoice_id)
        ops = render_document(
            invoice, self.store.resolve_client(invoice), self.store.company, include_qr=self.include_qr
        )
        PreviewDialog(self.w, invoice.invoice_number, ops, on_export=lambda: self.export_pdf(invoice_id))

    def export_pdf(self, invoice_id: str) -> None:
        invoice = self.store.get_invoice(invoice_id)
        path = filedialog.asksaveasfilename(
            defaultextension=".pdf",
            filetypes=[("PDF", "*.pdf"), ("All files", "*.*")],
            title="Export PDF",
            initialfile=pdf_filename(invoice),
        )
        if not path:
            return
        target = Path(path)
        try:
            written = export_invoice_pdf(
                self.store, invoice_id, target.parent, include_qr=self.include_qr, filename=target.name
            )
        except EntityNotFoundError as exc:
            messagebox.showerror("Export PDF", f"Export failed: {exc}")
            return
        except OSError as exc:
            messagebox.showerror("Export PDF", f"Export failed:\n{exc}")
            return
        messagebox.showinfo("Export PDF", f"PDF saved:\n{written}")

    # --- Clients ---
    def new_client(self) -> None:
        ClientDialog(self.w, None, self._create_client)

    def edit_client(self, client_id: str) -> None:
        client = self.store.get_client(client_id)
        ClientDialog(self.w, client, lambda edited: self._update_client(client_id, edited))

    def _create_client(self, client: Client) -> bool:
        try:
            self.store.add_client(client)
        except ValidationError as exc:
            messagebox.showerror("Client", exc.message)
            return False
        self.w.refresh()
        return True

    def _update_client(self, client_id: str, client: Client) -> bool:
        try:
            self.store.update_client(client_id, client)
        except ValidationError as exc:
            messagebox.showerror("Client", exc.message)
            return False
        self.w.refresh()
        return True

    def delete_client(self, client_id: str) -> None:
        if not messagebox.askyesno("Delete client", "Are you sure you want to delete this client?"):
            return
        self.store.delete_client(client_id)
        self.w.refresh()

    # --- Company + backup ---
    def save_company(self, profile: CompanyProfile) -> None:
        self.store.update_company(profile)
        messagebox.showinfo("Company", "Company profile saved.")

    def export_backup(self) -> None:
        directory = filedialog.askdirectory(title="Export backup to")
        if not directory:
            return
        try:
            path = backup.export_backup(self.store, Path(directory))
        except OSError as exc:
            messagebox.showerror("Export backup", f"Export failed:\n{exc}")
            return
        messagebox.showinfo("Export backup", f"Data exported:\n{path}")

    def import_backup(self) -> None:
        path = filedialog.askopenfilename(
            filetypes=[("JSON", "*.json"), ("All files", "*.*")],
            title="Import backup",
        )
        if not path:
            return
        try:
            snapshot = backup.read_backup_file(Path(path))
        except BackupImportError as exc:
            log.error("Backup import rejected: %s", exc)
            messagebox.showerror("Import backup", "Invalid backup file")
            return
        if not messagebox.askyesno("Import backup", "This will replace all current data. Continue?"):
            return
        backup.apply_snapshot(self.store, snapshot)
        self.w.refresh()
        messagebox.showinfo("Import backup", "Data imported successfully")
