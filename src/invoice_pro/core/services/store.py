from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from invoice_pro.core.calculations.invoice_calculator import total
from invoice_pro.core.errors import EntityNotFoundError
from invoice_pro.core.models.client import UNKNOWN_CLIENT, Client
from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.core.models.invoice import STATUS_PAID, STATUS_UNPAID, STATUSES, Invoice
from invoice_pro.core.services.storage import CLIENTS_KEY, COMPANY_KEY, INVOICES_KEY, JsonStorage
from invoice_pro.core.services.validation import validate_client, validate_invoice
from invoice_pro.utils.invoice_number import next_number
from invoice_pro.utils.logs import logger

log = logger(__file__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _ensure_ids(entities: list) -> list:
    """Give records a fresh id when theirs is missing or already taken."""
    seen: set[str] = set()
    for entity in entities:
        if not entity.id or entity.id in seen:
            entity.id = _new_id()
        seen.add(entity.id)
    return entities


def _records(raw) -> list:
    return [entry for entry in raw if isinstance(entry, dict)] if isinstance(raw, list) else []


@dataclass(frozen=True)
class DashboardStats:
    total_revenue: float
    paid_revenue: float
    unpaid_revenue: float
    total_invoices: int
    paid_invoices: int
    unpaid_invoices: int
    total_clients: int


class InvoiceStore:
    """
    Owns the invoice, client and company collections.

    Every mutation is written through to `storage` right away. All lookups
    go through entity ids; list positions are only used for display order.
    """

    def __init__(self, storage: JsonStorage | None = None):
        self.storage = storage
        self._invoices: List[Invoice] = []
        self._clients: List[Client] = []
        self._company = CompanyProfile()
        if storage is not None:
            self._load()

    def _load(self) -> None:
        raw_invoices = self.storage.load(INVOICES_KEY, [])
        raw_clients = self.storage.load(CLIENTS_KEY, [])
        raw_company = self.storage.load(COMPANY_KEY, None)
        self._invoices = _ensure_ids([Invoice.from_dict(d) for d in _records(raw_invoices)])
        self._clients = _ensure_ids([Client.from_dict(d) for d in _records(raw_clients)])
        self._company = CompanyProfile.from_dict(raw_company if isinstance(raw_company, dict) else None)
        log.info("Loaded %d invoices and %d clients", len(self._invoices), len(self._clients))

    def _save_invoices(self) -> None:
        if self.storage is not None:
            self.storage.save(INVOICES_KEY, [inv.to_dict() for inv in self._invoices])

    def _save_clients(self) -> None:
        if self.storage is not None:
            self.storage.save(CLIENTS_KEY, [client.to_dict() for client in self._clients])

    def _save_company(self) -> None:
        if self.storage is not None:
            self.storage.save(COMPANY_KEY, self._company.to_dict())

    # --- Invoices ---
    @property
    def invoices(self) -> List[Invoice]:
        return list(self._invoices)

    def get_invoice(self, invoice_id: str) -> Invoice:
        for invoice in self._invoices:
            if invoice.id == invoice_id:
                return invoice
        raise EntityNotFoundError("Invoice", invoice_id)

    def next_invoice_number(self, year: int | None = None) -> str:
        return next_number(len(self._invoices), year)

    def new_invoice_draft(self, today: date | None = None) -> Invoice:
        today = today or date.today()
        return Invoice.draft(self.next_invoice_number(today.year), today)

    def add_invoice(self, invoice: Invoice) -> Invoice:
        validate_invoice(invoice, self._clients)
        stored = invoice.copy()
        stored.id = _new_id()
        self._invoices.append(stored)
        self._save_invoices()
        log.info("Created invoice %s", stored.invoice_number)
        return stored

    def update_invoice(self, invoice_id: str, invoice: Invoice) -> Invoice:
        current = self.get_invoice(invoice_id)
        validate_invoice(invoice, self._clients)
        stored = invoice.copy()
        stored.id = current.id
        self._invoices[self._invoices.index(current)] = stored
        self._save_invoices()
        log.info("Updated invoice %s", stored.invoice_number)
        return stored

    def delete_invoice(self, invoice_id: str) -> None:
        invoice = self.get_invoice(invoice_id)
        self._invoices.remove(invoice)
        self._save_invoices()
        log.info("Deleted invoice %s", invoice.invoice_number)

    def toggle_status(self, invoice_id: str) -> str:
        invoice = self.get_invoice(invoice_id)
        invoice.status = STATUS_UNPAID if invoice.status == STATUS_PAID else STATUS_PAID
        self._save_invoices()
        log.info("Invoice %s marked as %s", invoice.invoice_number, invoice.status)
        return invoice.status

    def duplicate_invoice(self, invoice_id: str, today: date | None = None) -> Invoice:
        """Unsaved copy with a fresh number, today's date and unpaid status."""
        source = self.get_invoice(invoice_id)
        today = today or date.today()
        draft = source.copy()
        draft.id = ""
        draft.invoice_number = self.next_invoice_number(today.year)
        draft.date = today
        draft.status = STATUS_UNPAID
        return draft

    def recent_invoices(self, limit: int = 5) -> List[Invoice]:
        return list(reversed(self._invoices))[:limit]

    def filter_invoices(self, search: str = "", status: str = "all") -> List[Invoice]:
        term = search.strip().lower()
        result = []
        for invoice in self._invoices:
            if status in STATUSES and invoice.status != status:
                continue
            if term:
                client = self.resolve_client(invoice)
                in_number = term in invoice.invoice_number.lower()
                in_client = client is not None and term in client.name.lower()
                if not (in_number or in_client):
                    continue
            result.append(invoice)
        return result

    def stats(self) -> DashboardStats:
        paid = [inv for inv in self._invoices if inv.status == STATUS_PAID]
        unpaid = [inv for inv in self._invoices if inv.status == STATUS_UNPAID]
        return DashboardStats(
            total_revenue=sum((total(inv) for inv in self._invoices), 0.0),
            paid_revenue=sum((total(inv) for inv in paid), 0.0),
            unpaid_revenue=sum((total(inv) for inv in unpaid), 0.0),
            total_invoices=len(self._invoices),
            paid_invoices=len(paid),
            unpaid_invoices=len(unpaid),
            total_clients=len(self._clients),
        )

    # --- Clients ---
    @property
    def clients(self) -> List[Client]:
        return list(self._clients)

    def get_client(self, client_id: str) -> Client:
        for client in self._clients:
            if client.id == client_id:
                return client
        raise EntityNotFoundError("Client", client_id)

    def resolve_client(self, invoice: Invoice) -> Optional[Client]:
        for client in self._clients:
            if client.id == invoice.client_id:
                return client
        return None

    def client_name(self, invoice: Invoice) -> str:
        client = self.resolve_client(invoice)
        return client.name if client else UNKNOWN_CLIENT

    def add_client(self, client: Client) -> Client:
        validate_client(client)
        stored = Client(**{**client.to_dict(), "id": _new_id()})
        self._clients.append(stored)
        self._save_clients()
        log.info("Added client %s", stored.name)
        return stored

    def update_client(self, client_id: str, client: Client) -> Client:
        current = self.get_client(client_id)
        validate_client(client)
        stored = Client(**{**client.to_dict(), "id": current.id})
        self._clients[self._clients.index(current)] = stored
        self._save_clients()
        log.info("Updated client %s", stored.name)
        return stored

    def delete_client(self, client_id: str) -> None:
        """Invoices keep their reference; it renders as an unknown client."""
        client = self.get_client(client_id)
        self._clients.remove(client)
        self._save_clients()
        log.info("Deleted client %s", client.name)

    # --- Company ---
    @property
    def company(self) -> CompanyProfile:
        return self._company

    def update_company(self, profile: CompanyProfile) -> CompanyProfile:
        self._company = CompanyProfile.from_dict(profile.to_dict())
        self._save_company()
        log.info("Updated company profile")
        return self._company

    def replace_all(
        self,
        invoices: Iterable[Invoice],
        clients: Iterable[Client],
        company: CompanyProfile | None = None,
    ) -> None:
        """Swap every collection at once (backup import). No merging."""
        self._invoices = _ensure_ids([inv.copy() for inv in invoices])
        self._clients = _ensure_ids([Client(**client.to_dict()) for client in clients])
        if company is not None:
            self._company = CompanyProfile.from_dict(company.to_dict())
        self._save_invoices()
        self._save_clients()
        self._save_company()
        log.info("Replaced data: %d invoices, %d clients", len(self._invoices), len(self._clients))
