"""
Full-snapshot backup of invoices, clients and the company profile.

Export writes everything as one JSON document; import replaces all data.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from invoice_pro.core.errors import BackupImportError
from invoice_pro.core.models.client import Client
from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.core.models.invoice import Invoice
from invoice_pro.core.services.store import InvoiceStore
from invoice_pro.utils.logs import logger

log = logger(__file__)


@dataclass
class BackupSnapshot:
    invoices: List[Invoice]
    clients: List[Client]
    company: Optional[CompanyProfile]
    export_date: str = ""


def _now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


def backup_filename(now: datetime | None = None) -> str:
    return f"invoicepro-backup-{_now(now).date().isoformat()}.json"


def build_snapshot(store: InvoiceStore, now: datetime | None = None) -> dict:
    return {
        "invoices": [inv.to_dict() for inv in store.invoices],
        "clients": [client.to_dict() for client in store.clients],
        "companyInfo": store.company.to_dict(),
        "exportDate": _now(now).isoformat(),
    }


def export_backup(store: InvoiceStore, directory: Path, now: datetime | None = None) -> Path:
    now = _now(now)
    target = Path(directory) / backup_filename(now)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(build_snapshot(store, now), ensure_ascii=False, indent=2), encoding="utf-8")
    log.info("Exported backup to %s", target)
    return target


def _entries(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise BackupImportError(f"Invalid backup file: '{key}' must be a list")
    return [entry for entry in value if isinstance(entry, dict)]


def parse_backup(text: str) -> BackupSnapshot:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise BackupImportError(f"Invalid backup file: {exc}") from exc
    if not isinstance(data, dict):
        raise BackupImportError("Invalid backup file: expected a JSON object")

    invoice_entries = _entries(data, "invoices")
    client_entries = _entries(data, "clients")
    company_raw = data.get("companyInfo")
    try:
        return BackupSnapshot(
            invoices=[Invoice.from_dict(entry) for entry in invoice_entries],
            clients=[Client.from_dict(entry) for entry in client_entries],
            company=CompanyProfile.from_dict(company_raw) if isinstance(company_raw, dict) else None,
            export_date=str(data.get("exportDate") or ""),
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise BackupImportError(f"Invalid backup file: {exc}") from exc


def apply_snapshot(store: InvoiceStore, snapshot: BackupSnapshot) -> None:
    store.replace_all(snapshot.invoices, snapshot.clients, snapshot.company)
    log.info("Imported backup from %s", snapshot.export_date or "unknown date")


def import_backup(store: InvoiceStore, text: str) -> BackupSnapshot:
    """
    Replace the store contents with the snapshot in `text`.
    The document is parsed completely before anything is touched.
    """
    try:
        snapshot = parse_backup(text)
    except BackupImportError as exc:
        log.error("Backup import rejected: %s", exc)
        raise
    apply_snapshot(store, snapshot)
    return snapshot


def read_backup_file(path: Path) -> BackupSnapshot:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BackupImportError(f"Cannot read backup file: {exc}") from exc
    return parse_backup(text)


def import_backup_file(store: InvoiceStore, path: Path) -> BackupSnapshot:
    snapshot = read_backup_file(path)
    apply_snapshot(store, snapshot)
    return snapshot
