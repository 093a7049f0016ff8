"""
Local JSON persistence: one file per collection, overwritten in full on save.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from invoice_pro.utils.logs import logger

DATA_DIR = Path(__file__).resolve().parents[4] / "data"

INVOICES_KEY = "invoices"
CLIENTS_KEY = "clients"
COMPANY_KEY = "companyInfo"
KEYS = (INVOICES_KEY, CLIENTS_KEY, COMPANY_KEY)

log = logger(__file__)


class JsonStorage:
    """Keyed JSON blobs stored as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path | None = None):
        self.data_dir = Path(data_dir) if data_dir else DATA_DIR

    def path_for(self, key: str) -> Path:
        if key not in KEYS:
            raise KeyError(f"Unknown storage key: {key}")
        return self.data_dir / f"{key}.json"

    def load(self, key: str, default: Any = None) -> Any:
        target = self.path_for(key)
        if not target.exists():
            return default
        try:
            return json.loads(target.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable %s (%s), using defaults", target, exc)
            return default

    def save(self, key: str, value: Any) -> Path:
        target = self.path_for(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        return target
