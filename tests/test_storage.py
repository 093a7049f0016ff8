import json
import logging

import pytest

from invoice_pro.core.services.storage import JsonStorage


def test_missing_file_returns_default(tmp_path):
    assert JsonStorage(tmp_path).load("invoices", []) == []


def test_save_overwrites_whole_blob(tmp_path):
    storage = JsonStorage(tmp_path / "nested")
    storage.save("clients", [{"id": "1", "name": "Á"}])
    path = storage.save("clients", [{"id": "2", "name": "B"}])

    assert path == tmp_path / "nested" / "clients.json"
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "2", "name": "B"}]


def test_corrupt_file_falls_back_with_warning(tmp_path, caplog):
    (tmp_path / "companyInfo.json").write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert JsonStorage(tmp_path).load("companyInfo", None) is None
    assert "Ignoring unreadable" in caplog.text


def test_unknown_key_rejected(tmp_path):
    with pytest.raises(KeyError):
        JsonStorage(tmp_path).save("settings", {})
