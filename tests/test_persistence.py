"""
Tests for contact persistence: round-trip, seed fallback, failure tolerance.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domains.wallet.errors import PersistenceError
from src.domains.wallet.models import Contact, ContactType
from src.domains.wallet.seed import SEED_CONTACTS
from src.infrastructure.storage.contact_persistence import (
    ContactPersistence,
    deserialize_contacts,
    serialize_contacts,
)
from src.infrastructure.storage.kv_store import InMemoryStore, JsonFileStore

KEY = "redicoin_contacts"

CONTACTS = [
    Contact(1700000000123, "Loja Ção", "loja.rc", "0xabc", "https://i.pravatar.cc/150?u=1700000000123", ContactType.COMPANY),
    Contact(1, "Ana Clara", "ana.rc", "0x1A2b", "https://i.pravatar.cc/150?img=1", ContactType.PERSON),
]


def test_round_trip() -> None:
    """deserialize(serialize(x)) == x, including order and non-ASCII names."""
    assert deserialize_contacts(serialize_contacts(CONTACTS)) == CONTACTS
    assert deserialize_contacts(serialize_contacts([])) == []


def test_wire_format() -> None:
    """Stored records use the imageUrl key and pessoa/empresa type values."""
    data = json.loads(serialize_contacts(CONTACTS))
    assert set(data[0]) == {"id", "name", "username", "address", "imageUrl", "type"}
    assert data[0]["type"] == "empresa"
    assert data[1]["type"] == "pessoa"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"id": 1}',
        '[{"id": 1, "name": "x"}]',
        '[{"id": "1", "name": "x", "username": "u", "address": "a", "imageUrl": "i", "type": "pessoa"}]',
        '[{"id": 1, "name": "x", "username": "u", "address": "a", "imageUrl": "i", "type": "robot"}]',
        '[{"id": 1, "name": "x", "username": "u", "address": "a", "imageUrl": "i", "type": "pessoa"},'
        ' {"id": 1, "name": "y", "username": "u", "address": "a", "imageUrl": "i", "type": "pessoa"}]',
    ],
)
def test_deserialize_malformed(raw: str) -> None:
    with pytest.raises(PersistenceError):
        deserialize_contacts(raw)


def test_load_missing_key_uses_seed() -> None:
    contacts, result = ContactPersistence(InMemoryStore(), KEY).load()
    assert contacts == list(SEED_CONTACTS)
    assert result.ok


def test_load_corrupt_uses_seed() -> None:
    """Corrupt content falls back to seed and reports a failure on the side channel."""
    seen = []
    store = InMemoryStore({KEY: "{{{"})
    contacts, result = ContactPersistence(store, KEY, on_result=seen.append).load()
    assert contacts == list(SEED_CONTACTS)
    assert not result.ok
    assert seen == [result]


def test_load_empty_list_is_kept() -> None:
    """An empty persisted directory is valid and is not replaced by the seed."""
    contacts, result = ContactPersistence(InMemoryStore({KEY: "[]"}), KEY).load()
    assert contacts == []
    assert result.ok


def test_load_read_error_uses_seed() -> None:
    store = MagicMock()
    store.get.side_effect = OSError("disk gone")
    contacts, result = ContactPersistence(store, KEY).load()
    assert contacts == list(SEED_CONTACTS)
    assert result.ok is False
    assert "disk gone" in result.error


def test_save_writes_full_directory() -> None:
    store = InMemoryStore()
    result = ContactPersistence(store, KEY).save(CONTACTS)
    assert result.ok and result.operation == "save"
    assert deserialize_contacts(store.data[KEY]) == CONTACTS


def test_save_failure_does_not_raise() -> None:
    """Write errors are reported, not raised."""
    store = InMemoryStore()
    store.fail_writes = True
    seen = []
    result = ContactPersistence(store, KEY, on_result=seen.append).save(CONTACTS)
    assert result.ok is False
    assert "OSError" in result.error
    assert seen == [result]
    assert KEY not in store.data


def test_observer_errors_are_contained() -> None:
    def boom(_result):
        raise RuntimeError("observer down")

    result = ContactPersistence(InMemoryStore(), KEY, on_result=boom).save(CONTACTS)
    assert result.ok


def test_json_file_store(tmp_path: Path) -> None:
    """File store keeps several keys in one JSON object and survives reopen."""
    path = tmp_path / "nested" / "storage.json"
    store = JsonFileStore(path)
    assert store.get(KEY) is None
    store.set(KEY, "[]")
    store.set("other", "x")
    reopened = JsonFileStore(path)
    assert reopened.get(KEY) == "[]"
    assert reopened.get("other") == "x"
    assert json.loads(path.read_text(encoding="utf-8")) == {KEY: "[]", "other": "x"}


def test_json_file_store_with_persistence(tmp_path: Path) -> None:
    persistence = ContactPersistence(JsonFileStore(tmp_path / "s.json"), KEY)
    persistence.save(CONTACTS)
    contacts, result = persistence.load()
    assert contacts == CONTACTS
    assert result.ok


def test_json_file_store_rewrites_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "s.json"
    path.write_text("garbage", encoding="utf-8")
    store = JsonFileStore(path)
    store.set(KEY, "[]")
    assert store.get(KEY) == "[]"


def test_json_file_store_failed_write_leaves_no_temp_file(tmp_path: Path) -> None:
    """An unencodable value fails the write without leaving s.json.tmp behind."""
    store = JsonFileStore(tmp_path / "s.json")
    store.set(KEY, "[]")
    with pytest.raises(UnicodeEncodeError):
        store.set(KEY, "x\ud800")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["s.json"]
    assert store.get(KEY) == "[]"


def test_save_unencodable_contact_reports_failure(tmp_path: Path) -> None:
    persistence = ContactPersistence(JsonFileStore(tmp_path / "s.json"), KEY)
    bad = Contact(9, "x\ud800", "x", "0x9", "img", ContactType.PERSON)
    result = persistence.save([bad])
    assert result.ok is False
    assert "UnicodeEncodeError" in result.error
    assert list(tmp_path.iterdir()) == []
