"""Durable storage: key-value stores and the contact persistence adapter."""

from src.infrastructure.storage.contact_persistence import (
    ContactPersistence,
    PersistResult,
    deserialize_contacts,
    serialize_contacts,
)
from src.infrastructure.storage.kv_store import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    "ContactPersistence",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "PersistResult",
    "deserialize_contacts",
    "serialize_contacts",
]
