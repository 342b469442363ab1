"""
Persistence adapter for the contact directory.

Loads once at startup and writes the whole directory after every mutation.
Failures never propagate: they are logged and reported as a PersistResult so an
observer can act on them, while in-memory state stays authoritative.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Sequence

from src.domains.wallet.errors import PersistenceError
from src.domains.wallet.models import Contact
from src.domains.wallet.seed import seed_contacts
from src.infrastructure.storage.kv_store import KeyValueStore
from src.utils.logger import get_logger

logger = get_logger()

DEFAULT_STORAGE_KEY = "redicoin_contacts"


@dataclass(frozen=True)
class PersistResult:
    ok: bool
    operation: str
    error: str | None = None


def serialize_contacts(contacts: Sequence[Contact]) -> str:
    return json.dumps([c.to_record() for c in contacts], ensure_ascii=False)


def deserialize_contacts(raw: str) -> list[Contact]:
    """Parse a stored directory. Raises PersistenceError on malformed content."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise PersistenceError(f"Stored contacts are not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistenceError(f"Stored contacts must be a list, got {type(data).__name__}")
    try:
        contacts = [Contact.from_record(r) for r in data]
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(f"Malformed contact record: {e}") from e
    ids = [c.id for c in contacts]
    if len(ids) != len(set(ids)):
        raise PersistenceError("Stored contacts contain duplicate ids")
    return contacts


class ContactPersistence:
    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_STORAGE_KEY,
        on_result: Callable[[PersistResult], None] | None = None,
    ) -> None:
        self._store = store
        self._key = key
        self._on_result = on_result

    def _report(self, result: PersistResult) -> PersistResult:
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception as e:
                logger.exception("Persistence observer failed: %s", e)
        return result

    def load(self) -> tuple[list[Contact], PersistResult]:
        """Return the stored directory, or the seed contacts when missing or corrupt."""
        try:
            raw = self._store.get(self._key)
        except Exception as e:
            logger.warning("Error reading contacts from storage: %s", e)
            return seed_contacts(), self._report(PersistResult(False, "load", str(e)))
        if raw is None:
            logger.info("No stored contacts under %r; using seed contacts", self._key)
            return seed_contacts(), self._report(PersistResult(True, "load"))
        try:
            contacts = deserialize_contacts(raw)
        except PersistenceError as e:
            logger.warning("Error reading contacts from storage: %s; using seed contacts", e)
            return seed_contacts(), self._report(PersistResult(False, "load", str(e)))
        logger.info("Loaded %d contacts from storage", len(contacts))
        return contacts, self._report(PersistResult(True, "load"))

    def save(self, contacts: Sequence[Contact]) -> PersistResult:
        """Write the full directory. Never raises."""
        try:
            self._store.set(self._key, serialize_contacts(contacts))
        except Exception as e:
            logger.warning("Error saving contacts to storage: %s", e)
            return self._report(PersistResult(False, "save", f"{type(e).__name__}: {e}"))
        logger.debug("Saved %d contacts", len(contacts))
        return self._report(PersistResult(True, "save"))
