"""
Contact directory: ordered newest-first, ids unique, id/image_url immutable.
"""

from __future__ import annotations

from typing import Iterable

from src.domains.wallet.errors import ContactNotFound, ValidationError
from src.domains.wallet.generators import ClockIdSource, IdSource, avatar_url
from src.domains.wallet.models import Contact, ContactData


def _validate(data: ContactData) -> None:
    missing = [f for f in ("name", "username", "address") if not getattr(data, f).strip()]
    if missing:
        raise ValidationError(f"Contact fields cannot be empty: {', '.join(missing)}")


class ContactDirectory:
    def __init__(
        self,
        contacts: Iterable[Contact] = (),
        *,
        id_source: IdSource | None = None,
    ) -> None:
        self._contacts: list[Contact] = list(contacts)
        ids = [c.id for c in self._contacts]
        if len(ids) != len(set(ids)):
            raise ValueError("Contact ids must be distinct")
        self._next_id = id_source or ClockIdSource()

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self):
        return iter(list(self._contacts))

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    def _new_id(self) -> int:
        taken = {c.id for c in self._contacts}
        cid = self._next_id()
        while cid in taken:
            cid = self._next_id()
        return cid

    def get(self, contact_id: int) -> Contact:
        for c in self._contacts:
            if c.id == contact_id:
                return c
        raise ContactNotFound(contact_id)

    def create(self, data: ContactData) -> Contact:
        """Assign a fresh id and avatar, prepend, and return the new contact."""
        _validate(data)
        cid = self._new_id()
        contact = Contact(
            id=cid,
            name=data.name,
            username=data.username,
            address=data.address,
            image_url=avatar_url(cid),
            type=data.type,
        )
        self._contacts.insert(0, contact)
        return contact

    def update(self, contact_id: int, data: ContactData) -> Contact:
        """Replace editable fields of `contact_id`, keeping id and image_url."""
        _validate(data)
        current = self.get(contact_id)
        updated = Contact(
            id=current.id,
            name=data.name,
            username=data.username,
            address=data.address,
            image_url=current.image_url,
            type=data.type,
        )
        self._contacts = [updated if c.id == contact_id else c for c in self._contacts]
        return updated

    def delete(self, contact_id: int) -> Contact:
        """Remove the first contact with `contact_id` and return it."""
        for i, c in enumerate(self._contacts):
            if c.id == contact_id:
                del self._contacts[i]
                return c
        raise ContactNotFound(contact_id)

    def find_by_address(self, address: str) -> Contact | None:
        """First contact whose address equals `address`; duplicates are allowed."""
        for c in self._contacts:
            if c.address == address:
                return c
        return None
