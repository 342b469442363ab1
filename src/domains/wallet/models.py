"""
Data model for the wallet core: contacts, notifications and workflow state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from src.domains.wallet.errors import ValidationError


class ContactType(str, Enum):
    """Contact classification. Values are the persisted wire values."""

    PERSON = "pessoa"
    COMPANY = "empresa"

    @classmethod
    def parse(cls, value: Any) -> "ContactType":
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown contact type: {value!r}")


@dataclass(frozen=True)
class Contact:
    id: int
    name: str
    username: str
    address: str
    image_url: str
    type: ContactType = ContactType.PERSON

    def to_record(self) -> dict[str, Any]:
        """Storage record with the persisted key names."""
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "address": self.address,
            "imageUrl": self.image_url,
            "type": self.type.value,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Contact":
        """Build a Contact from a storage record. Raises ValueError/KeyError/TypeError on bad shape."""
        if not isinstance(record, dict):
            raise TypeError(f"Contact record must be an object, got {type(record).__name__}")
        cid = record["id"]
        if isinstance(cid, bool) or not isinstance(cid, int):
            raise TypeError(f"Contact id must be an integer, got {cid!r}")
        fields = {}
        for key in ("name", "username", "address", "imageUrl"):
            val = record[key]
            if not isinstance(val, str):
                raise TypeError(f"Contact field {key} must be a string, got {val!r}")
            fields[key] = val
        return cls(
            id=cid,
            name=fields["name"],
            username=fields["username"],
            address=fields["address"],
            image_url=fields["imageUrl"],
            type=ContactType.parse(record["type"]),
        )


@dataclass(frozen=True)
class ContactData:
    """User-editable contact fields (everything except id and image_url)."""

    name: str
    username: str
    address: str
    type: ContactType = ContactType.PERSON

    @classmethod
    def from_form(cls, name: str, username: str, address: str, type: Any = ContactType.PERSON) -> "ContactData":
        """Strip form input and parse the contact type. Raises ValidationError on bad input."""
        try:
            kind = ContactType.parse(type)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return cls(
            name=(name or "").strip(),
            username=(username or "").strip(),
            address=(address or "").strip(),
            type=kind,
        )


@dataclass(frozen=True)
class Notification:
    message: str
    visible: bool = True


class WorkflowKind(str, Enum):
    CLOSED = "closed"
    CONNECTING = "connecting"
    STAKING = "staking"
    TRANSFERRING = "transferring"
    ADDING_CONTACT = "adding_contact"
    EDITING_CONTACT = "editing_contact"


@dataclass(frozen=True)
class Workflow:
    """
    The single active workflow slot. contact_id is only set for EDITING_CONTACT.
    """

    kind: WorkflowKind = WorkflowKind.CLOSED
    contact_id: Optional[int] = None

    def __post_init__(self) -> None:
        editing = self.kind is WorkflowKind.EDITING_CONTACT
        if editing != (self.contact_id is not None):
            raise ValueError("contact_id is required for EDITING_CONTACT and forbidden otherwise")

    @property
    def is_open(self) -> bool:
        return self.kind is not WorkflowKind.CLOSED

    @classmethod
    def closed(cls) -> "Workflow":
        return cls(WorkflowKind.CLOSED)

    @classmethod
    def editing(cls, contact_id: int) -> "Workflow":
        return cls(WorkflowKind.EDITING_CONTACT, contact_id)
