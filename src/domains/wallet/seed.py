"""Fixed seed contacts used when nothing valid is persisted yet."""

from __future__ import annotations

from src.domains.wallet.models import Contact, ContactType

SEED_CONTACTS: tuple[Contact, ...] = (
    Contact(
        id=1,
        name="Ana Clara",
        username="ana.rc",
        address="0x1A2b3c4D5e6F7g8H9i0J1k2L3m4N5o6P7q8R9s0T",
        image_url="https://i.pravatar.cc/150?img=1",
        type=ContactType.PERSON,
    ),
    Contact(
        id=2,
        name="Bruno Alves",
        username="bruno.rc",
        address="0x2B3c4D5e6F7g8H9i0J1k2L3m4N5o6P7q8R9s0T1A",
        image_url="https://i.pravatar.cc/150?img=2",
        type=ContactType.PERSON,
    ),
    Contact(
        id=3,
        name="Design Co.",
        username="designco.rc",
        address="0x3C4d5E6f7G8h9I0j1K2l3M4n5O6p7Q8r9S0t1A2b",
        image_url="https://i.pravatar.cc/150?img=30",
        type=ContactType.COMPANY,
    ),
    Contact(
        id=4,
        name="Daniel Souza",
        username="daniel.rc",
        address="0x4D5e6F7g8H9i0J1k2L3m4N5o6P7q8R9s0T1a2B3c",
        image_url="https://i.pravatar.cc/150?img=4",
        type=ContactType.PERSON,
    ),
)


def seed_contacts() -> list[Contact]:
    return list(SEED_CONTACTS)
