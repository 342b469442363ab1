"""Wallet domain: balance ledger, contact directory and their data model."""

from src.domains.wallet.directory import ContactDirectory
from src.domains.wallet.errors import (
    ContactNotFound,
    PersistenceError,
    ValidationError,
    WalletError,
    WorkflowError,
)
from src.domains.wallet.ledger import BalanceLedger, TransferResult
from src.domains.wallet.models import (
    Contact,
    ContactData,
    ContactType,
    Notification,
    Workflow,
    WorkflowKind,
)

__all__ = [
    "BalanceLedger",
    "Contact",
    "ContactData",
    "ContactDirectory",
    "ContactNotFound",
    "ContactType",
    "Notification",
    "PersistenceError",
    "TransferResult",
    "ValidationError",
    "WalletError",
    "Workflow",
    "WorkflowError",
    "WorkflowKind",
]
