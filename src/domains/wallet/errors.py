"""Error taxonomy for the wallet core."""


class WalletError(Exception):
    """Base class for wallet core errors."""


class ValidationError(WalletError):
    """Raised when a command carries an invalid amount, address or contact field."""


class ContactNotFound(WalletError):
    """Raised when update/delete references a contact id that does not exist."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact not found: {contact_id}")
        self.contact_id = contact_id


class WorkflowError(WalletError):
    """Raised when a workflow transition or delete confirmation is not allowed."""


class PersistenceError(WalletError):
    """Raised inside the persistence adapter when storage or decoding fails."""
