"""
Balance ledger: a single non-negative balance with validated stake/transfer mutations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional

from src.domains.wallet.errors import ValidationError
from src.domains.wallet.models import Contact
from src.utils.formatting import shorten_address

# address -> first matching contact, or None
RecipientLookup = Callable[[str], Optional[Contact]]


@dataclass(frozen=True)
class TransferResult:
    balance: float
    recipient_address: str
    recipient_name: str


def _check_amount(amount: object) -> float:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise ValidationError(f"Amount must be a number, got {amount!r}")
    if not math.isfinite(amount):
        raise ValidationError(f"Amount must be finite, got {amount!r}")
    return amount


class BalanceLedger:
    """
    Owns the balance. Every mutation validates first and then assigns once,
    so a rejected operation leaves the balance untouched.
    """

    def __init__(self, balance: float = 0) -> None:
        balance = _check_amount(balance)
        if balance < 0:
            raise ValidationError(f"Balance cannot be negative: {balance}")
        self._balance = balance

    @property
    def balance(self) -> float:
        return self._balance

    def _validate_debit(self, amount: object) -> float:
        amount = _check_amount(amount)
        if amount <= 0:
            raise ValidationError(f"Amount must be positive, got {amount}")
        if amount > self._balance:
            raise ValidationError(f"Amount {amount} exceeds balance {self._balance}")
        return amount

    def stake(self, amount: float) -> float:
        """Deduct `amount` if 0 < amount <= balance. Returns the new balance."""
        amount = self._validate_debit(amount)
        self._balance = self._balance - amount
        return self._balance

    def transfer(
        self,
        amount: float,
        recipient_address: str,
        lookup: RecipientLookup | None = None,
    ) -> TransferResult:
        """
        Deduct `amount` and resolve a display name for the recipient.

        The name is the first contact whose address matches, otherwise the
        shortened address.
        """
        if not isinstance(recipient_address, str) or not recipient_address.strip():
            raise ValidationError("Recipient address is required")
        amount = self._validate_debit(amount)
        contact = lookup(recipient_address) if lookup else None
        name = contact.name if contact else shorten_address(recipient_address)
        self._balance = self._balance - amount
        return TransferResult(
            balance=self._balance,
            recipient_address=recipient_address,
            recipient_name=name,
        )
