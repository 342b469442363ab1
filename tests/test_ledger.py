"""
Tests for BalanceLedger: stake/transfer validation and recipient resolution.
"""

from __future__ import annotations

import math

import pytest

from src.domains.wallet.errors import ValidationError
from src.domains.wallet.ledger import BalanceLedger
from src.domains.wallet.models import Contact, ContactType

ADDR = "0xABCDEF0123456789abcdef0123456789ABCD9876"


def test_stake_within_balance() -> None:
    """Stake deducts the amount and returns the new balance."""
    ledger = BalanceLedger(1000)
    assert ledger.stake(200) == 800
    assert ledger.balance == 800


def test_stake_whole_balance() -> None:
    """Staking exactly the balance is allowed and leaves zero."""
    ledger = BalanceLedger(50.5)
    assert ledger.stake(50.5) == 0


@pytest.mark.parametrize("amount", [0, -1, 1500, 1000.0001, math.nan, math.inf, True, "10", None])
def test_stake_rejected_leaves_balance(amount: object) -> None:
    """Invalid amounts raise ValidationError and the balance is untouched."""
    ledger = BalanceLedger(1000)
    with pytest.raises(ValidationError):
        ledger.stake(amount)  # type: ignore[arg-type]
    assert ledger.balance == 1000


def test_negative_initial_balance_rejected() -> None:
    with pytest.raises(ValidationError):
        BalanceLedger(-1)


def test_transfer_resolves_contact_name() -> None:
    """Known address resolves to the first matching contact's name."""
    ana = Contact(1, "Ana Clara", "ana.rc", ADDR, "img", ContactType.PERSON)
    ledger = BalanceLedger(1000)
    out = ledger.transfer(250, ADDR, lookup=lambda a: ana if a == ADDR else None)
    assert out.balance == 750
    assert out.recipient_name == "Ana Clara"
    assert out.recipient_address == ADDR


def test_transfer_unknown_address_is_shortened() -> None:
    """Unknown address falls back to first 6 + ... + last 4 characters."""
    ledger = BalanceLedger(1000)
    out = ledger.transfer(10, ADDR, lookup=lambda a: None)
    assert out.recipient_name == "0xABCD...9876"
    assert ledger.balance == 990


@pytest.mark.parametrize("address", ["", "   "])
def test_transfer_requires_address(address: str) -> None:
    ledger = BalanceLedger(1000)
    with pytest.raises(ValidationError, match="address"):
        ledger.transfer(10, address)
    assert ledger.balance == 1000


@pytest.mark.parametrize("amount", [0, -5, 1001])
def test_transfer_invalid_amount(amount: float) -> None:
    ledger = BalanceLedger(1000)
    with pytest.raises(ValidationError):
        ledger.transfer(amount, ADDR)
    assert ledger.balance == 1000


def test_transfer_rejection_skips_lookup() -> None:
    """No recipient lookup happens when validation fails."""
    calls: list[str] = []
    ledger = BalanceLedger(10)
    with pytest.raises(ValidationError):
        ledger.transfer(20, ADDR, lookup=lambda a: calls.append(a))
    assert calls == []
