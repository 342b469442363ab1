"""
Tests for the dashboard's user-facing error text.
"""

from __future__ import annotations

import pytest

from src.infrastructure.storage.contact_persistence import ContactPersistence
from src.infrastructure.storage.kv_store import InMemoryStore
from src.orchestration.dispatcher import CommandDispatcher, CommandResult
from src.ui.dashboard import describe_error


@pytest.fixture
def dispatcher() -> CommandDispatcher:
    return CommandDispatcher(balance=100, persistence=ContactPersistence(InMemoryStore()), symbol="RC")


def test_validation_error_is_portuguese(dispatcher: CommandDispatcher) -> None:
    """Raw domain text like 'Amount must be positive' never reaches the user."""
    result = dispatcher.stake(0)
    text = describe_error(result)
    assert text.startswith("Dados inválidos")
    assert "Amount" not in text


def test_not_found_and_workflow_errors(dispatcher: CommandDispatcher) -> None:
    assert describe_error(dispatcher.request_delete(404)) == "Contato não encontrado."
    dispatcher.open_stake()
    assert describe_error(dispatcher.open_add_contact()).startswith("Ação indisponível")


def test_unknown_code_falls_back(dispatcher: CommandDispatcher) -> None:
    result = CommandResult(ok=False, state=dispatcher.snapshot(), error="boom", error_code="Other")
    assert describe_error(result) == "Operação inválida."
