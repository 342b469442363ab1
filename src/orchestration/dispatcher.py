"""
Command dispatcher for the wallet dashboard.

Receives UI commands, routes them to the balance ledger and contact directory,
persists the directory after every mutation, emits notifications, and tracks the
single open workflow together with its transient selections.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from src.domains.wallet.directory import ContactDirectory
from src.domains.wallet.errors import ValidationError, WalletError, WorkflowError
from src.domains.wallet.generators import (
    ClockIdSource,
    IdSource,
    TokenSource,
    opaque_token,
    random_address_source,
)
from src.domains.wallet.ledger import BalanceLedger
from src.domains.wallet.models import (
    Contact,
    ContactData,
    Notification,
    Workflow,
    WorkflowKind,
)
from src.infrastructure.storage.contact_persistence import ContactPersistence, PersistResult
from src.infrastructure.storage.kv_store import JsonFileStore
from src.services.notifications import NotificationChannel
from src.utils.config import contacts_storage_key, storage_path, token_symbol
from src.utils.formatting import format_amount, shorten_address
from src.utils.logger import get_logger

logger = get_logger()

MSG_CONNECTED = "Carteira conectada com sucesso!"


@dataclass(frozen=True)
class DashboardState:
    """Everything the presentation layer needs to render one frame."""

    balance: float
    contacts: tuple[Contact, ...]
    workflow: Workflow
    wallet_address: str | None
    pending_edit: Contact | None
    prefilled_recipient: Contact | None
    notification: Notification | None


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    state: DashboardState
    error: str | None = None
    value: Any = None
    # class name of the rejecting WalletError, for UI messages
    error_code: str | None = None


def default_persistence(on_result: Callable[[PersistResult], None] | None = None) -> ContactPersistence:
    """Persistence backed by the configured JSON storage file."""
    return ContactPersistence(JsonFileStore(storage_path()), key=contacts_storage_key(), on_result=on_result)


class CommandDispatcher:
    def __init__(
        self,
        balance: float = 0,
        *,
        persistence: ContactPersistence | None = None,
        id_source: IdSource | None = None,
        address_source: TokenSource | None = None,
        token_source: TokenSource | None = None,
        symbol: str | None = None,
    ) -> None:
        self._ledger = BalanceLedger(balance)
        self._persistence = persistence
        self._address_source = address_source
        self._token_source = token_source
        self._symbol = symbol or token_symbol()
        self._notifications = NotificationChannel()
        self._workflow = Workflow.closed()
        self._wallet_address: str | None = None
        self._pending_edit: Contact | None = None
        self._prefilled_recipient: Contact | None = None
        self._pending_delete: tuple[str, int] | None = None

        contacts, self.last_persist_result = self._ensure_persistence().load()
        self._directory = ContactDirectory(contacts, id_source=id_source)

    def __getstate__(self) -> dict[str, Any]:
        """Pickle plain state only; storage and generator callables are rebuilt lazily."""
        return {
            "balance": self._ledger.balance,
            "contacts": [c.to_record() for c in self._directory.contacts],
            "symbol": self._symbol,
            "workflow": self._workflow,
            "wallet_address": self._wallet_address,
            "pending_edit": self._pending_edit,
            "prefilled_recipient": self._prefilled_recipient,
            "pending_delete": self._pending_delete,
            "notification": self._notifications.pending,
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._ledger = BalanceLedger(state.get("balance", 0))
        self._directory = ContactDirectory(
            [Contact.from_record(r) for r in state.get("contacts", [])],
            id_source=ClockIdSource(),
        )
        self._symbol = state.get("symbol") or token_symbol()
        self._workflow = state.get("workflow") or Workflow.closed()
        self._wallet_address = state.get("wallet_address")
        self._pending_edit = state.get("pending_edit")
        self._prefilled_recipient = state.get("prefilled_recipient")
        self._pending_delete = state.get("pending_delete")
        self._notifications = NotificationChannel()
        if state.get("notification") is not None:
            self._notifications.emit(state["notification"].message)
        self._persistence = None  # Recreated on demand
        self._address_source = None
        self._token_source = None
        self.last_persist_result = None

    def _ensure_persistence(self) -> ContactPersistence:
        if self._persistence is None:
            self._persistence = default_persistence()
        return self._persistence

    def _new_address(self) -> str:
        if self._address_source is None:
            self._address_source = random_address_source()
        return self._address_source()

    def _new_token(self) -> str:
        if self._token_source is None:
            self._token_source = opaque_token
        return self._token_source()

    # --- state ---

    @property
    def balance(self) -> float:
        return self._ledger.balance

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return self._directory.contacts

    @property
    def workflow(self) -> Workflow:
        return self._workflow

    @property
    def wallet_address(self) -> str | None:
        return self._wallet_address

    def snapshot(self) -> DashboardState:
        return DashboardState(
            balance=self._ledger.balance,
            contacts=self._directory.contacts,
            workflow=self._workflow,
            wallet_address=self._wallet_address,
            pending_edit=self._pending_edit,
            prefilled_recipient=self._prefilled_recipient,
            notification=self._notifications.pending,
        )

    def consume_notification(self) -> Notification | None:
        return self._notifications.consume()

    def _ok(self, value: Any = None) -> CommandResult:
        return CommandResult(ok=True, state=self.snapshot(), value=value)

    def _run(self, command: str, action: Callable[[], Any]) -> CommandResult:
        """Run `action`; a WalletError becomes a failed result with state left as it was."""
        try:
            value = action()
        except WalletError as e:
            logger.info("Command %s rejected: %s", command, e)
            return CommandResult(
                ok=False,
                state=self.snapshot(),
                error=str(e),
                error_code=type(e).__name__,
            )
        return self._ok(value)

    def _persist(self) -> None:
        self.last_persist_result = self._ensure_persistence().save(self._directory.contacts)

    # --- workflow transitions ---

    def _open(self, workflow: Workflow) -> None:
        if self._workflow.is_open:
            raise WorkflowError(
                f"Cannot open {workflow.kind.value}: {self._workflow.kind.value} is already open"
            )
        self._workflow = workflow

    def _close(self) -> None:
        self._workflow = Workflow.closed()
        self._pending_edit = None
        self._prefilled_recipient = None

    def open_connect(self) -> CommandResult:
        return self._run("open_connect", lambda: self._open(Workflow(WorkflowKind.CONNECTING)))

    def open_stake(self) -> CommandResult:
        return self._run("open_stake", lambda: self._open(Workflow(WorkflowKind.STAKING)))

    def open_transfer(self) -> CommandResult:
        return self._run("open_transfer", lambda: self._open(Workflow(WorkflowKind.TRANSFERRING)))

    def initiate_transfer(self, contact: Contact) -> CommandResult:
        def action() -> None:
            self._open(Workflow(WorkflowKind.TRANSFERRING))
            self._prefilled_recipient = contact

        return self._run("initiate_transfer", action)

    def open_add_contact(self) -> CommandResult:
        def action() -> None:
            self._open(Workflow(WorkflowKind.ADDING_CONTACT))
            self._pending_edit = None

        return self._run("open_add_contact", action)

    def open_edit_contact(self, contact: Contact) -> CommandResult:
        def action() -> None:
            current = self._directory.get(contact.id)
            self._open(Workflow.editing(current.id))
            self._pending_edit = current

        return self._run("open_edit_contact", action)

    def close_workflow(self) -> CommandResult:
        self._close()
        return self._ok()

    # --- wallet session ---

    def connect_wallet(self) -> CommandResult:
        def action() -> str:
            if self._workflow.kind not in (WorkflowKind.CLOSED, WorkflowKind.CONNECTING):
                raise WorkflowError(f"Cannot connect while {self._workflow.kind.value} is open")
            address = self._new_address()
            self._wallet_address = address
            self._close()
            self._notifications.emit(MSG_CONNECTED)
            logger.info("Wallet connected: %s", shorten_address(address))
            return address

        return self._run("connect_wallet", action)

    def disconnect_wallet(self) -> CommandResult:
        self._wallet_address = None
        logger.info("Wallet disconnected")
        return self._ok()

    # --- ledger ---

    def stake(self, amount: float) -> CommandResult:
        def action() -> float:
            balance = self._ledger.stake(amount)
            self._close()
            self._notifications.emit(f"{format_amount(amount)} {self._symbol} apostados com sucesso!")
            logger.info("Staked %s; balance now %s", amount, balance)
            return balance

        return self._run("stake", action)

    def transfer(self, amount: float, address: str) -> CommandResult:
        def action() -> str:
            result = self._ledger.transfer(amount, address, lookup=self._directory.find_by_address)
            self._close()
            self._notifications.emit(
                f"{format_amount(amount)} {self._symbol} transferidos para {result.recipient_name}!"
            )
            logger.info(
                "Transferred %s to %s; balance now %s",
                amount,
                shorten_address(address),
                result.balance,
            )
            return result

        return self._run("transfer", action)

    # --- contacts ---

    def save_contact(self, data: ContactData) -> CommandResult:
        """Update the contact being edited, or create a new one when none is."""

        def action() -> Contact:
            if not isinstance(data, ContactData):
                raise ValidationError(f"Expected ContactData, got {type(data).__name__}")
            if self._pending_edit is not None:
                contact = self._directory.update(self._pending_edit.id, data)
                message = f"Contato '{contact.name}' atualizado!"
            else:
                contact = self._directory.create(data)
                message = f"Contato '{contact.name}' adicionado!"
            self._persist()
            self._close()
            self._notifications.emit(message)
            logger.info("Saved contact %s", contact.id)
            return contact

        return self._run("save_contact", action)

    def request_delete(self, contact_id: int) -> CommandResult:
        """First delete phase: returns a confirmation token bound to `contact_id` as `value`."""

        def action() -> str:
            self._directory.get(contact_id)
            token = self._new_token()
            self._pending_delete = (token, contact_id)
            return token

        return self._run("request_delete", action)

    def cancel_delete(self) -> CommandResult:
        self._pending_delete = None
        return self._ok()

    def confirm_delete(self, token: str) -> CommandResult:
        """Second delete phase: removes the contact if `token` is the pending one."""

        def action() -> Contact:
            pending = self._pending_delete
            if pending is None or pending[0] != token:
                raise WorkflowError("Delete confirmation is invalid or expired")
            contact = self._directory.delete(pending[1])
            self._pending_delete = None
            if self._pending_edit is not None and self._pending_edit.id == contact.id:
                self._close()
            self._persist()
            self._notifications.emit(f"Contato '{contact.name}' excluído.")
            logger.info("Deleted contact %s", contact.id)
            return contact

        return self._run("confirm_delete", action)
