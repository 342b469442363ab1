"""
Streamlit rendering for the wallet dashboard: header, the three views, and the
workflow forms. Every button issues a dispatcher command and reruns the script.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.domains.wallet.models import Contact, ContactData, ContactType, WorkflowKind
from src.orchestration.dispatcher import CommandDispatcher, CommandResult, DashboardState
from src.services.mock_data import MockData
from src.utils.formatting import format_amount, shorten_address

VIEWS: dict[str, str] = {
    "painel": "Painel",
    "reputacao": "Reputação",
    "sobre": "Sobre",
}

_TYPE_LABELS = {ContactType.PERSON: "Pessoa", ContactType.COMPANY: "Empresa"}

ERROR_MESSAGES: dict[str, str] = {
    "ValidationError": "Dados inválidos: confira a quantidade, o saldo disponível, o endereço e os campos do contato.",
    "ContactNotFound": "Contato não encontrado.",
    "WorkflowError": "Ação indisponível: feche a operação em andamento ou solicite a confirmação novamente.",
}


def describe_error(result: CommandResult) -> str:
    """pt-BR text for a rejected command; domain messages stay in the logs."""
    return ERROR_MESSAGES.get(result.error_code or "", "Operação inválida.")


def _apply(result: CommandResult) -> None:
    """Rerun on success; show the rejection inline otherwise."""
    if result.ok:
        st.rerun()
    st.error(describe_error(result))


def render_header(dispatcher: CommandDispatcher, state: DashboardState) -> None:
    with st.sidebar:
        st.header("REDICOIN")
        if state.wallet_address:
            st.caption(f"Carteira: `{shorten_address(state.wallet_address)}`")
            if st.button("Desconectar", use_container_width=True):
                _apply(dispatcher.disconnect_wallet())
        elif st.button("Conectar carteira", use_container_width=True):
            _apply(dispatcher.open_connect())


def render_painel(dispatcher: CommandDispatcher, state: DashboardState, mock: MockData, symbol: str) -> None:
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        st.metric("Saldo", f"{format_amount(state.balance)} {symbol}")
    with col2:
        if st.button("Apostar", use_container_width=True):
            _apply(dispatcher.open_stake())
    with col3:
        if st.button("Transferir", use_container_width=True):
            _apply(dispatcher.open_transfer())

    if mock.chart_data:
        st.subheader("Preço")
        st.line_chart(
            {"data": [p.date for p in mock.chart_data], "valor": [p.value for p in mock.chart_data]},
            x="data",
            y="valor",
        )

    if mock.stats:
        s = mock.stats
        c1, c2, c3 = st.columns(3)
        c1.metric("Market cap", s.market_cap, f"{s.change:+.2f}%")
        c2.metric("Holders", s.holders)
        c3.metric("Transações", s.transactions)

    st.subheader("Atividade recente")
    for a in mock.activities:
        sign = "+" if a.type == "gain" else "-"
        st.markdown(f"**{a.description}** · {sign}{format_amount(abs(a.amount))} {symbol} · _{a.timestamp}_")


def _render_contact_row(dispatcher: CommandDispatcher, contact: Contact) -> None:
    col_img, col_info, col_actions = st.columns([1, 4, 3])
    with col_img:
        st.image(contact.image_url, width=48)
    with col_info:
        st.markdown(f"**{contact.name}** · @{contact.username}")
        st.caption(f"{_TYPE_LABELS[contact.type]} · `{shorten_address(contact.address)}`")
    with col_actions:
        b1, b2, b3 = st.columns(3)
        if b1.button("Enviar", key=f"send_{contact.id}"):
            _apply(dispatcher.initiate_transfer(contact))
        if b2.button("Editar", key=f"edit_{contact.id}"):
            _apply(dispatcher.open_edit_contact(contact))
        if b3.button("Excluir", key=f"delete_{contact.id}"):
            result = dispatcher.request_delete(contact.id)
            if result.ok:
                st.session_state.delete_token = result.value
                st.session_state.delete_name = contact.name
            _apply(result)


def _render_delete_confirmation(dispatcher: CommandDispatcher) -> None:
    token = st.session_state.get("delete_token")
    if not token:
        return
    st.warning(f"Tem certeza que deseja excluir o contato '{st.session_state.get('delete_name', '')}'?")
    c1, c2 = st.columns(2)
    if c1.button("Sim, excluir", key="confirm_delete"):
        st.session_state.delete_token = None
        _apply(dispatcher.confirm_delete(token))
    if c2.button("Cancelar", key="cancel_delete"):
        st.session_state.delete_token = None
        _apply(dispatcher.cancel_delete())


def render_reputacao(dispatcher: CommandDispatcher, state: DashboardState) -> None:
    top1, top2 = st.columns([3, 1])
    with top1:
        st.subheader("Contatos")
    with top2:
        if st.button("Adicionar contato", use_container_width=True):
            _apply(dispatcher.open_add_contact())

    _render_delete_confirmation(dispatcher)

    if not state.contacts:
        st.info("Nenhum contato cadastrado.")
    for contact in state.contacts:
        _render_contact_row(dispatcher, contact)
        st.divider()


def render_sobre() -> None:
    st.subheader("Sobre o REDICOIN")
    st.markdown(
        "REDICOIN é um projeto conceitual: o saldo, as transferências e as apostas "
        "deste painel são simulados e nenhuma transação chega a uma blockchain."
    )


def _recipient_options(state: DashboardState) -> dict[str, str]:
    return {f"{c.name} ({shorten_address(c.address)})": c.address for c in state.contacts}


def _render_transfer_form(dispatcher: CommandDispatcher, state: DashboardState, symbol: str) -> None:
    prefilled = state.prefilled_recipient.address if state.prefilled_recipient else ""
    options = _recipient_options(state)
    with st.form("transfer_form"):
        st.markdown(f"Saldo disponível: **{format_amount(state.balance)} {symbol}**")
        picked = st.selectbox("Contato", ["—"] + list(options), index=0)
        address = st.text_input("Endereço do destinatário", value=prefilled)
        amount = st.number_input("Quantidade", min_value=0.0, step=1.0)
        sent = st.form_submit_button("Transferir")
    if sent:
        target = address.strip() or options.get(picked, "")
        _apply(dispatcher.transfer(amount, target))


def _render_contact_form(dispatcher: CommandDispatcher, state: DashboardState) -> None:
    editing = state.pending_edit
    types = list(ContactType)
    with st.form("contact_form"):
        name = st.text_input("Nome", value=editing.name if editing else "")
        username = st.text_input("Usuário", value=editing.username if editing else "")
        address = st.text_input("Endereço da carteira", value=editing.address if editing else "")
        kind = st.radio(
            "Tipo",
            types,
            index=types.index(editing.type) if editing else 0,
            format_func=lambda t: _TYPE_LABELS[t],
            horizontal=True,
        )
        saved = st.form_submit_button("Salvar")
    if saved:
        _apply(dispatcher.save_contact(ContactData.from_form(name, username, address, kind)))


def render_workflow(dispatcher: CommandDispatcher, state: DashboardState, symbol: str) -> None:
    """Render the form for whichever workflow is open, with a close button."""
    kind = state.workflow.kind
    if kind is WorkflowKind.CLOSED:
        return

    titles: dict[WorkflowKind, str] = {
        WorkflowKind.CONNECTING: "Conectar carteira",
        WorkflowKind.STAKING: "Apostar",
        WorkflowKind.TRANSFERRING: "Transferir",
        WorkflowKind.ADDING_CONTACT: "Adicionar contato",
        WorkflowKind.EDITING_CONTACT: "Editar contato",
    }
    with st.container(border=True):
        st.subheader(titles[kind])
        if kind is WorkflowKind.CONNECTING:
            st.caption("Uma carteira de demonstração será gerada para esta sessão.")
            if st.button("Conectar", key="do_connect"):
                _apply(dispatcher.connect_wallet())
        elif kind is WorkflowKind.STAKING:
            with st.form("stake_form"):
                st.markdown(f"Saldo disponível: **{format_amount(state.balance)} {symbol}**")
                amount = st.number_input("Quantidade", min_value=0.0, step=1.0)
                staked = st.form_submit_button("Apostar")
            if staked:
                _apply(dispatcher.stake(amount))
        elif kind is WorkflowKind.TRANSFERRING:
            _render_transfer_form(dispatcher, state, symbol)
        else:
            _render_contact_form(dispatcher, state)
        if st.button("Fechar", key="close_workflow"):
            _apply(dispatcher.close_workflow())


def show_notification(dispatcher: CommandDispatcher) -> Any:
    """Toast the pending notification once, then clear it."""
    note = dispatcher.consume_notification()
    if note is not None and note.visible:
        return st.toast(note.message)
    return None
