"""
REDICOIN wallet dashboard — Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so storage path and balance settings are picked up
from src.utils.config import load_config, initial_balance, token_symbol
load_config()

from src.orchestration.dispatcher import CommandDispatcher
from src.services.mock_data import build_mock_data
from src.utils.logger import setup_from_config, get_logger
from src.ui.dashboard import (
    VIEWS,
    render_header,
    render_painel,
    render_reputacao,
    render_sobre,
    render_workflow,
    show_notification,
)

setup_from_config()
log = get_logger()

st.set_page_config(page_title="REDICOIN", layout="wide")

# Mock market data is regenerated per session, the core state lives in session_state
if "dispatcher" not in st.session_state:
    st.session_state.dispatcher = CommandDispatcher(balance=initial_balance())
    log.info("New dashboard session")
if "mock_data" not in st.session_state:
    st.session_state.mock_data = build_mock_data()
if "delete_token" not in st.session_state:
    st.session_state.delete_token = None

dispatcher: CommandDispatcher = st.session_state.dispatcher
symbol = token_symbol()
state = dispatcher.snapshot()

render_header(dispatcher, state)
with st.sidebar:
    view = st.radio("Navegação", list(VIEWS), format_func=VIEWS.get, key="view")

render_workflow(dispatcher, state, symbol)

if view == "reputacao":
    render_reputacao(dispatcher, state)
elif view == "sobre":
    render_sobre()
else:
    render_painel(dispatcher, state, st.session_state.mock_data, symbol)

show_notification(dispatcher)

st.caption("© Ecossistema REDICOIN. Todos os direitos reservados. Um projeto conceitual.")
