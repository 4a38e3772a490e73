"""Streamlit dashboard entry point."""

import asyncio

import streamlit as st

from src.adapters.interface.streamlit.accounts_table import (
    TABLE_STYLE,
    draw_accounts_view,
)
from src.application.use_cases.account_table import AccountTableView
from src.infrastructure.container import build_account_table_view
from src.infrastructure.logging.logger import get_usage_logger


VIEW_SESSION_KEY = "accounts_table_view"
ACCOUNTS_URL_PATH = "accounts"


def _mount_view(placeholder) -> AccountTableView:
    """Create a view, fetch once, and redraw on every state transition."""
    view = build_account_table_view()
    st.session_state[VIEW_SESSION_KEY] = view
    get_usage_logger().info("Accounts page mounted.")

    unsubscribe = view.subscribe(
        lambda rendered: draw_accounts_view(placeholder, rendered)
    )
    try:
        asyncio.run(view.mount())
    finally:
        unsubscribe()
        if not view.state.is_terminal:
            # Interrupted run: the next rerun mounts a fresh view.
            view.unmount()
    return view


def render_accounts_page() -> None:
    """Render the accounts page, reusing the fetched result across reruns."""
    st.markdown(TABLE_STYLE, unsafe_allow_html=True)
    placeholder = st.empty()

    view = st.session_state.get(VIEW_SESSION_KEY)
    if view is not None and view.state.is_terminal:
        draw_accounts_view(placeholder, view.render())
        return
    if view is not None:
        view.unmount()
    _mount_view(placeholder)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Accounts", layout="wide")
    accounts_page = st.Page(
        render_accounts_page,
        title="Accounts",
        icon=":material/account_balance:",
        url_path=ACCOUNTS_URL_PATH,
    )
    st.navigation([accounts_page]).run()


if __name__ == "__main__":  # pragma: no cover
    main()
