"""Tests for the Streamlit accounts table rendering."""

from unittest.mock import MagicMock

from src.adapters.interface.streamlit import accounts_table
from src.application.use_cases.account_table import build_accounts_view
from src.domain.models.accounts import Account, AccountMetadata
from src.domain.models.fetch_state import FetchState


def _account(account_id: str, balance: str = "1") -> Account:
    return Account(
        id=account_id,
        name=f"<b>{account_id}</b>",
        account_type="asset",
        balance=balance,
        currency="USD",
        metadata=AccountMetadata(note=None, category="savings"),
    )


def test_skeleton_html_renders_requested_blocks():
    html = accounts_table.skeleton_html(5)
    assert html.count('class="accounts-skeleton"') == 5
    assert "<table" not in html


def test_table_html_renders_rows_in_order_and_escapes():
    """Rows keep order and user text is escaped."""
    view = build_accounts_view(
        FetchState.success([_account("b", "-2"), _account("a")]),
        logger=MagicMock(),
    )

    html = accounts_table.table_html(view)

    assert html.count("<tr data-key=") == 2
    assert html.index('data-key="b"') < html.index('data-key="a"')
    assert "&lt;b&gt;b&lt;/b&gt;" in html
    assert "<b>b</b>" not in html
    assert 'class="amount-negative font-semibold">-2.00<' in html
    assert 'class="badge badge-default">savings<' in html
    assert html.count("<th>") == 6


def test_table_html_empty_state_spans_all_columns():
    view = build_accounts_view(FetchState.success([]))

    html = accounts_table.table_html(view)

    assert html.count("<th>") == 6
    assert 'colspan="6"' in html
    assert "No accounts found." in html


def test_draw_error_view_shows_single_alert():
    """Errors render one alert and no card."""
    placeholder = MagicMock()
    root = placeholder.container.return_value

    accounts_table.draw_accounts_view(
        placeholder,
        build_accounts_view(FetchState.failure("Connection refused")),
    )

    root.error.assert_called_once()
    body = root.error.call_args.args[0]
    assert "**Error**" in body
    assert "Connection refused" in body
    assert root.error.call_args.kwargs["icon"] == accounts_table.ERROR_ICON
    root.container.assert_not_called()


def test_draw_loading_view_shows_card_with_skeleton():
    placeholder = MagicMock()
    card = placeholder.container.return_value.container.return_value

    accounts_table.draw_accounts_view(
        placeholder,
        build_accounts_view(FetchState.loading()),
    )

    card.subheader.assert_called_once_with("Accounts")
    card.caption.assert_called_once_with(
        "Manage and view all your financial accounts."
    )
    markup = card.markdown.call_args.args[0]
    assert markup.count('class="accounts-skeleton"') == 5
    assert "<table" not in markup
