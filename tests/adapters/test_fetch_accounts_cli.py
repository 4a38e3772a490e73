"""Tests for the fetch_accounts_cli adapter."""

from unittest.mock import MagicMock

import pytest

from src.adapters import fetch_accounts_cli
from src.application.use_cases.account_data_source import AccountDataSource
from src.application.use_cases.account_table import (
    AccountTableView,
    build_accounts_view,
)
from src.domain.errors import TransportError
from src.domain.models.accounts import Account
from src.domain.models.fetch_state import FetchState


class _FakeClient:
    def __init__(self, result=(), error=None) -> None:
        self.result = result
        self.error = error

    async def fetch_accounts(self):
        if self.error is not None:
            raise self.error
        return self.result


def _patch_view(monkeypatch, client) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(fetch_accounts_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        fetch_accounts_cli,
        "build_account_table_view",
        lambda: AccountTableView(
            AccountDataSource(client, logger=fake_logger),
            logger=fake_logger,
        ),
    )
    return fake_logger


def test_main_prints_table(monkeypatch, capsys):
    """The CLI should print headers and one line per account."""
    accounts = (
        Account(
            id="1",
            name="Checking",
            account_type="asset",
            balance="-3.5",
            currency="USD",
        ),
    )
    _patch_view(monkeypatch, _FakeClient(result=accounts))

    fetch_accounts_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == [
        "Name",
        "Type",
        "Balance",
        "Currency",
        "Category",
        "Note",
    ]
    assert lines[2].split() == ["Checking", "Asset", "-3.50", "USD", "—", "—"]


def test_main_prints_empty_message(monkeypatch, capsys):
    """An empty result prints the empty-state line."""
    _patch_view(monkeypatch, _FakeClient(result=()))

    fetch_accounts_cli.main()

    assert "No accounts found." in capsys.readouterr().out


def test_main_exits_with_error(monkeypatch, capsys):
    """Fetch failures go to stderr with a non-zero exit status."""
    fake_logger = _patch_view(
        monkeypatch,
        _FakeClient(error=TransportError("Connection refused")),
    )

    with pytest.raises(SystemExit) as excinfo:
        fetch_accounts_cli.main()

    assert excinfo.value.code == 1
    assert "Error: Connection refused" in capsys.readouterr().err
    fake_logger.error.assert_called()


def test_format_text_table_aligns_columns():
    """Columns are padded to the widest value."""
    view = build_accounts_view(
        FetchState.success(
            [
                Account(
                    id="1",
                    name="A very long account name",
                    account_type="asset",
                    balance="1",
                    currency="EUR",
                )
            ]
        ),
        logger=MagicMock(),
    )

    lines = fetch_accounts_cli.format_text_table(view).splitlines()

    assert lines[0].index("Type") == lines[2].index("Asset")
    assert set(lines[1].replace(" ", "")) == {"-"}
