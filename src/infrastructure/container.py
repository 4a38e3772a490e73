"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_client import AccountsClientPort
from src.application.use_cases.account_data_source import AccountDataSource
from src.application.use_cases.account_table import AccountTableView
from src.infrastructure.accounts_api_client import HttpAccountsClient
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AccountsApiSettings


def build_accounts_client(
    settings: AccountsApiSettings | None = None,
) -> AccountsClientPort:
    """Return the HTTP accounts client."""
    resolved_settings = settings or AccountsApiSettings.from_env()
    return HttpAccountsClient(resolved_settings, logger=get_app_logger())


def build_account_data_source(
    client: AccountsClientPort | None = None,
) -> AccountDataSource:
    """Return a fresh data source; one per view mount."""
    resolved_client = client or build_accounts_client()
    return AccountDataSource(resolved_client, logger=get_app_logger())


def build_account_table_view(
    client: AccountsClientPort | None = None,
) -> AccountTableView:
    """Return a view instance owning its own data source."""
    return AccountTableView(
        build_account_data_source(client),
        logger=get_app_logger(),
    )


__all__ = [
    "build_accounts_client",
    "build_account_data_source",
    "build_account_table_view",
]
