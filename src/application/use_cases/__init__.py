"""Application use cases package."""

from .account_data_source import AccountDataSource, CancellationToken
from .account_table import (
    ACCOUNT_COLUMNS,
    AccountTableView,
    AccountsView,
    RenderMode,
    build_accounts_view,
)

__all__ = [
    "AccountDataSource",
    "CancellationToken",
    "ACCOUNT_COLUMNS",
    "AccountTableView",
    "AccountsView",
    "RenderMode",
    "build_accounts_view",
]
