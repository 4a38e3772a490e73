"""Port for reading accounts from the remote accounts service."""

from typing import Protocol

from src.domain.models.accounts import Account


class AccountsClientPort(Protocol):
    """Port exposing a single read of every account.

    Implementations raise ``AccountsFetchError`` subclasses on failure.
    """

    async def fetch_accounts(self) -> tuple[Account, ...]:
        """Return the accounts in the order the service sent them."""


__all__ = ["AccountsClientPort"]
