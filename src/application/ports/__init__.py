"""Application ports package."""

from .accounts_client import AccountsClientPort

__all__ = ["AccountsClientPort"]
