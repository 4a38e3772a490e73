"""Domain models package."""

from .accounts import Account, AccountMetadata
from .fetch_state import FetchState, FetchStatus

__all__ = [
    "Account",
    "AccountMetadata",
    "FetchState",
    "FetchStatus",
]
