"""Domain package for account models and display rules."""

from .errors import AccountsFetchError, DeserializationError, TransportError
from .models import Account, AccountMetadata, FetchState, FetchStatus
from .services import (
    INVALID_MARKER,
    PLACEHOLDER,
    display_label,
    format_balance,
    parse_balance,
)

__all__ = [
    "Account",
    "AccountMetadata",
    "FetchState",
    "FetchStatus",
    "AccountsFetchError",
    "DeserializationError",
    "TransportError",
    "INVALID_MARKER",
    "PLACEHOLDER",
    "display_label",
    "format_balance",
    "parse_balance",
]
