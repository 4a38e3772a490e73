"""Errors raised while fetching accounts."""


class AccountsFetchError(RuntimeError):
    """Base error for a failed accounts fetch."""


class TransportError(AccountsFetchError):
    """Network failure, timeout, or non-success HTTP status."""


class DeserializationError(AccountsFetchError):
    """Response body is not a JSON array of account objects."""


__all__ = ["AccountsFetchError", "TransportError", "DeserializationError"]
