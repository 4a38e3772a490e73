"""Domain models for accounts fetched from the accounts service."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _as_text(value: Any) -> str:
    """Return a display-safe string for a raw JSON scalar."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return _as_text(value)


@dataclass(frozen=True)
class AccountMetadata:
    """Optional classification attached to an account."""

    note: str | None = None
    category: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "AccountMetadata | None":
        """Build metadata from a JSON value.

        Args:
            payload: Raw ``metadata`` value of an account object.

        Returns:
            AccountMetadata | None: None when metadata is absent or is not
            an object.
        """
        if not isinstance(payload, Mapping):
            return None
        return cls(
            note=_optional_text(payload.get("note")),
            category=_optional_text(payload.get("category")),
        )


@dataclass(frozen=True)
class Account:
    """Read-only snapshot of an account owned by the accounts service.

    Attributes:
        id: Opaque unique identifier.
        name: Display label.
        account_type: Category tag, displayed verbatim apart from casing.
        allow_negative_balance: Reserved for write-path validation.
        allow_positive_balance: Reserved for write-path validation.
        balance: Decimal amount encoded as a string.
        currency: Currency code.
        metadata: Optional note and category.
        created_at: Creation timestamp, kept as received.
        updated_at: Update timestamp, kept as received.
        version: Optimistic-concurrency token, kept as received.
    """

    id: str
    name: str
    account_type: str
    balance: str
    currency: str
    allow_negative_balance: bool = False
    allow_positive_balance: bool = False
    metadata: AccountMetadata | None = None
    created_at: str = ""
    updated_at: str = ""
    version: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Account":
        """Build an account from one decoded JSON object."""
        return cls(
            id=_as_text(payload.get("id")),
            name=_as_text(payload.get("name")),
            account_type=_as_text(payload.get("account_type")),
            balance=_as_text(payload.get("balance")),
            currency=_as_text(payload.get("currency")),
            allow_negative_balance=bool(
                payload.get("allow_negative_balance", False)
            ),
            allow_positive_balance=bool(
                payload.get("allow_positive_balance", False)
            ),
            metadata=AccountMetadata.from_payload(payload.get("metadata")),
            created_at=_as_text(payload.get("created_at")),
            updated_at=_as_text(payload.get("updated_at")),
            version=_as_text(payload.get("version")),
        )


__all__ = ["Account", "AccountMetadata"]
