"""Request lifecycle states for the accounts fetch."""

from dataclasses import dataclass
from enum import Enum

from .accounts import Account


class FetchStatus(str, Enum):
    """Lifecycle of a single fetch activation."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    """Immutable snapshot of the fetch lifecycle.

    Attributes:
        status: Current lifecycle status.
        data: Accounts in response order, only set on success.
        error: Human-readable message, only set on error.
    """

    status: FetchStatus
    data: tuple[Account, ...] | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> "FetchState":
        return cls(status=FetchStatus.IDLE)

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(status=FetchStatus.LOADING)

    @classmethod
    def success(cls, accounts) -> "FetchState":
        return cls(status=FetchStatus.SUCCESS, data=tuple(accounts))

    @classmethod
    def failure(cls, message: str) -> "FetchState":
        return cls(status=FetchStatus.ERROR, error=message)

    @property
    def is_terminal(self) -> bool:
        """True once the fetch has succeeded or failed."""
        return self.status in (FetchStatus.SUCCESS, FetchStatus.ERROR)


__all__ = ["FetchStatus", "FetchState"]
