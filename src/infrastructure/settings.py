"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import httpx

from src.infrastructure.logging.logger import get_app_logger


DEFAULT_ACCOUNTS_API_URL = "http://localhost:5000"
DEFAULT_TIMEOUT_SECONDS = 10.0
ACCOUNTS_PATH = "/accounts"


@dataclass(frozen=True)
class AccountsApiSettings:
    """Settings for reaching the accounts service.

    Attributes:
        base_url: Scheme, host and port of the accounts service.
        timeout: Request timeout in seconds.
    """

    base_url: str = DEFAULT_ACCOUNTS_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        self._validate_base_url(self.base_url)

    @property
    def accounts_url(self) -> str:
        return f"{self.base_url}{ACCOUNTS_PATH}"

    @classmethod
    def from_env(cls) -> "AccountsApiSettings":
        """Build settings from environment variables.

        Returns:
            AccountsApiSettings: Settings sourced from environment variables.
        """
        raw_url = os.getenv("ACCOUNTS_API_URL", "").strip()
        base_url = raw_url.rstrip("/") or DEFAULT_ACCOUNTS_API_URL
        timeout = cls._parse_timeout(
            os.getenv("ACCOUNTS_API_TIMEOUT"),
            logger=get_app_logger(),
        )
        return cls(base_url=base_url, timeout=timeout)

    @staticmethod
    def _validate_base_url(base_url: str) -> None:
        """Reject base URLs that cannot address an HTTP service.

        Args:
            base_url: Configured base URL.

        Raises:
            RuntimeError: If the URL is malformed, not http(s), has no host,
                or carries a port outside 1-65535.
        """
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise RuntimeError(
                f"Invalid ACCOUNTS_API_URL={base_url!r}: {exc}"
            ) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise RuntimeError(
                f"Invalid ACCOUNTS_API_URL={base_url!r}: "
                "expected an http(s) URL with a host"
            )
        if url.port is not None and not 0 < url.port <= 65535:
            raise RuntimeError(
                f"Invalid ACCOUNTS_API_URL={base_url!r}: "
                f"port {url.port} is out of range"
            )

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the timeout, falling back to the default when invalid.

        Args:
            raw_timeout: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if raw_timeout is None or not raw_timeout.strip():
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid ACCOUNTS_API_TIMEOUT={raw_timeout!r}; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning(
                f"ACCOUNTS_API_TIMEOUT must be positive, got {timeout}; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["AccountsApiSettings", "ACCOUNTS_PATH"]
