"""HTTP adapter reading accounts from the accounts service."""

from collections.abc import Mapping

import httpx

from src.domain.errors import DeserializationError, TransportError
from src.domain.models.accounts import Account
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ACCOUNTS_PATH, AccountsApiSettings


class HttpAccountsClient:
    """Fetch accounts with a single GET request per call.

    No retries are performed. Every failure is translated into the domain
    error hierarchy so callers never see ``httpx`` exceptions.
    """

    def __init__(
        self,
        settings: AccountsApiSettings,
        transport: httpx.AsyncBaseTransport | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Base URL and timeout of the accounts service.
            transport: Optional transport, used to stub the network.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._transport = transport
        self._logger = logger or get_app_logger()

    async def fetch_accounts(self) -> tuple[Account, ...]:
        """GET the accounts endpoint and decode the JSON array.

        Returns:
            tuple[Account, ...]: Accounts in response order.

        Raises:
            TransportError: On network failure, timeout or non-2xx status.
            DeserializationError: When the body is not an array of objects.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self._settings.base_url,
                timeout=self._settings.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(ACCOUNTS_PATH)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            reason = exc.response.reason_phrase
            raise TransportError(
                f"Request to {self._settings.accounts_url} failed "
                f"with status {status} {reason}".rstrip()
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {self._settings.accounts_url} timed out "
                f"after {self._settings.timeout}s"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = str(exc) or (
                f"Could not reach {self._settings.accounts_url}"
            )
            raise TransportError(message) from exc

        self._logger.debug(
            f"GET {self._settings.accounts_url} -> {response.status_code}"
        )
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> tuple[Account, ...]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response body is not valid JSON: {exc}"
            ) from exc
        if not isinstance(payload, list):
            raise DeserializationError(
                "Expected a JSON array of accounts, "
                f"got {type(payload).__name__}"
            )
        accounts = []
        for index, item in enumerate(payload):
            if not isinstance(item, Mapping):
                raise DeserializationError(
                    f"Account at index {index} is not a JSON object"
                )
            accounts.append(Account.from_payload(item))
        return tuple(accounts)


__all__ = ["HttpAccountsClient"]
