"""Fetch lifecycle for the accounts view.

The data source is an explicit state machine owned by one view instance:

* it starts ``Idle`` and moves to ``Loading`` when activated;
* it ends in ``Success`` or ``Error`` after exactly one request;
* a cancelled activation never publishes a state after cancellation.
"""

from collections.abc import Callable

from src.application.ports.accounts_client import AccountsClientPort
from src.domain.errors import AccountsFetchError
from src.domain.models.fetch_state import FetchState, FetchStatus
from src.infrastructure.logging.logger import get_app_logger


StateListener = Callable[[FetchState], None]


class CancellationToken:
    """Flag checked before every state update of an activation."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class AccountDataSource:
    """Expose the accounts fetch as an observable three-state result."""

    def __init__(self, client: AccountsClientPort, logger=None) -> None:
        """Initialize the data source.

        Args:
            client: Port performing the network read.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._client = client
        self._logger = logger or get_app_logger()
        self._state = FetchState.idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called on every state transition.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def load(self, token: CancellationToken | None = None) -> FetchState:
        """Run the single fetch of this activation.

        Args:
            token: Cancellation token checked before each state update.

        Returns:
            FetchState: State after the fetch, or the last published state
            when the activation was cancelled.

        Raises:
            RuntimeError: If the data source was already activated.
            Exception: Unexpected client failures, re-raised after the
                Error state is published.
        """
        if self._state.status is not FetchStatus.IDLE:
            raise RuntimeError("Accounts data source was already activated.")
        token = token or CancellationToken()
        if token.cancelled:
            return self._state

        self._publish(FetchState.loading())
        self._logger.info("Fetching accounts.")
        try:
            accounts = await self._client.fetch_accounts()
        except AccountsFetchError as exc:
            if token.cancelled:
                self._logger.info("Accounts fetch cancelled; error dropped.")
                return self._state
            self._logger.error(f"Accounts fetch failed: {exc}")
            self._publish(FetchState.failure(str(exc)))
            return self._state
        except Exception as exc:
            # Unexpected failures still end the Loading state before
            # propagating.
            if not token.cancelled:
                message = str(exc) or type(exc).__name__
                self._logger.error(f"Accounts fetch crashed: {message}")
                self._publish(FetchState.failure(message))
            raise

        if token.cancelled:
            self._logger.info("Accounts fetch cancelled; result dropped.")
            return self._state
        self._logger.info(f"Fetched {len(accounts)} accounts.")
        self._publish(FetchState.success(accounts))
        return self._state

    def _publish(self, state: FetchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


__all__ = ["AccountDataSource", "CancellationToken", "StateListener"]
