"""Presentation model for the accounts table.

Columns are declared once as a static configuration of field accessors,
pure formatters and fallbacks. ``build_accounts_view`` maps a fetch state
to one of three render modes: skeleton, error panel, or table.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.application.use_cases.account_data_source import (
    AccountDataSource,
    CancellationToken,
)
from src.domain.models.accounts import Account
from src.domain.models.fetch_state import FetchState, FetchStatus
from src.domain.services.formatting import (
    INVALID_MARKER,
    PLACEHOLDER,
    display_label,
    format_balance,
)
from src.infrastructure.logging.logger import get_app_logger


SKELETON_ROWS = 5
VIEW_TITLE = "Accounts"
VIEW_DESCRIPTION = "Manage and view all your financial accounts."
ERROR_TITLE = "Error"
EMPTY_MESSAGE = "No accounts found."


class CellKind(str, Enum):
    """Presentation primitive used to render a cell."""

    STRONG = "strong"
    BADGE = "badge"
    AMOUNT = "amount"
    MUTED = "muted"


class BadgeVariant(str, Enum):
    DEFAULT = "default"
    OUTLINE = "outline"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class Cell:
    """Display value and styling of one table cell."""

    text: str
    kind: CellKind
    classes: tuple[str, ...] = ()
    variant: BadgeVariant | None = None


@dataclass(frozen=True)
class ColumnSpec:
    """Static column definition.

    Attributes:
        key: Stable column identifier.
        header: Header label.
        field: Accessor returning the raw value from an account.
        formatter: Pure function returning a cell, or None when the value
            is absent or unusable.
        fallback: Cell rendered when the formatter yields nothing.
    """

    key: str
    header: str
    field: Callable[[Account], Any]
    formatter: Callable[[Any], Cell | None]
    fallback: Cell


@dataclass(frozen=True)
class TableRow:
    key: str
    cells: tuple[Cell, ...]


class RenderMode(str, Enum):
    SKELETON = "skeleton"
    ERROR = "error"
    TABLE = "table"


@dataclass(frozen=True)
class AccountsView:
    """Everything the interface needs to draw the accounts page."""

    mode: RenderMode
    title: str = VIEW_TITLE
    description: str = VIEW_DESCRIPTION
    skeleton_rows: int = 0
    error_title: str | None = None
    error_message: str | None = None
    headers: tuple[str, ...] = ()
    rows: tuple[TableRow, ...] = ()
    empty_message: str | None = None
    column_count: int = 0


MUTED_PLACEHOLDER = Cell(
    text=PLACEHOLDER,
    kind=CellKind.MUTED,
    classes=("text-muted", "text-sm"),
)
INVALID_BALANCE = Cell(
    text=INVALID_MARKER,
    kind=CellKind.AMOUNT,
    classes=("amount-invalid",),
)


def _format_name(value: str) -> Cell:
    return Cell(text=value, kind=CellKind.STRONG, classes=("font-medium",))


def _format_account_type(value: str) -> Cell:
    return Cell(
        text=display_label(value),
        kind=CellKind.BADGE,
        variant=BadgeVariant.OUTLINE,
    )


def _format_balance(value: str) -> Cell | None:
    formatted = format_balance(value)
    if formatted is None:
        return None
    tone = "amount-negative" if formatted.is_negative else "amount-positive"
    return Cell(
        text=formatted.text,
        kind=CellKind.AMOUNT,
        classes=(tone, "font-semibold"),
    )


def _format_currency(value: str) -> Cell:
    return Cell(
        text=value,
        kind=CellKind.BADGE,
        variant=BadgeVariant.SECONDARY,
    )


def _format_category(value: str | None) -> Cell | None:
    match value:
        case str() if value:
            return Cell(
                text=value,
                kind=CellKind.BADGE,
                variant=BadgeVariant.DEFAULT,
            )
        case _:
            return None


def _format_note(value: str | None) -> Cell | None:
    match value:
        case str() if value:
            return Cell(
                text=value,
                kind=CellKind.MUTED,
                classes=("text-muted", "text-sm"),
            )
        case _:
            return None


def _metadata_category(account: Account) -> str | None:
    return account.metadata.category if account.metadata else None


def _metadata_note(account: Account) -> str | None:
    return account.metadata.note if account.metadata else None


ACCOUNT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec(
        key="name",
        header="Name",
        field=lambda account: account.name,
        formatter=_format_name,
        fallback=MUTED_PLACEHOLDER,
    ),
    ColumnSpec(
        key="account_type",
        header="Type",
        field=lambda account: account.account_type,
        formatter=_format_account_type,
        fallback=MUTED_PLACEHOLDER,
    ),
    ColumnSpec(
        key="balance",
        header="Balance",
        field=lambda account: account.balance,
        formatter=_format_balance,
        fallback=INVALID_BALANCE,
    ),
    ColumnSpec(
        key="currency",
        header="Currency",
        field=lambda account: account.currency,
        formatter=_format_currency,
        fallback=MUTED_PLACEHOLDER,
    ),
    ColumnSpec(
        key="category",
        header="Category",
        field=_metadata_category,
        formatter=_format_category,
        fallback=MUTED_PLACEHOLDER,
    ),
    ColumnSpec(
        key="note",
        header="Note",
        field=_metadata_note,
        formatter=_format_note,
        fallback=MUTED_PLACEHOLDER,
    ),
)


def build_cell(column: ColumnSpec, account: Account, logger=None) -> Cell:
    """Render one column of one account, isolating formatting failures.

    Args:
        column: Column definition to apply.
        account: Account to read from.
        logger: Optional logger used to report malformed values.

    Returns:
        Cell: Formatted cell or the column fallback.
    """
    try:
        cell = column.formatter(column.field(account))
    except (ValueError, TypeError, AttributeError) as exc:
        (logger or get_app_logger()).warning(
            f"Could not format column={column.key} "
            f"for account id={account.id}: {exc}"
        )
        return column.fallback
    if cell is None:
        if column.key == "balance":
            (logger or get_app_logger()).warning(
                f"Non-numeric balance for account id={account.id}: "
                f"{account.balance!r}"
            )
        return column.fallback
    return cell


def build_row(
    account: Account,
    columns: Sequence[ColumnSpec] = ACCOUNT_COLUMNS,
    logger=None,
) -> TableRow:
    """Apply every column to an account, left to right."""
    return TableRow(
        key=account.id,
        cells=tuple(build_cell(column, account, logger) for column in columns),
    )


def build_accounts_view(
    state: FetchState,
    columns: Sequence[ColumnSpec] = ACCOUNT_COLUMNS,
    logger=None,
) -> AccountsView:
    """Select the render mode and content for a fetch state.

    Args:
        state: Current fetch state.
        columns: Column definitions, defaults to the account columns.
        logger: Optional logger passed to the cell builders.

    Returns:
        AccountsView: Skeleton while idle or loading, an error panel on
        failure, otherwise the table with either rows or an empty message.
    """
    if state.status is FetchStatus.ERROR:
        return AccountsView(
            mode=RenderMode.ERROR,
            error_title=ERROR_TITLE,
            error_message=state.error or "",
        )
    if state.status is not FetchStatus.SUCCESS:
        return AccountsView(
            mode=RenderMode.SKELETON,
            skeleton_rows=SKELETON_ROWS,
        )

    accounts = state.data or ()
    headers = tuple(column.header for column in columns)
    rows = tuple(build_row(account, columns, logger) for account in accounts)
    return AccountsView(
        mode=RenderMode.TABLE,
        headers=headers,
        rows=rows,
        empty_message=None if rows else EMPTY_MESSAGE,
        column_count=len(headers),
    )


class AccountTableView:
    """View instance owning one data source activation.

    ``mount`` runs the single fetch, ``unmount`` cancels it so a late
    result is never applied, and ``render`` returns the view for the
    current state.
    """

    def __init__(self, data_source: AccountDataSource, logger=None) -> None:
        self._data_source = data_source
        self._logger = logger
        self._token = CancellationToken()
        self._rendered: tuple[FetchState, AccountsView] | None = None

    @property
    def state(self) -> FetchState:
        return self._data_source.state

    @property
    def is_unmounted(self) -> bool:
        return self._token.cancelled

    def subscribe(self, listener: Callable[[AccountsView], None]):
        """Call ``listener`` with a fresh view on every state transition."""
        return self._data_source.subscribe(
            lambda state: listener(self._render_state(state))
        )

    async def mount(self) -> AccountsView:
        """Trigger the fetch and return the view for the resulting state."""
        await self._data_source.load(self._token)
        return self.render()

    def unmount(self) -> None:
        self._token.cancel()

    def render(self) -> AccountsView:
        return self._render_state(self._data_source.state)

    def _render_state(self, state: FetchState) -> AccountsView:
        if self._rendered is not None and self._rendered[0] is state:
            return self._rendered[1]
        view = build_accounts_view(state, logger=self._logger)
        self._rendered = (state, view)
        return view


__all__ = [
    "ACCOUNT_COLUMNS",
    "AccountTableView",
    "AccountsView",
    "BadgeVariant",
    "Cell",
    "CellKind",
    "ColumnSpec",
    "EMPTY_MESSAGE",
    "ERROR_TITLE",
    "RenderMode",
    "SKELETON_ROWS",
    "TableRow",
    "build_accounts_view",
    "build_cell",
    "build_row",
]
