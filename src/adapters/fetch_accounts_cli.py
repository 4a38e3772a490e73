"""CLI adapter printing the accounts table in the terminal.

This module mounts the same view model as the Streamlit page, waits for
the single fetch to finish, and prints either a plain-text table or the
error message.
"""

import asyncio
import sys

from src.application.use_cases.account_table import AccountsView, RenderMode
from src.infrastructure.container import build_account_table_view
from src.infrastructure.logging.logger import get_app_logger


def format_text_table(view: AccountsView) -> str:
    """Lay out a table view as aligned plain-text columns.

    Args:
        view: Table-mode view to format.

    Returns:
        str: Header, separator and one line per row.
    """
    lines = [[cell.text for cell in row.cells] for row in view.rows]
    widths = [len(header) for header in view.headers]
    for line in lines:
        widths = [max(width, len(text)) for width, text in zip(widths, line)]

    def _join(values: list[str]) -> str:
        return "  ".join(
            value.ljust(width) for value, width in zip(values, widths)
        ).rstrip()

    output = [
        _join(list(view.headers)),
        _join(["-" * width for width in widths]),
    ]
    if not lines:
        output.append(view.empty_message or "")
    output.extend(_join(line) for line in lines)
    return "\n".join(output)


def main() -> None:
    """Fetch the accounts once and print them."""
    logger = get_app_logger()
    view = build_account_table_view()

    rendered = asyncio.run(view.mount())

    if rendered.mode is RenderMode.ERROR:
        logger.error(f"Accounts CLI failed: {rendered.error_message}")
        print(
            f"{rendered.error_title}: {rendered.error_message}",
            file=sys.stderr,
        )
        raise SystemExit(1)
    print(format_text_table(rendered))


if __name__ == "__main__":  # pragma: no cover
    main()
