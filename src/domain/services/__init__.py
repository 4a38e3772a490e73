"""Domain services package."""

from .formatting import (
    INVALID_MARKER,
    PLACEHOLDER,
    FormattedBalance,
    display_label,
    format_balance,
    parse_balance,
)

__all__ = [
    "INVALID_MARKER",
    "PLACEHOLDER",
    "FormattedBalance",
    "display_label",
    "format_balance",
    "parse_balance",
]
