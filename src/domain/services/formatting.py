"""Display formatting helpers for account fields."""

from dataclasses import dataclass
import re
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)


PLACEHOLDER = "—"
INVALID_MARKER = "invalid"

_CENTS = Decimal("0.01")
_WORD_START = re.compile(r"(^|\s)(\S)")


@dataclass(frozen=True)
class FormattedBalance:
    """Signed balance ready for display."""

    text: str
    is_negative: bool


def parse_balance(raw) -> Decimal | None:
    """Parse a balance string into a finite Decimal.

    Args:
        raw: Balance as received from the accounts service.

    Returns:
        Decimal | None: Parsed value, or None when it is not a finite number.
    """
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw)
    # Decimal accepts digit separators; the service never sends them.
    if "_" in text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def format_balance(raw) -> FormattedBalance | None:
    """Format a balance with an explicit sign and two decimal places.

    ``"100"`` becomes ``+100.00``, ``"-3.5"`` becomes ``-3.50`` and
    ``"0"`` becomes ``+0.00``.

    Args:
        raw: Balance as received from the accounts service.

    Returns:
        FormattedBalance | None: None when the balance is not numeric.
    """
    value = parse_balance(raw)
    if value is None:
        return None
    is_negative = value < 0
    with localcontext() as ctx:
        # Quantizing needs room for every integer digit plus the cents.
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        # Half-up on the exact decimal: "1.005" gives 1.01, unlike binary
        # float rounding which gives 1.00.
        magnitude = abs(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if is_negative else "+"
    return FormattedBalance(
        text=f"{sign}{magnitude:.2f}",
        is_negative=is_negative,
    )


def display_label(value: str) -> str:
    """Uppercase the first letter of each word, leaving the rest as is.

    ``"credit card"`` becomes ``"Credit Card"`` and ``"ASSET"`` stays
    ``"ASSET"``; the stored value is not altered.
    """
    return _WORD_START.sub(
        lambda match: match.group(1) + match.group(2).upper(),
        value,
    )


__all__ = [
    "PLACEHOLDER",
    "INVALID_MARKER",
    "FormattedBalance",
    "parse_balance",
    "format_balance",
    "display_label",
]
