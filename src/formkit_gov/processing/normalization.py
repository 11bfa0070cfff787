"""Value normalization helpers."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def digits_only(value: str) -> str:
    """Return the ASCII digits of `value`."""
    return "".join(ch for ch in value if "0" <= ch <= "9")


def strip_currency(value: str) -> str:
    """Remove dollar signs and thousands separators."""
    return value.replace("$", "").replace(",", "")


def parse_amount(value: str) -> float | None:
    """Parse a stripped dollar amount.

    Args:
        value (str): Amount without `$` or `,`.

    Returns:
        float | None: Parsed amount, or None when not a finite number.
    """
    # Decimal accepts digit-group underscores (`1_000`); dollar amounts do not.
    if "_" in value:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    amount = float(number)
    return amount if math.isfinite(amount) else None


def format_file_size(size: int) -> str:
    """Format a byte count with 1024-based units and at most two decimals.

    Examples:
        >>> format_file_size(1536)
        '1.5 KB'
        >>> format_file_size(25 * 1024 * 1024)
        '25 MB'
    """
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    scaled = f"{size / 1024**exponent:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_SIZE_UNITS[exponent]}"
