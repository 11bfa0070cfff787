"""Processing helpers exports."""

from formkit_gov.processing.dates import coerce_date, is_calendar_date, parse_date, utc_now
from formkit_gov.processing.normalization import (
    digits_only,
    format_file_size,
    parse_amount,
    strip_currency,
)

__all__ = [
    "coerce_date",
    "digits_only",
    "format_file_size",
    "is_calendar_date",
    "parse_amount",
    "parse_date",
    "strip_currency",
    "utc_now",
]
