"""Standalone predicates and formatters for single values."""

from __future__ import annotations

from datetime import date, datetime

from formkit_gov.patterns import PHONE_PATTERN, SSN_PATTERN, VA_FILE_NUMBER_PATTERN, ZIP_CODE_PLUS4_PATTERN, matches
from formkit_gov.processing import dates
from formkit_gov.processing.normalization import digits_only
from formkit_gov.schemas.ssn import has_no_zero_group, is_not_itin

DateInput = str | date | datetime


def validate_ssn(value: str) -> bool:
    """Return whether `value` is a dashed SSN with no zero group and no leading 9."""
    if not matches(SSN_PATTERN, value):
        return False
    return has_no_zero_group(value) and is_not_itin(value)


def validate_va_file_number(value: str) -> bool:
    """Return whether `value` is a VA file number (optional C, 7-9 digits)."""
    return matches(VA_FILE_NUMBER_PATTERN, value)


def validate_phone_number(value: str) -> bool:
    """Return whether `value` is a formatted US phone number."""
    return matches(PHONE_PATTERN, value)


def validate_zip_code(value: str) -> bool:
    """Return whether `value` is a ZIP or ZIP+4 code."""
    return matches(ZIP_CODE_PLUS4_PATTERN, value)


def validate_date_in_past(value: DateInput) -> bool:
    """Return whether `value` is strictly before now; unparseable input is False."""
    moment = dates.coerce_date(value)
    return moment is not None and moment < dates.utc_now()


def validate_date_in_future(value: DateInput) -> bool:
    """Return whether `value` is strictly after now; unparseable input is False."""
    moment = dates.coerce_date(value)
    return moment is not None and moment > dates.utc_now()


def validate_minimum_age(birth_date: DateInput, min_age: int) -> bool:
    """Return whether someone born on `birth_date` is at least `min_age` years old today.

    Args:
        birth_date (DateInput): Birth date.
        min_age (int): Minimum age in whole years.

    Returns:
        bool: True once the birthday of the `min_age`-th year has been reached.
    """
    birth = dates.coerce_date(birth_date)
    if birth is None:
        return False
    today = dates.utc_now()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age >= min_age


def format_phone_number(value: str) -> str:
    """Format 10 digits as `(XXX) XXX-XXXX`; other input is returned unchanged."""
    digits = digits_only(value)
    if len(digits) != 10:  # noqa: PLR2004
        return value
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def format_ssn(value: str) -> str:
    """Format 9 digits as `XXX-XX-XXXX`; other input is returned unchanged."""
    digits = digits_only(value)
    if len(digits) != 9:  # noqa: PLR2004
        return value
    return f"{digits[:3]}-{digits[3:5]}-{digits[5:]}"


def mask_ssn(value: str) -> str:
    """Mask 9 digits as `***-**-XXXX`; other input is returned unchanged."""
    digits = digits_only(value)
    if len(digits) != 9:  # noqa: PLR2004
        return value
    return f"***-**-{digits[5:]}"
