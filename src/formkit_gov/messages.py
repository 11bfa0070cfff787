"""Error message catalog and three-tier message resolution.

A message resolves as: caller override for the rule, then a default computed
from the schema options (for example the configured minimum), then a
hardcoded fallback. The strings in `DEFAULT_MESSAGES` are user-facing and
kept verbatim for consumers that match on them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime
from types import MappingProxyType

from formkit_gov.logging import get_logger

logger = get_logger(__name__)

GENERIC_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "required": "This field is required",
        "invalid": "Invalid input",
        "invalidType": "Invalid input",
        "min": "Value is too small",
        "max": "Value is too large",
    },
)

DEFAULT_MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "text": MappingProxyType(
            {
                "required": "This field is required",
                "min": "Must be at least {min} characters",
                "max": "Must be no more than {max} characters",
            },
        ),
        "email": MappingProxyType(
            {
                "required": "Email address is required",
                "invalid": "Enter a valid email address",
            },
        ),
        "phone": MappingProxyType(
            {
                "required": "Phone number is required",
                "invalid": "Enter a valid 10-digit phone number",
                "invalidInternational": "Enter a valid phone number",
            },
        ),
        "ssn": MappingProxyType(
            {
                "required": "Social Security number is required",
                "invalid": "Enter a valid Social Security number (like 123-45-6789)",
            },
        ),
        "date": MappingProxyType(
            {
                "required": "Date is required",
                "invalid": "Enter a valid date",
                "min": "Date must be on or after {date}",
                "max": "Date must be on or before {date}",
                "past": "Date must be in the past",
                "future": "Date must be in the future",
            },
        ),
        "memorable_date": MappingProxyType(
            {
                "required": "Date is required",
                "month": "Enter a valid month (1-12)",
                "day": "Enter a valid day (1-31)",
                "year": "Enter a valid 4-digit year",
                "invalid": "Enter a valid date",
            },
        ),
        "currency": MappingProxyType(
            {
                "required": "Amount is required",
                "invalid": "Enter a valid dollar amount",
                "negative": "Amount cannot be negative",
                "min": "Amount must be at least ${amount}",
                "max": "Amount must be no more than ${amount}",
            },
        ),
        "name": MappingProxyType(
            {
                "required": "Name is required",
                "invalid": "Name can only contain letters, spaces, hyphens, and apostrophes",
                "max": "Name must be no more than {max} characters",
                "suffix": "Select a valid suffix",
            },
        ),
        "address": MappingProxyType(
            {
                "street": "Street address is required",
                "city": "City is required",
                "state": "State is required",
                "zipCode": "ZIP code is required",
                "country": "Country is required",
                "statePattern": "Enter a valid 2-letter state code",
                "stateInvalid": "Enter a valid US state",
                "militaryCity": "Enter APO, FPO, or DPO",
                "militaryState": "Enter AA, AE, or AP",
                "zipInvalid": "Enter a valid ZIP code",
            },
        ),
        "file": MappingProxyType(
            {
                "required": "At least one file is required",
                "requiredSingle": "A file is required",
                "invalidFile": "Invalid file",
                "maxSize": "File must be smaller than {size}",
                "type": "File type must be one of: {types}",
                "maxFiles": "Maximum {max} files allowed",
            },
        ),
        "generic": MappingProxyType(
            {
                "invalidType": "Expected {expected}, received {received}",
            },
        ),
    },
)


def resolve_message(
    overrides: Mapping[str, str] | None,
    rule: str,
    compute_default: Callable[[], str | None] | None = None,
    fallback: str | None = None,
) -> str:
    """Return the message for a failed rule.

    Args:
        overrides: Caller supplied messages keyed by rule name.
        rule: Rule name, e.g. `required`, `min`, `stateInvalid`.
        compute_default: Builds a default from live option values.
        fallback: Hardcoded message used when no default can be computed.

    Returns:
        str: A non-empty message.
    """
    if overrides:
        override = overrides.get(rule)
        if isinstance(override, str) and override:
            return override

    if compute_default is not None:
        try:
            computed = compute_default()
        except Exception:
            logger.debug("Default message computation failed", extra={"rule": rule}, exc_info=True)
        else:
            if computed:
                return computed

    if fallback:
        return fallback
    return GENERIC_MESSAGES.get(rule, GENERIC_MESSAGES["invalid"])


def default_message(family: str, rule: str, **values: object) -> str:
    """Return the catalog message for `family`/`rule`, formatted with `values`.

    Raises:
        KeyError: If the catalog has no such entry or a placeholder is missing.
    """
    template = DEFAULT_MESSAGES[family][rule]
    return template.format(**values) if values else template


def describe_type(value: object) -> str:
    """Return a form-author friendly name for the type of `value`."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, datetime | date):
        return "date"
    return type(value).__name__


def invalid_type_message(expected: str, value: object) -> str:
    """Return the generic wrong-type message."""
    return default_message("generic", "invalidType", expected=expected, received=describe_type(value))


def format_locale_date(value: date | datetime) -> str:
    """Render a date the way `en-US` short dates read, e.g. `1/5/2024`."""
    return f"{value.month}/{value.day}/{value.year}"


def format_amount(value: float) -> str:
    """Render an amount with thousands separators and at most three decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
