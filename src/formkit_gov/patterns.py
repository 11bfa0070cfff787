"""Shared regular expressions for field validation.

Every pattern is anchored at both ends (use `matches`, which calls
`fullmatch`) and compiled with `re.ASCII` so that `\\d` and `\\s` only accept
ASCII digits and whitespace. Patterns carry no field configuration.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any

# Social Security number, XXX-XX-XXXX.
SSN_PATTERN = re.compile(r"\d{3}-\d{2}-\d{4}", re.ASCII)
SSN_FLEXIBLE_PATTERN = re.compile(r"\d{3}-?\d{2}-?\d{4}", re.ASCII)

# VA file number, optionally prefixed with C for claim numbers.
VA_FILE_NUMBER_PATTERN = re.compile(r"[Cc]?\d{7,9}", re.ASCII)

PHONE_PATTERN = re.compile(r"\(\d{3}\)\s?\d{3}-\d{4}|\d{3}-\d{3}-\d{4}", re.ASCII)
PHONE_DIGITS_PATTERN = re.compile(r"\d{10}", re.ASCII)
INTERNATIONAL_PHONE_PATTERN = re.compile(r"\+?[1-9]\d{1,14}", re.ASCII)

ZIP_CODE_PATTERN = re.compile(r"\d{5}", re.ASCII)
ZIP_CODE_PLUS4_PATTERN = re.compile(r"\d{5}(-\d{4})?", re.ASCII)

# Shape check only: local@domain.tld. Consecutive dots are accepted.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.ASCII)

# Calendar correctness is checked by the date schemas, not here.
DATE_MMDDYYYY_PATTERN = re.compile(r"(0[1-9]|1[0-2])/(0[1-9]|[12]\d|3[01])/\d{4}", re.ASCII)
DATE_ISO_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])", re.ASCII)

YEAR_PATTERN = re.compile(r"(19|20)\d{2}", re.ASCII)
MONTH_PATTERN = re.compile(r"0?[1-9]|1[0-2]", re.ASCII)
DAY_PATTERN = re.compile(r"0?[1-9]|[12]\d|3[01]", re.ASCII)

# Military service number, format varies by branch and era.
SERVICE_NUMBER_PATTERN = re.compile(r"[A-Za-z]?\d{6,9}", re.ASCII)

CURRENCY_PATTERN = re.compile(r"\d{1,3}(,\d{3})*(\.\d{2})?", re.ASCII)
PERCENTAGE_PATTERN = re.compile(r"100(\.0{1,2})?|\d{1,2}(\.\d{1,2})?", re.ASCII)

NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z\s'-]*", re.ASCII)
STREET_ADDRESS_PATTERN = re.compile(r"[a-zA-Z0-9\s.,#'-]+", re.ASCII)
CITY_PATTERN = re.compile(r"[a-zA-Z\s'-]+", re.ASCII)
MILITARY_CITY_PATTERN = re.compile(r"APO|FPO|DPO", re.ASCII | re.IGNORECASE)

# Shape only; membership is checked against US_STATES / MILITARY_STATES.
STATE_ABBR_PATTERN = re.compile(r"[A-Z]{2}", re.ASCII)

ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+", re.ASCII)

PATTERNS: MappingProxyType[str, re.Pattern[str]] = MappingProxyType(
    {
        "ssn": SSN_PATTERN,
        "ssnFlexible": SSN_FLEXIBLE_PATTERN,
        "vaFileNumber": VA_FILE_NUMBER_PATTERN,
        "phone": PHONE_PATTERN,
        "phoneDigits": PHONE_DIGITS_PATTERN,
        "internationalPhone": INTERNATIONAL_PHONE_PATTERN,
        "zipCode": ZIP_CODE_PATTERN,
        "zipCodePlus4": ZIP_CODE_PLUS4_PATTERN,
        "email": EMAIL_PATTERN,
        "dateMmddyyyy": DATE_MMDDYYYY_PATTERN,
        "dateIso": DATE_ISO_PATTERN,
        "year": YEAR_PATTERN,
        "month": MONTH_PATTERN,
        "day": DAY_PATTERN,
        "serviceNumber": SERVICE_NUMBER_PATTERN,
        "currency": CURRENCY_PATTERN,
        "percentage": PERCENTAGE_PATTERN,
        "name": NAME_PATTERN,
        "streetAddress": STREET_ADDRESS_PATTERN,
        "city": CITY_PATTERN,
        "militaryCity": MILITARY_CITY_PATTERN,
        "stateAbbr": STATE_ABBR_PATTERN,
        "alphanumeric": ALPHANUMERIC_PATTERN,
    },
)

# 50 states, DC and the five inhabited territories.
US_STATES: tuple[str, ...] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC", "PR", "VI", "GU", "AS", "MP",
)  # fmt: skip

MILITARY_STATES: tuple[str, ...] = ("AA", "AE", "AP")
MILITARY_CITIES: tuple[str, ...] = ("APO", "FPO", "DPO")

NAME_SUFFIXES: tuple[str, ...] = ("Jr.", "Sr.", "II", "III", "IV", "V")


def matches(pattern: re.Pattern[str], value: Any) -> bool:
    """Return whether `value` is a string matching `pattern` end to end."""
    return isinstance(value, str) and pattern.fullmatch(value) is not None
