"""Calendar parsing helpers shared by date schemas and validators."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta

from dateutil import parser as date_parser
from dateutil.parser import ParserError

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_US_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)


def utc_now() -> datetime:
    """Return the current moment; patched in tests to pin the clock."""
    return datetime.now(UTC)


def _rollover(year: int, month: int, day: int) -> datetime | None:
    # Days past the end of the month roll into the next one (2024-02-30 -> 2024-03-01).
    if not 1 <= month <= 12 or not 1 <= day <= 31:  # noqa: PLR2004
        return None
    try:
        return datetime(year, month, 1, tzinfo=UTC) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def as_utc(value: date | datetime) -> datetime:
    """Return an aware UTC datetime; naive values and plain dates are read as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


def parse_date(value: str) -> datetime | None:
    """Parse a date string leniently.

    `YYYY-MM-DD` and `MM/DD/YYYY` accept any day from 1 to 31 and roll over
    past the end of the month. Timestamps go through `datetime.fromisoformat`,
    anything else through `dateutil`.

    Args:
        value (str): Candidate date string.

    Returns:
        datetime | None: Aware UTC datetime, or None when unparseable.
    """
    text = value.strip()
    if not text:
        return None

    iso = _ISO_DATE.fullmatch(text)
    if iso:
        return _rollover(int(iso.group(1)), int(iso.group(2)), int(iso.group(3)))

    us = _US_DATE.fullmatch(text)
    if us:
        return _rollover(int(us.group(3)), int(us.group(1)), int(us.group(2)))

    try:
        return as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        pass

    try:
        return as_utc(date_parser.parse(text))
    except (ParserError, ValueError, OverflowError):
        return None


def coerce_date(value: str | date | datetime) -> datetime | None:
    """Return `value` as aware UTC datetime, parsing strings; None when out of range."""
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, date):
        try:
            return as_utc(value)
        except OverflowError:
            return None
    return None


def is_calendar_date(year: int, month: int, day: int) -> bool:
    """Return whether the three parts name an existing calendar day."""
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
