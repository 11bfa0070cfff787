"""Date schemas: single string and memorable (month/day/year) parts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, format_locale_date, resolve_message
from formkit_gov.patterns import DAY_PATTERN, MONTH_PATTERN, YEAR_PATTERN
from formkit_gov.processing import dates
from formkit_gov.schemas.base import ObjectSchema, Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import DateSchemaOptions

_FAMILY = FieldFamily.DATE.value
_MEMORABLE_FAMILY = FieldFamily.MEMORABLE_DATE.value


def _parsed(value: str) -> Any:
    # Only reached after the fatal parse rule, so never None here.
    return dates.parse_date(value)


def create_date_schema(
    options: DateSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a single-string date schema.

    Parsing is lenient: `2024-02-30` rolls over to March 1st and is accepted.
    `min_date`/`max_date` are inclusive; `past_only`/`future_only` compare
    strictly against the clock at validation time. Every configured bound is
    checked independently, so setting both `past_only` and `future_only`
    rejects every date.

    Examples:
        >>> create_date_schema().safe_check("1990-01-15").success
        True
    """
    opts = coerce_options(DateSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    rules: list[Rule] = [
        Rule(
            code="invalid",
            message=resolve_message(opts.messages, "invalid", fallback=catalog["invalid"]),
            predicate=lambda value: dates.parse_date(value) is not None,
            fatal=True,
        ),
    ]

    if opts.min_date is not None:
        min_date = opts.min_date
        lower = dates.as_utc(min_date)
        rules.append(
            Rule(
                code="min",
                message=resolve_message(
                    opts.messages,
                    "min",
                    lambda: catalog["min"].format(date=format_locale_date(min_date)),
                ),
                predicate=lambda value: _parsed(value) >= lower,
                kind=IssueKind.RANGE,
            ),
        )

    if opts.max_date is not None:
        max_date = opts.max_date
        upper = dates.as_utc(max_date)
        rules.append(
            Rule(
                code="max",
                message=resolve_message(
                    opts.messages,
                    "max",
                    lambda: catalog["max"].format(date=format_locale_date(max_date)),
                ),
                predicate=lambda value: _parsed(value) <= upper,
                kind=IssueKind.RANGE,
            ),
        )

    if opts.past_only:
        rules.append(
            Rule(
                code="past",
                message=resolve_message(opts.messages, "past", fallback=catalog["past"]),
                predicate=lambda value: _parsed(value) < dates.utc_now(),
                kind=IssueKind.RANGE,
            ),
        )

    if opts.future_only:
        rules.append(
            Rule(
                code="future",
                message=resolve_message(opts.messages, "future", fallback=catalog["future"]),
                predicate=lambda value: _parsed(value) > dates.utc_now(),
                kind=IssueKind.RANGE,
            ),
        )

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=rules,
    )


def _part_schema(pattern: Any, message: str) -> ScalarSchema:
    return ScalarSchema(
        family=_MEMORABLE_FAMILY,
        required=True,
        required_message=message,
        steps=[
            Rule(code="invalid", message=message, predicate=lambda value: pattern.fullmatch(value) is not None),
        ],
    )


def _is_existing_day(parts: Mapping[str, str]) -> bool:
    return dates.is_calendar_date(int(parts["year"]), int(parts["month"]), int(parts["day"]))


def create_memorable_date_schema(
    options: DateSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ObjectSchema:
    """Create a month/day/year schema.

    Each part is checked on its own (month 1-12, day 1-31, year 1900-2099,
    leading zero optional), then the three parts must name an existing day:
    February 30th and February 29th outside leap years are rejected rather
    than rolled over.

    Examples:
        >>> create_memorable_date_schema().safe_check({"month": "2", "day": "29", "year": "2024"}).success
        True
    """
    opts = coerce_options(DateSchemaOptions, _MEMORABLE_FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_MEMORABLE_FAMILY]

    def part_message(part: str) -> str:
        return resolve_message(opts.messages, "invalid", fallback=catalog[part])

    return ObjectSchema(
        family=_MEMORABLE_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        report_required_on_root=True,
        fields={
            "month": _part_schema(MONTH_PATTERN, part_message("month")),
            "day": _part_schema(DAY_PATTERN, part_message("day")),
            "year": _part_schema(YEAR_PATTERN, part_message("year")),
        },
        rules=[
            Rule(
                code="calendar",
                message=resolve_message(opts.messages, "invalid", fallback=catalog["invalid"]),
                predicate=_is_existing_day,
                kind=IssueKind.STRUCTURAL,
            ),
        ],
    )
