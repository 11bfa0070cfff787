"""US dollar amount schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, format_amount, resolve_message
from formkit_gov.processing.normalization import parse_amount, strip_currency
from formkit_gov.schemas.base import Rule, ScalarSchema, Transform, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import CurrencySchemaOptions

_FAMILY = FieldFamily.CURRENCY.value


def create_currency_schema(
    options: CurrencySchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a dollar amount schema.

    `$` and `,` are stripped before parsing, so `"$1,234.56"` is accepted as
    `1234.56`. Negative amounts are rejected unless `allow_negative` is set;
    `min` and `max` bound the parsed amount.

    Examples:
        >>> create_currency_schema().check("$1,234.56")
        1234.56
    """
    opts = coerce_options(CurrencySchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    steps: list[Rule | Transform] = [
        Transform(name="strip", func=strip_currency),
        Rule(
            code="invalid",
            message=resolve_message(opts.messages, "invalid", fallback=catalog["invalid"]),
            predicate=lambda value: parse_amount(value) is not None,
            fatal=True,
        ),
        Transform(name="parse", func=parse_amount),
    ]

    if not opts.allow_negative:
        steps.append(
            Rule(
                code="negative",
                message=resolve_message(opts.messages, "negative", fallback=catalog["negative"]),
                predicate=lambda value: value >= 0,
                kind=IssueKind.RANGE,
            ),
        )

    if opts.min is not None:
        minimum = opts.min
        steps.append(
            Rule(
                code="min",
                message=resolve_message(
                    opts.messages,
                    "min",
                    lambda: catalog["min"].format(amount=format_amount(minimum)),
                ),
                predicate=lambda value: value >= minimum,
                kind=IssueKind.RANGE,
            ),
        )

    if opts.max is not None:
        maximum = opts.max
        steps.append(
            Rule(
                code="max",
                message=resolve_message(
                    opts.messages,
                    "max",
                    lambda: catalog["max"].format(amount=format_amount(maximum)),
                ),
                predicate=lambda value: value <= maximum,
                kind=IssueKind.RANGE,
            ),
        )

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=steps,
    )
