"""Free text schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.schemas.base import Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import TextSchemaOptions

_FAMILY = FieldFamily.TEXT.value


def create_text_schema(
    options: TextSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a text input schema.

    Length is counted in code points. A `min` of zero or less is ignored.

    Examples:
        >>> create_text_schema(min=1, max=100).safe_check("hello").success
        True
    """
    opts = coerce_options(TextSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    rules: list[Rule] = []

    if opts.min is not None and opts.min > 0:
        minimum = opts.min
        rules.append(
            Rule(
                code="min",
                message=resolve_message(
                    opts.messages,
                    "min",
                    lambda: catalog["min"].format(min=minimum),
                ),
                predicate=lambda value: len(value) >= minimum,
                kind=IssueKind.RANGE,
            ),
        )

    if opts.max is not None:
        maximum = opts.max
        rules.append(
            Rule(
                code="max",
                message=resolve_message(
                    opts.messages,
                    "max",
                    lambda: catalog["max"].format(max=maximum),
                ),
                predicate=lambda value: len(value) <= maximum,
                kind=IssueKind.RANGE,
            ),
        )

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=rules,
    )
