"""Person name schemas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.patterns import NAME_PATTERN, NAME_SUFFIXES
from formkit_gov.schemas.base import ObjectSchema, Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import FullNameSchemaOptions, NameSchemaOptions

_FAMILY = FieldFamily.NAME.value
_FULL_FAMILY = FieldFamily.FULL_NAME.value


def create_name_schema(
    options: NameSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a schema for one name part (first, middle or last).

    A name starts with a letter and continues with letters, spaces, hyphens
    and apostrophes. Length defaults to 1-100 characters. A value shorter
    than `min` is reported with the `min` override or else the required
    message.

    Examples:
        >>> create_name_schema(max=50).safe_check("O'Brien").success
        True
    """
    opts = coerce_options(NameSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    required_message = resolve_message(opts.messages, "required", fallback=catalog["required"])
    minimum, maximum = opts.min, opts.max

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=required_message,
        steps=[
            Rule(
                code="min",
                message=resolve_message(opts.messages, "min", fallback=required_message),
                predicate=lambda value: len(value) >= minimum,
                kind=IssueKind.RANGE,
            ),
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
            Rule(
                code="invalid",
                message=resolve_message(opts.messages, "invalid", fallback=catalog["invalid"]),
                predicate=lambda value: NAME_PATTERN.fullmatch(value) is not None,
            ),
        ],
    )


def create_full_name_schema(
    options: FullNameSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ObjectSchema:
    """Create a first/middle/last/suffix schema.

    First and last follow `required`; middle is always optional; suffix is
    empty or one of `NAME_SUFFIXES`. Each part is limited to `max` (50)
    characters.
    """
    opts = coerce_options(FullNameSchemaOptions, _FULL_FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    part = {"max": opts.max, "messages": opts.messages}

    return ObjectSchema(
        family=_FULL_FAMILY,
        required=opts.required,
        fields={
            "first": create_name_schema(required=opts.required, **part),
            "middle": create_name_schema(required=False, **part),
            "last": create_name_schema(required=opts.required, **part),
            "suffix": ScalarSchema(
                family=_FULL_FAMILY,
                required=False,
                required_message=catalog["required"],
                steps=[
                    Rule(
                        code="suffix",
                        message=resolve_message(opts.messages, "suffix", fallback=catalog["suffix"]),
                        predicate=lambda value: value in NAME_SUFFIXES,
                    ),
                ],
            ),
        },
    )
