"""Phone number schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.patterns import INTERNATIONAL_PHONE_PATTERN, PHONE_PATTERN
from formkit_gov.schemas.base import Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily
from formkit_gov.typing.models import PhoneSchemaOptions

_FAMILY = FieldFamily.PHONE.value


def create_phone_schema(
    options: PhoneSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a phone number schema.

    US numbers are `(555) 123-4567` or `555-123-4567`; with `international`
    an optional `+` followed by 2 to 15 digits, not starting with 0.
    """
    opts = coerce_options(PhoneSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    pattern = INTERNATIONAL_PHONE_PATTERN if opts.international else PHONE_PATTERN
    fallback = catalog["invalidInternational"] if opts.international else catalog["invalid"]

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=[
            Rule(
                code="invalid",
                message=resolve_message(opts.messages, "invalid", fallback=fallback),
                predicate=lambda value: pattern.fullmatch(value) is not None,
                fatal=True,
            ),
        ],
    )
