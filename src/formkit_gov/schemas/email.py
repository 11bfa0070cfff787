"""Email address schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.patterns import EMAIL_PATTERN
from formkit_gov.schemas.base import Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily
from formkit_gov.typing.models import EmailSchemaOptions

_FAMILY = FieldFamily.EMAIL.value


def create_email_schema(
    options: EmailSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create an email schema.

    Only the `local@domain.tld` shape is checked.
    """
    opts = coerce_options(EmailSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=[
            Rule(
                code="invalid",
                message=resolve_message(opts.messages, "invalid", fallback=catalog["invalid"]),
                predicate=lambda value: EMAIL_PATTERN.fullmatch(value) is not None,
                fatal=True,
            ),
        ],
    )
