"""Social Security number schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.patterns import SSN_FLEXIBLE_PATTERN, SSN_PATTERN
from formkit_gov.schemas.base import Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import SSNSchemaOptions

_FAMILY = FieldFamily.SSN.value


def has_no_zero_group(value: str) -> bool:
    """Return whether area, group and serial are all non-zero."""
    digits = value.replace("-", "")
    return digits[:3] != "000" and digits[3:5] != "00" and digits[5:9] != "0000"


def is_not_itin(value: str) -> bool:
    """Return whether the number does not start with 9 (reserved for ITINs)."""
    return not value.replace("-", "").startswith("9")


def create_ssn_schema(
    options: SSNSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ScalarSchema:
    """Create a Social Security number schema.

    The format check comes first; the zero-group and leading-9 checks then
    both run and report the `invalid` message. `flexible` accepts the number
    without dashes.

    Examples:
        >>> create_ssn_schema().safe_check("123-45-6789").success
        True
        >>> create_ssn_schema(flexible=True).safe_check("123456789").success
        True
    """
    opts = coerce_options(SSNSchemaOptions, _FAMILY, options, overrides)
    catalog = DEFAULT_MESSAGES[_FAMILY]
    pattern = SSN_FLEXIBLE_PATTERN if opts.flexible else SSN_PATTERN
    invalid = resolve_message(opts.messages, "invalid", fallback=catalog["invalid"])

    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        steps=[
            Rule(
                code="invalid",
                message=invalid,
                predicate=lambda value: pattern.fullmatch(value) is not None,
                fatal=True,
            ),
            Rule(code="zeroGroup", message=invalid, predicate=has_no_zero_group, kind=IssueKind.STRUCTURAL),
            Rule(code="itin", message=invalid, predicate=is_not_itin, kind=IssueKind.STRUCTURAL),
        ],
    )
