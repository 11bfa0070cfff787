"""Mailing address schemas (US, military, international)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.patterns import (
    MILITARY_CITIES,
    MILITARY_STATES,
    STATE_ABBR_PATTERN,
    US_STATES,
    ZIP_CODE_PLUS4_PATTERN,
)
from formkit_gov.schemas.base import FieldSchema, ObjectSchema, Rule, ScalarSchema, Step, coerce_options
from formkit_gov.typing.enums import AddressType, FieldFamily, IssueKind
from formkit_gov.typing.models import AddressSchemaOptions

_FAMILY = FieldFamily.ADDRESS.value
_CATALOG = DEFAULT_MESSAGES[_FAMILY]


def _line(opts: AddressSchemaOptions, name: str, steps: Iterable[Step] = ()) -> ScalarSchema:
    return ScalarSchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=_CATALOG[name]),
        steps=steps,
    )


def _disabled_line() -> ScalarSchema:
    # Blank is accepted; anything else is rejected as unexpected.
    return ScalarSchema(
        family=_FAMILY,
        required=False,
        required_message=_CATALOG["street"],
        expected="undefined",
        accepts=lambda value: False,
    )


def _optional_line() -> ScalarSchema:
    return ScalarSchema(family=_FAMILY, required=False, required_message=_CATALOG["street"])


def _zip_rule(opts: AddressSchemaOptions) -> Rule:
    return Rule(
        code="zipInvalid",
        message=resolve_message(opts.messages, "zipInvalid", fallback=_CATALOG["zipInvalid"]),
        predicate=lambda value: ZIP_CODE_PLUS4_PATTERN.fullmatch(value) is not None,
    )


def _street_lines(opts: AddressSchemaOptions, *, allow_line3: bool = True) -> dict[str, FieldSchema]:
    lines: dict[str, FieldSchema] = {
        "street": _line(opts, "street"),
        "street2": _optional_line() if opts.include_line2 else _disabled_line(),
    }
    if allow_line3:
        lines["street3"] = _optional_line() if opts.include_line3 else _disabled_line()
    return lines


def _us_address(opts: AddressSchemaOptions) -> dict[str, FieldSchema]:
    state_rules = [
        Rule(
            code="statePattern",
            message=resolve_message(opts.messages, "stateInvalid", fallback=_CATALOG["statePattern"]),
            predicate=lambda value: STATE_ABBR_PATTERN.fullmatch(value) is not None,
            fatal=True,
        ),
        Rule(
            code="stateInvalid",
            message=resolve_message(opts.messages, "stateInvalid", fallback=_CATALOG["stateInvalid"]),
            predicate=lambda value: value in US_STATES,
        ),
    ]
    return {
        **_street_lines(opts),
        "city": _line(opts, "city"),
        "state": _line(opts, "state", state_rules),
        "zipCode": _line(opts, "zipCode", [_zip_rule(opts)]),
    }


def _military_address(opts: AddressSchemaOptions) -> dict[str, FieldSchema]:
    city_rule = Rule(
        code="cityInvalid",
        message=resolve_message(opts.messages, "cityInvalid", fallback=_CATALOG["militaryCity"]),
        predicate=lambda value: value.upper() in MILITARY_CITIES,
        kind=IssueKind.STRUCTURAL,
    )
    state_rule = Rule(
        code="stateInvalid",
        message=resolve_message(opts.messages, "stateInvalid", fallback=_CATALOG["militaryState"]),
        predicate=lambda value: value in MILITARY_STATES,
        kind=IssueKind.STRUCTURAL,
    )
    return {
        **_street_lines(opts, allow_line3=False),
        "city": _line(opts, "city", [city_rule]),
        "state": _line(opts, "state", [state_rule]),
        "zipCode": _line(opts, "zipCode", [_zip_rule(opts)]),
    }


def _international_address(opts: AddressSchemaOptions) -> dict[str, FieldSchema]:
    return {
        **_street_lines(opts),
        "city": _line(opts, "city"),
        "province": _optional_line(),
        "postalCode": _optional_line(),
        "country": _line(opts, "country"),
    }


_BUILDERS = {
    AddressType.US: _us_address,
    AddressType.MILITARY: _military_address,
    AddressType.INTERNATIONAL: _international_address,
}


def create_address_schema(
    options: AddressSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> ObjectSchema:
    """Create an address schema for the shape selected by `type`.

    - `us`: street, optional street2/street3, city, state (a US state,
      DC or territory) and ZIP or ZIP+4.
    - `military`: city is APO, FPO or DPO (any case) and state AA, AE or AP.
    - `international`: street, city and country; province and postal code
      are free text.

    When `required` is false every part may be left blank, but non-blank
    parts are still format checked.

    Examples:
        >>> schema = create_address_schema(type="military")
        >>> schema.safe_check({"street": "Unit 1", "city": "apo", "state": "AE", "zipCode": "09012"}).success
        True
    """
    opts = coerce_options(AddressSchemaOptions, _FAMILY, options, overrides)
    return ObjectSchema(
        family=_FAMILY,
        required=opts.required,
        fields=_BUILDERS[opts.type](opts),
        required_message=resolve_message(opts.messages, "required", fallback=_CATALOG["street"]),
    )
