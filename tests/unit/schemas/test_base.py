from __future__ import annotations

import pytest

from formkit_gov.exceptions import SchemaOptionsError, SchemaValidationError
from formkit_gov.schemas import (
    SCHEMA_FACTORIES,
    ObjectSchema,
    Rule,
    ScalarSchema,
    Transform,
    combine_schemas,
    create_address_schema,
    create_email_schema,
    create_full_name_schema,
    create_text_schema,
)
from formkit_gov.schemas.base import coerce_options, run_steps
from formkit_gov.typing.enums import FieldFamily
from formkit_gov.typing.models import TextSchemaOptions


def test_run_steps_stops_on_fatal_rule() -> None:
    steps = [
        Rule(code="digits", message="Digits only", predicate=str.isdigit, fatal=True),
        Rule(code="length", message="Too long", predicate=lambda value: len(value) < 3),
    ]

    issues, _ = run_steps("abcd", steps)

    assert [issue.code for issue in issues] == ["digits"]


def test_run_steps_skips_transforms_after_an_issue() -> None:
    calls: list[str] = []

    def _record(value: str) -> str:
        calls.append(value)
        return value.upper()

    steps = [
        Rule(code="short", message="Too long", predicate=lambda value: len(value) < 2),
        Transform(name="upper", func=_record),
    ]

    issues, value = run_steps("abc", steps)

    assert len(issues) == 1
    assert value == "abc"
    assert calls == []


def test_safe_check_never_raises(mocker) -> None:
    schema = ScalarSchema(
        family="text",
        required=True,
        required_message="Required",
        steps=[Rule(code="boom", message="Boom", predicate=mocker.Mock(side_effect=RuntimeError("bug")))],
    )

    result = schema.safe_check("value")

    assert result.success is False
    assert result.errors[0].message == "Invalid input"


def test_check_raises_with_issues() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        create_email_schema().check("nope")
    assert exc_info.value.issues[0].message == "Enter a valid email address"


def test_schemas_are_reusable_and_deterministic() -> None:
    schema = create_address_schema()
    value = {"street": "1 Elm St", "city": "", "state": "ZZ", "zipCode": "1"}

    first = schema.safe_check(value)
    second = schema.safe_check(value)

    assert first == second
    assert schema.is_valid(value) is False


def test_object_schema_drops_unknown_keys() -> None:
    schema = create_full_name_schema()
    data = schema.check({"first": "Jane", "last": "Doe", "nickname": "JD"})
    assert data == {"first": "Jane", "last": "Doe"}


def test_object_rules_run_only_when_parts_pass() -> None:
    schema = ObjectSchema(
        family="range",
        required=True,
        fields={"low": create_text_schema(), "high": create_text_schema()},
        rules=[Rule(code="order", message="Low must not exceed high", predicate=lambda v: v["low"] <= v["high"])],
    )

    assert schema.safe_check({"low": "b", "high": "a"}).errors[0].message == "Low must not exceed high"
    assert [issue.code for issue in schema.safe_check({"low": "b", "high": ""}).errors] == ["required"]


def test_combine_schemas_merges_fields() -> None:
    combined = combine_schemas(create_full_name_schema(), create_address_schema())

    result = combined.safe_check({"first": "Jane", "last": "Doe", "street": "1 Elm St", "city": "Austin"})

    assert {issue.path for issue in result.errors} == {("state",), ("zipCode",)}


def test_coerce_options_rejects_unsupported_types() -> None:
    with pytest.raises(SchemaOptionsError):
        coerce_options(TextSchemaOptions, "text", ["max", 3], {})


def test_coerce_options_keywords_override_mapping() -> None:
    options = coerce_options(TextSchemaOptions, "text", {"max": 3, "required": False}, {"max": 5})
    assert options.max == 5
    assert options.required is False


@pytest.mark.parametrize(
    ("family", "empty", "message"),
    [
        ("text", "", "This field is required"),
        ("email", "", "Email address is required"),
        ("phone", "", "Phone number is required"),
        ("ssn", "", "Social Security number is required"),
        ("date", "", "Date is required"),
        ("memorable_date", {"month": "", "day": "", "year": ""}, "Date is required"),
        ("currency", "", "Amount is required"),
        ("name", "", "Name is required"),
        ("file", None, "A file is required"),
    ],
)
def test_presence_gate_for_every_family(family: str, empty: object, message: str) -> None:
    factory = SCHEMA_FACTORIES[FieldFamily.from_str(family)]

    assert factory(required=False).safe_check(empty).success is True
    assert factory(required=False).safe_check(None).success is True
    assert factory().safe_check(empty).errors[0].message == message
