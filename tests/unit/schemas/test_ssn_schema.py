from __future__ import annotations

import pytest

from formkit_gov.schemas import create_ssn_schema
from formkit_gov.typing.enums import IssueKind

INVALID = "Enter a valid Social Security number (like 123-45-6789)"


def test_accepts_valid_ssn() -> None:
    result = create_ssn_schema().safe_check("123-45-6789")
    assert result.success is True
    assert result.data == "123-45-6789"


@pytest.mark.parametrize("value", ["000-45-6789", "123-00-6789", "123-45-0000", "912-45-6789"])
def test_rejects_structurally_invalid_numbers(value: str) -> None:
    result = create_ssn_schema().safe_check(value)
    assert result.success is False
    assert result.errors[0].message == INVALID
    assert result.errors[0].kind == IssueKind.STRUCTURAL


def test_all_structural_refinements_run() -> None:
    result = create_ssn_schema().safe_check("900-00-0000")
    assert [issue.code for issue in result.errors] == ["zeroGroup", "itin"]


def test_format_failure_stops_structural_checks() -> None:
    result = create_ssn_schema().safe_check("000000000")
    assert [issue.code for issue in result.errors] == ["invalid"]


def test_flexible_accepts_missing_dashes() -> None:
    assert create_ssn_schema().safe_check("123456789").success is False
    assert create_ssn_schema(flexible=True).safe_check("123456789").success is True
    assert create_ssn_schema(flexible=True).safe_check("000456789").success is False


def test_required_and_optional() -> None:
    assert create_ssn_schema().safe_check("").errors[0].message == "Social Security number is required"
    assert create_ssn_schema(required=False).safe_check("").success is True
    assert create_ssn_schema(required=False).safe_check("12-345-6789").success is False
