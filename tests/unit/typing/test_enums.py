from __future__ import annotations

import pytest

from formkit_gov.typing.enums import AddressType, FieldFamily, IssueKind


def test_field_family_from_str() -> None:
    assert FieldFamily.from_str("memorable_date") == FieldFamily.MEMORABLE_DATE


def test_field_family_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Expected one of"):
        FieldFamily.from_str("memorable-date")


def test_enums_compare_as_strings() -> None:
    assert AddressType.MILITARY == "military"
    assert IssueKind.RANGE.to_str() == "range"
