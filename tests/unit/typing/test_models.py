from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from formkit_gov.typing import FileLike
from formkit_gov.typing.enums import AddressType, IssueKind
from formkit_gov.typing.models import (
    DEFAULT_ALLOWED_TYPES,
    AddressSchemaOptions,
    DateSchemaOptions,
    FileSchemaOptions,
    TextSchemaOptions,
    UploadedFile,
    ValidationFailure,
    ValidationIssue,
    ValidationSuccess,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_options_accept_camel_case_aliases_and_ignore_unknown_keys() -> None:
    options = AddressSchemaOptions.model_validate({"type": "military", "includeLine3": True, "label": "Home"})

    assert options.type == AddressType.MILITARY
    assert options.include_line3 is True
    assert options.required is True


def test_options_treat_none_messages_as_empty() -> None:
    assert TextSchemaOptions(messages=None).messages == {}


def test_options_are_frozen() -> None:
    options = DateSchemaOptions(past_only=True)
    with pytest.raises(ValidationError):
        options.past_only = False  # type: ignore[misc]


def test_file_options_defaults_and_bounds() -> None:
    options = FileSchemaOptions()
    assert options.max_size == 25 * 1024 * 1024
    assert options.allowed_types == DEFAULT_ALLOWED_TYPES
    assert options.max_files == 1

    with pytest.raises(ValidationError):
        FileSchemaOptions(max_files=0)


def test_issue_prefix_nests_path() -> None:
    issue = ValidationIssue(path=("city",), message="City is required", code="required", kind=IssueKind.REQUIRED)

    assert issue.with_prefix("mailing").path == ("mailing", "city")
    assert issue.path == ("city",)


def test_issue_message_cannot_be_empty() -> None:
    with pytest.raises(ValidationError):
        ValidationIssue(message="", code="invalid")


def test_failure_requires_at_least_one_issue() -> None:
    with pytest.raises(ValidationError):
        ValidationFailure(errors=())


def test_failure_helpers() -> None:
    failure = ValidationFailure(
        errors=(
            ValidationIssue(path=("ssn",), message="First", code="zeroGroup"),
            ValidationIssue(path=("ssn",), message="Second", code="itin"),
        ),
    )

    assert failure.first_message == "First"
    assert failure.flatten() == {"ssn": "First"}
    assert ValidationSuccess(data="x").success is True


def test_uploaded_file_from_path(tmp_path: Path) -> None:
    pdf = tmp_path / "form.pdf"
    pdf.write_bytes(b"%PDF-1.7")

    uploaded = UploadedFile.from_path(pdf)

    assert uploaded == UploadedFile(name="form.pdf", size=8, type="application/pdf")
    assert isinstance(uploaded, FileLike)
