from __future__ import annotations

from dataclasses import dataclass

from formkit_gov.schemas import ArraySchema, create_file_schema
from formkit_gov.typing.models import DEFAULT_MAX_FILE_SIZE, UploadedFile

PDF = UploadedFile(name="form.pdf", size=1024, type="application/pdf")


@dataclass
class _BrowserFile:
    name: str
    size: int
    type: str


def test_single_file_accepts_file_like_objects() -> None:
    schema = create_file_schema()
    assert schema.check(PDF) == PDF
    assert schema.safe_check(_BrowserFile("scan.png", 10, "image/png")).success is True


def test_single_file_size_limit_is_inclusive() -> None:
    schema = create_file_schema()
    at_limit = UploadedFile(name="big.pdf", size=DEFAULT_MAX_FILE_SIZE, type="application/pdf")
    over_limit = at_limit.model_copy(update={"size": DEFAULT_MAX_FILE_SIZE + 1})
    assert schema.safe_check(at_limit).success is True
    assert schema.safe_check(over_limit).errors[0].message == "File must be smaller than 25 MB"


def test_single_file_type_check() -> None:
    result = create_file_schema(allowed_types=["application/pdf"]).safe_check(
        UploadedFile(name="notes.txt", size=10, type="text/plain"),
    )
    assert result.errors[0].message == "File type must be one of: application/pdf"


def test_size_and_type_are_both_reported() -> None:
    result = create_file_schema(max_size=10).safe_check(UploadedFile(name="a.txt", size=11, type="text/plain"))
    assert [issue.code for issue in result.errors] == ["maxSize", "type"]


def test_single_file_rejects_lists_and_other_values() -> None:
    schema = create_file_schema()
    for value in ([PDF], "form.pdf", {"name": "form.pdf", "size": 1, "type": "application/pdf"}):
        assert schema.safe_check(value).errors[0].message == "Invalid file"
    assert schema.safe_check(_BrowserFile("a.pdf", True, "application/pdf")).success is False


def test_single_file_required() -> None:
    assert create_file_schema().safe_check(None).errors[0].message == "A file is required"
    assert create_file_schema(required=False).safe_check(None).success is True


def test_multiple_files() -> None:
    schema = create_file_schema(max_files=2)
    assert isinstance(schema, ArraySchema)
    assert schema.check([PDF, PDF]) == [PDF, PDF]

    too_many = schema.safe_check([PDF, PDF, PDF])
    assert too_many.errors[0].message == "Maximum 2 files allowed"

    empty = schema.safe_check([])
    assert empty.errors[0].message == "At least one file is required"
    assert create_file_schema(max_files=2, required=False).safe_check([]).success is True


def test_multiple_files_report_item_index() -> None:
    bad = UploadedFile(name="x.exe", size=1, type="application/octet-stream")
    result = create_file_schema(max_files=3).safe_check([PDF, bad])
    assert result.errors[0].path == (1,)


def test_multiple_files_reject_single_object() -> None:
    result = create_file_schema(max_files=3).safe_check(PDF)
    assert result.errors[0].message == "Expected array, received UploadedFile"


def test_default_schema_rejects_plain_text_files() -> None:
    result = create_file_schema().safe_check(UploadedFile(name="notes.txt", size=10, type="text/plain"))
    assert [issue.code for issue in result.errors] == ["type"]
