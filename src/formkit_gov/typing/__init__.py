"""Typing-centric domain modules."""

from formkit_gov.typing.enums import AddressType, FieldFamily, IssueKind
from formkit_gov.typing.models import (
    UploadedFile,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)
from formkit_gov.typing.protocol import FileLike

__all__ = [
    "AddressType",
    "FieldFamily",
    "FileLike",
    "IssueKind",
    "UploadedFile",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
]
