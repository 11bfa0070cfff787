"""Core domain model exports."""

from formkit_gov.typing.models.files import UploadedFile
from formkit_gov.typing.models.options import (
    COMMON_FILE_TYPES,
    DEFAULT_ALLOWED_TYPES,
    DEFAULT_MAX_FILE_SIZE,
    AddressSchemaOptions,
    CurrencySchemaOptions,
    DateSchemaOptions,
    EmailSchemaOptions,
    FileSchemaOptions,
    FullNameSchemaOptions,
    NameSchemaOptions,
    PhoneSchemaOptions,
    SchemaOptions,
    SSNSchemaOptions,
    TextSchemaOptions,
)
from formkit_gov.typing.models.results import (
    PathSegment,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

__all__ = [
    "COMMON_FILE_TYPES",
    "DEFAULT_ALLOWED_TYPES",
    "DEFAULT_MAX_FILE_SIZE",
    "AddressSchemaOptions",
    "CurrencySchemaOptions",
    "DateSchemaOptions",
    "EmailSchemaOptions",
    "FileSchemaOptions",
    "FullNameSchemaOptions",
    "NameSchemaOptions",
    "PathSegment",
    "PhoneSchemaOptions",
    "SSNSchemaOptions",
    "SchemaOptions",
    "TextSchemaOptions",
    "UploadedFile",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
]
