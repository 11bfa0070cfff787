"""Per-family schema option records.

Every option has a default, unknown keys are ignored and both snake_case
names and the camelCase aliases used by form definitions are accepted.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from formkit_gov.typing.enums import AddressType

#: 25 MiB
DEFAULT_MAX_FILE_SIZE = 25 * 1024 * 1024

#: MIME types by common file extension.
COMMON_FILE_TYPES: dict[str, str] = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "txt": "text/plain",
}

DEFAULT_ALLOWED_TYPES: tuple[str, ...] = (
    COMMON_FILE_TYPES["pdf"],
    COMMON_FILE_TYPES["doc"],
    COMMON_FILE_TYPES["docx"],
    COMMON_FILE_TYPES["jpg"],
    COMMON_FILE_TYPES["png"],
)


class SchemaOptions(BaseModel):
    """Options shared by every field family."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    required: bool = True
    messages: dict[str, str] = Field(default_factory=dict)

    @field_validator("messages", mode="before")
    @classmethod
    def _none_means_no_overrides(cls, value: object) -> object:
        return {} if value is None else value


class TextSchemaOptions(SchemaOptions):
    """Free text input."""

    min: int | None = None
    max: int | None = None


class EmailSchemaOptions(SchemaOptions):
    """Email address input."""


class PhoneSchemaOptions(SchemaOptions):
    """Phone number input."""

    international: bool = False


class SSNSchemaOptions(SchemaOptions):
    """Social Security number input."""

    flexible: bool = False


class DateSchemaOptions(SchemaOptions):
    """Single-string and memorable (month/day/year) dates."""

    min_date: datetime | date | None = None
    max_date: datetime | date | None = None
    past_only: bool = False
    future_only: bool = False


class CurrencySchemaOptions(SchemaOptions):
    """US dollar amount input."""

    min: float | None = None
    max: float | None = None
    allow_negative: bool = False


class NameSchemaOptions(SchemaOptions):
    """Single name part (first, middle, last)."""

    min: int = 1
    max: int = 100


class FullNameSchemaOptions(SchemaOptions):
    """First, middle, last and suffix composite."""

    max: int = 50


class AddressSchemaOptions(SchemaOptions):
    """US, military or international mailing address."""

    type: AddressType = AddressType.US
    include_line2: bool = True
    include_line3: bool = False


class FileSchemaOptions(SchemaOptions):
    """Single or multiple file upload."""

    max_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, ge=0)
    allowed_types: tuple[str, ...] = DEFAULT_ALLOWED_TYPES
    max_files: int = Field(default=1, ge=1)
