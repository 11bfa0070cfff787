"""formkit-gov package.

Validation schemas for government form fields.
"""

from formkit_gov.exceptions import (
    PackageError,
    SchemaOptionsError,
    SchemaValidationError,
    SettingsError,
)
from formkit_gov.logging import configure_logging, get_logger
from formkit_gov.messages import resolve_message
from formkit_gov.results import flatten_issues, validate_with_schema
from formkit_gov.schemas import (
    FieldSchema,
    combine_schemas,
    create_address_schema,
    create_currency_schema,
    create_date_schema,
    create_email_schema,
    create_file_schema,
    create_full_name_schema,
    create_memorable_date_schema,
    create_name_schema,
    create_phone_schema,
    create_ssn_schema,
    create_text_schema,
)
from formkit_gov.settings import Settings, get_settings
from formkit_gov.typing import (
    AddressType,
    FileLike,
    IssueKind,
    UploadedFile,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)
from formkit_gov.utils import (
    create_error_messages,
    debounce,
    deep_clone,
    format_file_size,
    is_empty,
    remove_empty_values,
)
from formkit_gov.validators import (
    format_phone_number,
    format_ssn,
    mask_ssn,
    validate_date_in_future,
    validate_date_in_past,
    validate_minimum_age,
    validate_phone_number,
    validate_ssn,
    validate_va_file_number,
    validate_zip_code,
)

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("formkit_gov")

__all__ = [
    "AddressType",
    "FieldSchema",
    "FileLike",
    "IssueKind",
    "PackageError",
    "SchemaOptionsError",
    "SchemaValidationError",
    "Settings",
    "SettingsError",
    "UploadedFile",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "__version__",
    "combine_schemas",
    "configure_logging",
    "create_address_schema",
    "create_error_messages",
    "create_currency_schema",
    "create_date_schema",
    "create_email_schema",
    "create_file_schema",
    "create_full_name_schema",
    "create_memorable_date_schema",
    "create_name_schema",
    "create_phone_schema",
    "create_ssn_schema",
    "create_text_schema",
    "debounce",
    "deep_clone",
    "flatten_issues",
    "format_file_size",
    "format_phone_number",
    "format_ssn",
    "get_logger",
    "is_empty",
    "logger",
    "mask_ssn",
    "remove_empty_values",
    "resolve_message",
    "validate_date_in_future",
    "validate_date_in_past",
    "validate_minimum_age",
    "validate_phone_number",
    "validate_ssn",
    "validate_va_file_number",
    "validate_with_schema",
    "validate_zip_code",
]
