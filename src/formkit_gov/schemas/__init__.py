"""Pre-built schemas for common government form fields."""

from collections.abc import Callable
from types import MappingProxyType

from formkit_gov.schemas.address import create_address_schema
from formkit_gov.schemas.base import (
    ArraySchema,
    FieldSchema,
    ObjectSchema,
    Rule,
    ScalarSchema,
    Transform,
    combine_schemas,
)
from formkit_gov.schemas.currency import create_currency_schema
from formkit_gov.schemas.date import create_date_schema, create_memorable_date_schema
from formkit_gov.schemas.email import create_email_schema
from formkit_gov.schemas.file import create_file_schema
from formkit_gov.schemas.name import create_full_name_schema, create_name_schema
from formkit_gov.schemas.phone import create_phone_schema
from formkit_gov.schemas.ssn import create_ssn_schema
from formkit_gov.schemas.text import create_text_schema
from formkit_gov.typing.enums import FieldFamily

SCHEMA_FACTORIES: MappingProxyType[FieldFamily, Callable[..., FieldSchema]] = MappingProxyType(
    {
        FieldFamily.TEXT: create_text_schema,
        FieldFamily.EMAIL: create_email_schema,
        FieldFamily.PHONE: create_phone_schema,
        FieldFamily.SSN: create_ssn_schema,
        FieldFamily.DATE: create_date_schema,
        FieldFamily.MEMORABLE_DATE: create_memorable_date_schema,
        FieldFamily.CURRENCY: create_currency_schema,
        FieldFamily.NAME: create_name_schema,
        FieldFamily.FULL_NAME: create_full_name_schema,
        FieldFamily.ADDRESS: create_address_schema,
        FieldFamily.FILE: create_file_schema,
    },
)

__all__ = [
    "SCHEMA_FACTORIES",
    "ArraySchema",
    "FieldSchema",
    "ObjectSchema",
    "Rule",
    "ScalarSchema",
    "Transform",
    "combine_schemas",
    "create_address_schema",
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
]
