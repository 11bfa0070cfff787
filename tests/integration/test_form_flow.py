from __future__ import annotations

import pytest

from formkit_gov import (
    UploadedFile,
    create_address_schema,
    create_currency_schema,
    create_email_schema,
    create_file_schema,
    create_full_name_schema,
    create_memorable_date_schema,
    create_ssn_schema,
    validate_with_schema,
)


@pytest.fixture
def claim_form() -> dict:
    return {
        "fullName": create_full_name_schema(),
        "ssn": create_ssn_schema(),
        "dateOfBirth": create_memorable_date_schema(),
        "email": create_email_schema(required=False),
        "mailingAddress": create_address_schema(),
        "monthlyIncome": create_currency_schema(max=100_000),
        "evidence": create_file_schema(max_files=3),
    }


def _validate_form(form: dict, values: dict) -> dict[str, str]:
    errors: dict[str, str] = {}
    for field, schema in form.items():
        result = validate_with_schema(schema, values.get(field))
        if not result.success:
            for path, message in result.flatten().items():
                errors.setdefault(f"{field}.{path}" if path else field, message)
    return errors


def test_complete_claim_passes(claim_form: dict) -> None:
    values = {
        "fullName": {"first": "Jane", "last": "Doe", "suffix": "Jr."},
        "ssn": "123-45-6789",
        "dateOfBirth": {"month": "7", "day": "4", "year": "1976"},
        "mailingAddress": {"street": "810 Vermont Ave NW", "city": "Washington", "state": "DC", "zipCode": "20420"},
        "monthlyIncome": "$2,500.00",
        "evidence": [UploadedFile(name="dd214.pdf", size=2048, type="application/pdf")],
    }

    assert _validate_form(claim_form, values) == {}


def test_incomplete_claim_reports_field_paths(claim_form: dict) -> None:
    values = {
        "fullName": {"first": "Jane", "last": ""},
        "ssn": "987-65-4321",
        "dateOfBirth": {"month": "2", "day": "30", "year": "1976"},
        "email": "jane@",
        "mailingAddress": {"street": "PSC 1234", "city": "apo", "state": "AE", "zipCode": "09012"},
        "monthlyIncome": "$250,000",
        "evidence": [],
    }

    assert _validate_form(claim_form, values) == {
        "fullName.last": "Name is required",
        "ssn": "Enter a valid Social Security number (like 123-45-6789)",
        "dateOfBirth": "Enter a valid date",
        "email": "Enter a valid email address",
        "mailingAddress.state": "Enter a valid US state",
        "monthlyIncome": "Amount must be no more than $100,000",
        "evidence": "At least one file is required",
    }
