"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldFamily(_EnumMixin):
    """Field families with a schema factory."""

    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    SSN = "ssn"
    DATE = "date"
    MEMORABLE_DATE = "memorable_date"
    CURRENCY = "currency"
    NAME = "name"
    FULL_NAME = "full_name"
    ADDRESS = "address"
    FILE = "file"


class AddressType(_EnumMixin):
    """Address shapes accepted by the address schema."""

    US = "us"
    MILITARY = "military"
    INTERNATIONAL = "international"


class IssueKind(_EnumMixin):
    """Taxonomy of validation failures."""

    REQUIRED = "required"
    INVALID = "invalid"
    RANGE = "range"
    STRUCTURAL = "structural"
    COUNT = "count"
