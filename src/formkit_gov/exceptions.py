"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formkit_gov.typing.models import ValidationIssue


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class SchemaOptionsError(PackageError):
    """Raised when a schema factory receives options it cannot use."""

    family: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        base = f"Invalid options for '{self.family}' schema"
        return f"{base}: {self.exc}" if self.exc else base


@dataclass(frozen=True)
class SchemaValidationError(PackageError):
    """Raised by `FieldSchema.check` when a value fails validation."""

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        """Return error message payload."""
        if not self.issues:
            return "Validation failed"
        first = self.issues[0]
        location = ".".join(str(segment) for segment in first.path)
        prefix = f"{location}: " if location else ""
        extra = f" (+{len(self.issues) - 1} more)" if len(self.issues) > 1 else ""
        return f"{prefix}{first.message}{extra}"
