"""Validation outcome models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from formkit_gov.typing.enums import IssueKind

PathSegment = str | int


class ValidationIssue(BaseModel):
    """One failed rule on one logical field or subfield."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: tuple[PathSegment, ...] = ()
    message: str = Field(min_length=1)
    code: str
    kind: IssueKind = IssueKind.INVALID

    def with_prefix(self, *segments: PathSegment) -> ValidationIssue:
        """Return a copy nested under `segments`."""
        return self.model_copy(update={"path": (*segments, *self.path)})


class ValidationSuccess(BaseModel):
    """Accepted value, possibly normalized."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[True] = True
    data: Any = None


class ValidationFailure(BaseModel):
    """Rejected value with at least one issue."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[False] = False
    errors: tuple[ValidationIssue, ...] = Field(min_length=1)

    @property
    def first_message(self) -> str:
        """Return the message of the first detected issue."""
        return self.errors[0].message

    def flatten(self) -> dict[str, str]:
        """Return `dot.path -> first message` for form rendering layers."""
        from formkit_gov.results import flatten_issues  # noqa: PLC0415

        return flatten_issues(self.errors)


ValidationResult = ValidationSuccess | ValidationFailure
