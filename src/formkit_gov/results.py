"""Validation result adapter for form rendering layers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formkit_gov.schemas.base import FieldSchema
    from formkit_gov.typing.models import ValidationIssue, ValidationResult


def validate_with_schema(schema: FieldSchema, value: Any) -> ValidationResult:
    """Validate `value` against `schema` without raising.

    Args:
        schema (FieldSchema): Schema built by a factory.
        value (Any): Candidate value.

    Returns:
        ValidationResult: Success with data, or failure with at least one issue.
    """
    return schema.safe_check(value)


def issue_path(issue: ValidationIssue) -> str:
    """Return the dot-joined path of an issue; the root is an empty string."""
    return ".".join(str(segment) for segment in issue.path)


def flatten_issues(issues: Iterable[ValidationIssue]) -> dict[str, str]:
    """Keep the first message per path.

    Args:
        issues (Iterable[ValidationIssue]): Issues in detection order.

    Returns:
        dict[str, str]: Mapping of dot-joined path to its first message.
    """
    flat: dict[str, str] = {}
    for issue in issues:
        flat.setdefault(issue_path(issue), issue.message)
    return flat


def issues_to_dicts(issues: Iterable[ValidationIssue]) -> list[dict[str, Any]]:
    """Return JSON-ready `{path, message, code}` records."""
    return [
        {"path": list(issue.path), "message": issue.message, "code": issue.code, "kind": issue.kind.to_str()}
        for issue in issues
    ]


def result_to_json_dict(result: ValidationResult) -> dict[str, Any]:
    """Return a JSON-ready representation of a validation result."""
    if result.success:
        return {"success": True, "data": _jsonable(result.data)}
    return {"success": False, "errors": issues_to_dicts(result.errors), "flat": flatten_issues(result.errors)}


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if isinstance(value, list | tuple):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value
