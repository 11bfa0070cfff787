"""Schema composition primitives.

A schema runs, in order: a presence gate (empty input is accepted when
optional and reported with the `required` message otherwise), a type gate,
then an ordered list of steps. A `Rule` that fails records an issue and, when
fatal, stops evaluation; non-fatal rules keep running so callers can show
every independent problem. A `Transform` replaces the value for the steps
after it and only runs while no issue has been recorded.

Schemas hold no per-call state and can be shared between callers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from formkit_gov.exceptions import SchemaOptionsError, SchemaValidationError
from formkit_gov.logging import get_logger
from formkit_gov.messages import GENERIC_MESSAGES, invalid_type_message
from formkit_gov.typing.enums import IssueKind
from formkit_gov.typing.models import (
    SchemaOptions,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

logger = get_logger(__name__)

OptionsT = TypeVar("OptionsT", bound=SchemaOptions)
Issues = list[ValidationIssue]


@dataclass(frozen=True)
class Rule:
    """Named check applied after the presence and type gates."""

    code: str
    message: str
    predicate: Callable[[Any], bool]
    kind: IssueKind = IssueKind.INVALID
    fatal: bool = False

    def issue(self) -> ValidationIssue:
        """Return the issue reported when the rule fails."""
        return ValidationIssue(message=self.message, code=self.code, kind=self.kind)


@dataclass(frozen=True)
class Transform:
    """Value conversion between rules, e.g. currency string to number."""

    name: str
    func: Callable[[Any], Any]


Step = Rule | Transform


def is_blank(value: Any) -> bool:
    """Return whether a scalar input counts as absent."""
    return value is None or value == ""


def run_steps(value: Any, steps: Iterable[Step]) -> tuple[Issues, Any]:
    """Apply `steps` to `value` and return recorded issues and the final value."""
    issues: Issues = []
    current = value
    for step in steps:
        if isinstance(step, Transform):
            if issues:
                break
            current = step.func(current)
            continue
        if step.predicate(current):
            continue
        issues.append(step.issue())
        if step.fatal:
            break
    return issues, current


class FieldSchema:
    """Immutable validator built by a schema factory."""

    __slots__ = ("family", "required", "required_message")

    def __init__(self, *, family: str, required: bool, required_message: str) -> None:
        self.family = family
        self.required = required
        self.required_message = required_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(family={self.family!r}, required={self.required!r})"

    def safe_check(self, value: Any) -> ValidationResult:
        """Validate `value` without raising.

        Args:
            value: Candidate value of any type.

        Returns:
            ValidationResult: Success with the accepted value, or failure with issues.
        """
        try:
            issues, data = self.evaluate(value)
        except Exception:
            logger.exception("Unexpected error while validating", extra={"family": self.family})
            issues = [ValidationIssue(message=GENERIC_MESSAGES["invalid"], code="invalid")]
            data = None
        if issues:
            return ValidationFailure(errors=tuple(issues))
        return ValidationSuccess(data=data)

    def check(self, value: Any) -> Any:
        """Validate `value` and return the accepted data.

        Raises:
            SchemaValidationError: If the value fails validation.
        """
        result = self.safe_check(value)
        if isinstance(result, ValidationFailure):
            raise SchemaValidationError(issues=result.errors)
        return result.data

    def is_valid(self, value: Any) -> bool:
        """Return whether `value` passes validation."""
        return self.safe_check(value).success

    def evaluate(self, value: Any) -> tuple[Issues, Any]:
        """Return issues and data for `value`; used when nesting schemas."""
        raise NotImplementedError

    def _required_issue(self) -> ValidationIssue:
        return ValidationIssue(message=self.required_message, code="required", kind=IssueKind.REQUIRED)


class ScalarSchema(FieldSchema):
    """Schema for a single value such as a string or an uploaded file."""

    __slots__ = ("_accepts", "_is_empty", "expected", "steps")

    def __init__(
        self,
        *,
        family: str,
        required: bool,
        required_message: str,
        steps: Iterable[Step] = (),
        expected: str = "string",
        accepts: Callable[[Any], bool] | None = None,
        is_empty: Callable[[Any], bool] = is_blank,
    ) -> None:
        super().__init__(family=family, required=required, required_message=required_message)
        self.steps: tuple[Step, ...] = tuple(steps)
        self.expected = expected
        self._accepts = accepts or (lambda value: isinstance(value, str))
        self._is_empty = is_empty

    def evaluate(self, value: Any) -> tuple[Issues, Any]:
        if self._is_empty(value):
            return ([self._required_issue()] if self.required else []), None
        if not self._accepts(value):
            message = invalid_type_message(self.expected, value)
            return [ValidationIssue(message=message, code="invalidType")], None
        return run_steps(value, self.steps)


class ObjectSchema(FieldSchema):
    """Schema for a mapping of named parts, e.g. an address.

    Child issues are nested under the child name. Object level rules run on
    the validated parts only when every child passed. Unknown keys are
    dropped from the accepted data.
    """

    __slots__ = ("_report_required_on_root", "fields", "rules")

    def __init__(
        self,
        *,
        family: str,
        required: bool,
        fields: Mapping[str, FieldSchema],
        rules: Iterable[Rule] = (),
        required_message: str = GENERIC_MESSAGES["required"],
        report_required_on_root: bool = False,
    ) -> None:
        super().__init__(family=family, required=required, required_message=required_message)
        self.fields: Mapping[str, FieldSchema] = MappingProxyType(dict(fields))
        self.rules: tuple[Rule, ...] = tuple(rules)
        self._report_required_on_root = report_required_on_root

    def is_empty(self, value: Any) -> bool:
        """Return whether `value` is absent or has only blank parts."""
        if value is None:
            return True
        if not isinstance(value, Mapping):
            return False
        return all(is_blank(value.get(name)) for name in self.fields)

    def evaluate(self, value: Any) -> tuple[Issues, Any]:
        if self.is_empty(value):
            if not self.required:
                return [], None
            if self._report_required_on_root:
                return [self._required_issue()], None
            value = value or {}
        if not isinstance(value, Mapping):
            message = invalid_type_message("object", value)
            return [ValidationIssue(message=message, code="invalidType")], None

        issues: Issues = []
        data: dict[str, Any] = {}
        for name, child in self.fields.items():
            child_issues, child_data = child.evaluate(value.get(name))
            issues.extend(issue.with_prefix(name) for issue in child_issues)
            if name in value:
                data[name] = child_data
        if issues:
            return issues, None

        rule_issues, _ = run_steps(data, self.rules)
        if rule_issues:
            return rule_issues, None
        return [], data


class ArraySchema(FieldSchema):
    """Schema for a list of items validated by the same element schema."""

    __slots__ = ("element", "max_items", "max_message")

    def __init__(
        self,
        *,
        family: str,
        required: bool,
        required_message: str,
        element: FieldSchema,
        max_items: int,
        max_message: str,
    ) -> None:
        super().__init__(family=family, required=required, required_message=required_message)
        self.element = element
        self.max_items = max_items
        self.max_message = max_message

    def evaluate(self, value: Any) -> tuple[Issues, Any]:
        if value is None:
            return ([self._required_issue()] if self.required else []), None
        if not isinstance(value, list | tuple):
            message = invalid_type_message("array", value)
            return [ValidationIssue(message=message, code="invalidType")], None

        issues: Issues = []
        if self.required and not value:
            issues.append(self._required_issue())
        if len(value) > self.max_items:
            issues.append(ValidationIssue(message=self.max_message, code="maxFiles", kind=IssueKind.COUNT))

        items: list[Any] = []
        for index, item in enumerate(value):
            item_issues, item_data = self.element.evaluate(item)
            issues.extend(issue.with_prefix(index) for issue in item_issues)
            items.append(item_data)
        if issues:
            return issues, None
        return [], items


def coerce_options(
    model: type[OptionsT],
    family: str,
    options: OptionsT | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> OptionsT:
    """Build a family options record from a model, a mapping and/or keywords.

    Args:
        model: Options model of the family.
        family: Family name, used in errors and logs.
        options: Options record or loosely typed mapping.
        overrides: Keyword options taking precedence over `options`.

    Raises:
        SchemaOptionsError: If an option has an unusable value or type.

    Returns:
        OptionsT: Validated options; unknown keys are ignored.
    """
    if isinstance(options, model) and not overrides:
        return options

    payload: dict[str, Any] = {}
    if isinstance(options, BaseModel):
        payload.update(options.model_dump())
    elif isinstance(options, Mapping):
        payload.update(options)
    elif options is not None:
        raise SchemaOptionsError(family=family, exc=TypeError(f"unsupported options type {type(options).__name__}"))
    payload.update(overrides)

    try:
        resolved = model.model_validate(payload)
    except ValidationError as exc:
        raise SchemaOptionsError(family=family, exc=exc) from exc
    logger.debug("Schema options resolved", extra={"family": family, "required": resolved.required})
    return resolved


def combine_schemas(*schemas: ObjectSchema, required: bool = True) -> ObjectSchema:
    """Merge the parts of several object schemas; later schemas win on name clashes.

    Object level rules of the inputs are kept in order.
    """
    fields: dict[str, FieldSchema] = {}
    rules: list[Rule] = []
    for schema in schemas:
        fields.update(schema.fields)
        rules.extend(schema.rules)
    return ObjectSchema(family="combined", required=required, fields=fields, rules=rules)
