"""File upload schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formkit_gov.messages import DEFAULT_MESSAGES, resolve_message
from formkit_gov.processing.normalization import format_file_size
from formkit_gov.schemas.base import ArraySchema, FieldSchema, Rule, ScalarSchema, coerce_options
from formkit_gov.typing.enums import FieldFamily, IssueKind
from formkit_gov.typing.models import FileSchemaOptions
from formkit_gov.typing.protocol import FileLike

_FAMILY = FieldFamily.FILE.value


def is_file_like(value: Any) -> bool:
    """Return whether `value` exposes a name, an integer size and a MIME type."""
    if not isinstance(value, FileLike):
        return False
    size = getattr(value, "size", None)
    return (
        isinstance(size, int)
        and not isinstance(size, bool)
        and isinstance(getattr(value, "type", None), str)
        and isinstance(getattr(value, "name", None), str)
    )


def _single_file_schema(opts: FileSchemaOptions, *, required: bool) -> ScalarSchema:
    catalog = DEFAULT_MESSAGES[_FAMILY]
    max_size, allowed_types = opts.max_size, opts.allowed_types
    invalid_file = resolve_message(opts.messages, "invalid", fallback=catalog["invalidFile"])

    return ScalarSchema(
        family=_FAMILY,
        required=required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["requiredSingle"]),
        expected="file",
        is_empty=lambda value: value is None,
        steps=[
            Rule(code="invalidFile", message=invalid_file, predicate=is_file_like, fatal=True),
            Rule(
                code="maxSize",
                message=resolve_message(
                    opts.messages,
                    "maxSize",
                    lambda: catalog["maxSize"].format(size=format_file_size(max_size)),
                ),
                predicate=lambda file: file.size <= max_size,
                kind=IssueKind.RANGE,
            ),
            Rule(
                code="type",
                message=resolve_message(
                    opts.messages,
                    "type",
                    lambda: catalog["type"].format(types=", ".join(allowed_types)),
                ),
                predicate=lambda file: file.type in allowed_types,
            ),
        ],
        accepts=lambda value: True,
    )


def create_file_schema(
    options: FileSchemaOptions | Mapping[str, Any] | None = None,
    /,
    **overrides: Any,
) -> FieldSchema:
    """Create a file upload schema.

    With `max_files == 1` (default) the value must be a single file-like
    object; a list is rejected even with one element. With `max_files > 1`
    the value must be a list of up to `max_files` files, each checked for
    size and MIME type, and at least one file when required.

    Examples:
        >>> from formkit_gov.typing.models import UploadedFile
        >>> create_file_schema().safe_check(UploadedFile(name="a.pdf", size=10, type="application/pdf")).success
        True
    """
    opts = coerce_options(FileSchemaOptions, _FAMILY, options, overrides)

    if opts.max_files == 1:
        return _single_file_schema(opts, required=opts.required)

    catalog = DEFAULT_MESSAGES[_FAMILY]
    max_files = opts.max_files
    return ArraySchema(
        family=_FAMILY,
        required=opts.required,
        required_message=resolve_message(opts.messages, "required", fallback=catalog["required"]),
        element=_single_file_schema(opts, required=True),
        max_items=max_files,
        max_message=resolve_message(
            opts.messages,
            "maxFiles",
            lambda: catalog["maxFiles"].format(max=max_files),
        ),
    )
