"""CLI entry point for formkit-gov."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from structlog.contextvars import bound_contextvars

from formkit_gov import __version__, logger
from formkit_gov.exceptions import PackageError
from formkit_gov.logging import configure_logging
from formkit_gov.results import result_to_json_dict
from formkit_gov.schemas import SCHEMA_FACTORIES
from formkit_gov.settings import get_settings
from formkit_gov.typing.enums import FieldFamily
from formkit_gov.typing.models import UploadedFile
from formkit_gov.validators import format_phone_number, format_ssn, mask_ssn

_COMPOSITE_FAMILIES = frozenset({FieldFamily.MEMORABLE_DATE, FieldFamily.FULL_NAME, FieldFamily.ADDRESS})

_FORMATTERS = {
    "phone": format_phone_number,
    "ssn": format_ssn,
    "mask-ssn": mask_ssn,
}


def _family_from_cli(value: str) -> FieldFamily:
    """Convert a CLI family name (`memorable-date` or `memorable_date`) into a family.

    Args:
        value (str): CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not supported.

    Returns:
        FieldFamily: Selected family.
    """
    try:
        return FieldFamily.from_str(value.replace("-", "_"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _options_from_cli(value: str) -> dict[str, Any]:
    """Parse `--options` as a JSON object.

    Raises:
        argparse.ArgumentTypeError: If value is not a JSON object.
    """
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"--options must be a JSON object: {exc}") from exc
    if not isinstance(parsed, dict):
        raise argparse.ArgumentTypeError("--options must be a JSON object")  # noqa: TRY003
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="formkit-gov")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser("check", help="Validate a value against a field schema")
    check_parser.add_argument("family", type=_family_from_cli)
    check_parser.add_argument(
        "value",
        help="Field value; a JSON object for composite fields, a file path for files",
    )
    check_parser.add_argument("--options", type=_options_from_cli, default={}, dest="options")

    format_parser = subparsers.add_parser("format", help="Format a phone number or SSN")
    format_parser.add_argument("kind", choices=sorted(_FORMATTERS))
    format_parser.add_argument("value")

    return parser


def _value_from_cli(family: FieldFamily, raw: str) -> Any:
    """Turn the raw CLI value into the candidate handed to the schema.

    Raises:
        ValueError: If a composite value is not valid JSON.
    """
    if family in _COMPOSITE_FAMILIES:
        return json.loads(raw)
    if family == FieldFamily.FILE:
        path = Path(raw)
        return UploadedFile.from_path(path) if path.is_file() else raw
    return raw


def _run_check(args: argparse.Namespace) -> int:
    with bound_contextvars(family=args.family.to_str(), command="check"):
        return _check_value(args)


def _check_value(args: argparse.Namespace) -> int:
    try:
        schema = SCHEMA_FACTORIES[args.family](args.options)
    except PackageError:
        logger.exception("Invalid schema options")
        return 2

    try:
        value = _value_from_cli(args.family, args.value)
    except ValueError:
        logger.exception("Invalid value", extra={"value": args.value})
        return 2

    result = schema.safe_check(value)
    sys.stdout.write(json.dumps(result_to_json_dict(result), indent=2) + "\n")
    return 0 if result.success else 1


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 valid, 1 invalid, 2 usage error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        return _run_check(args)
    if args.command == "format":
        sys.stdout.write(_FORMATTERS[args.kind](args.value) + "\n")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
