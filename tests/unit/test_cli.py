from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from formkit_gov import cli
from formkit_gov.settings import Settings
from formkit_gov.typing.enums import FieldFamily

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _quiet_settings(mocker) -> None:
    mocker.patch("formkit_gov.cli.get_settings", return_value=Settings(log_json=False, log_level="ERROR"))


def test_build_parser_supports_version_flag(capsys) -> None:
    parser = cli.build_parser()

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0

    captured = capsys.readouterr()
    assert "0.1.0" in captured.out


def test_parser_accepts_dashed_family_names() -> None:
    args = cli.build_parser().parse_args(["check", "memorable-date", "{}"])
    assert args.family == FieldFamily.MEMORABLE_DATE
    assert args.options == {}


def test_parser_rejects_options_that_are_not_objects() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["check", "text", "x", "--options", "[1, 2]"])


def test_main_check_valid_value(capsys) -> None:
    assert cli.main(["check", "currency", "$1,234.56"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"success": True, "data": 1234.56}


def test_main_check_invalid_composite_value(capsys) -> None:
    value = json.dumps({"street": "1 Elm St", "city": "Springfield", "state": "ZZ", "zipCode": "62701"})

    assert cli.main(["check", "address", value]) == 1

    payload = json.loads(capsys.readouterr().out)
    assert payload["flat"] == {"state": "Enter a valid US state"}
    assert payload["errors"][0]["path"] == ["state"]


def test_main_check_file_path(tmp_path: Path, capsys) -> None:
    upload = tmp_path / "notes.txt"
    upload.write_text("hello", encoding="utf-8")

    assert cli.main(["check", "file", str(upload)]) == 1
    assert json.loads(capsys.readouterr().out)["errors"][0]["code"] == "type"


def test_main_check_bad_options_returns_usage_error() -> None:
    assert cli.main(["check", "file", "x.pdf", "--options", '{"maxFiles": 0}']) == 2


def test_main_check_bad_json_value_returns_usage_error() -> None:
    assert cli.main(["check", "address", "not json"]) == 2


@pytest.mark.parametrize(
    ("kind", "value", "expected"),
    [
        ("phone", "5551234567", "(555) 123-4567"),
        ("ssn", "123456789", "123-45-6789"),
        ("mask-ssn", "123-45-6789", "***-**-6789"),
    ],
)
def test_main_format(kind: str, value: str, expected: str, capsys) -> None:
    assert cli.main(["format", kind, value]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_main_without_command_prints_help(capsys) -> None:
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
