from __future__ import annotations

import sys
from subprocess import run as subprocess_run  # noqa: S404


def test_cli_help() -> None:
    result = subprocess_run(  # noqa: S603
        [sys.executable, "-m", "formkit_gov.cli", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()


def test_cli_check_reports_invalid_ssn() -> None:
    result = subprocess_run(  # noqa: S603
        [sys.executable, "-m", "formkit_gov.cli", "check", "ssn", "000-12-3456"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 1
    assert "Enter a valid Social Security number" in result.stdout
