"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from rangepath import __version__
from rangepath.cli.main import main


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "rangepath.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "rangepath: Binary Search Path Codec" in result.stdout
    assert "analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"rangepath {__version__}" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "rangepath: Binary Search Path Codec" in result.stdout


def test_cli_encode() -> None:
    """Test encoding from the command line."""
    result = _run("encode", "0", "256", "200")
    assert result.returncode == 0
    assert result.stdout.strip() == "1100"


def test_cli_encode_negative_bounds() -> None:
    """Test negative positional bounds are not mistaken for options."""
    result = _run("encode", "-10", "10", "-10")
    assert result.returncode == 0
    assert result.stdout.strip() == "0000"


def test_cli_encode_error() -> None:
    """Test an out-of-range target fails with exit code 1."""
    result = _run("encode", "10", "20", "25")
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "out of range" in result.stderr


def test_cli_decode() -> None:
    """Test decoding from the command line."""
    result = _run("decode", "0", "256", "1100")
    assert result.returncode == 0
    assert result.stdout.strip() == "200"


def test_cli_verbose_logs_to_stderr() -> None:
    """Test -v routes debug records to stderr, keeping stdout clean."""
    result = _run("-v", "encode", "0", "8", "3")
    assert result.returncode == 0
    assert result.stdout.strip() == "01"
    assert "Encoded 3 in [0, 8)" in result.stderr


def test_main_encode_custom_midpoint(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the --midpoint option on encode and decode."""
    assert main(["encode", "0", "16", "3", "--midpoint", "4"]) == 0
    assert capsys.readouterr().out.strip() == "01"

    assert main(["decode", "0", "16", "01", "--midpoint", "4", "--strict"]) == 0
    assert capsys.readouterr().out.strip() == "3"


@pytest.mark.parametrize("bits", ["", "-"])
def test_main_decode_empty_path(bits: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Test both spellings of the empty path."""
    assert main(["decode", "42", "43", bits]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_main_decode_strict_rejects(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --strict reports malformed paths."""
    assert main(["decode", "0", "4", "11"]) == 0
    assert capsys.readouterr().out.strip() == "3"

    assert main(["decode", "0", "4", "11", "--strict"]) == 1
    assert "Malformed path" in capsys.readouterr().err


def test_main_decode_bad_text(capsys: pytest.CaptureFixture[str]) -> None:
    """Test invalid path text is reported."""
    assert main(["decode", "0", "4", "12"]) == 1
    assert "Invalid character" in capsys.readouterr().err


def test_main_analyze(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the analyze command output."""
    assert main(["analyze", "0", "8"]) == 0
    out = capsys.readouterr().out
    assert "[0, 8)" in out
    assert "Mean path length" in out
    assert "1.625 bits" in out
    assert "Path lengths" in out
    assert "Savings vs fixed-width field" in out


def test_main_analyze_single_value(capsys: pytest.CaptureFixture[str]) -> None:
    """Test analyze on a one-element range."""
    assert main(["analyze", "5", "6"]) == 0
    assert "every path is empty" in capsys.readouterr().out


def test_main_analyze_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Test analyze rejects bad ranges and midpoints."""
    assert main(["analyze", "5", "5"]) == 1
    assert "start must be < end" in capsys.readouterr().err

    assert main(["analyze", "0", "10", "--midpoint", "10"]) == 1
    assert "strictly inside" in capsys.readouterr().err
