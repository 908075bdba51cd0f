"""Tests for CLI exception handling."""
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from dts_lint.cli import main
from dts_lint.errors import ConfigLoadError, InvalidRange


def invoke(side_effect, *args):
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("tsconfig.json").write_text("{}")
        with patch("dts_lint.cli.lint_package") as mock_lint_package:
            mock_lint_package.side_effect = side_effect
            return runner.invoke(main, list(args))


def test_keyboard_interrupt_exits_with_130():
    """Test that KeyboardInterrupt exits with code 130 (SIGINT)."""
    result = invoke(KeyboardInterrupt())

    assert result.exit_code == 130
    assert "cancelled" in result.output.lower()


def test_invalid_range_shows_error_message():
    """Test that a version range error shows its message."""
    result = invoke(InvalidRange("'Minimum TypeScript Version: 5.2' skips ts5.0 folder."))

    assert result.exit_code == 2
    assert "Error: 'Minimum TypeScript Version: 5.2' skips ts5.0 folder." in result.output


def test_config_error_shows_error_message():
    """Test that a configuration error shows its message."""
    result = invoke(ConfigLoadError("Could not load config at tslint.json"))

    assert result.exit_code == 2
    assert "Could not load config" in result.output


def test_missing_compiler_shows_error_message():
    """Test that a missing TypeScript install is reported."""
    result = invoke(FileNotFoundError("TypeScript compiler not found at /ts/lib/tsc.js"))

    assert result.exit_code == 2
    assert "TypeScript compiler not found" in result.output


def test_generic_exception_shows_helpful_message():
    """Test that unexpected exceptions show helpful message."""
    result = invoke(RuntimeError("TypeScript compiler timed out after 600s"), "--verbose")

    assert result.exit_code == 2
    assert "timed out" in result.output
    assert "--verbose" in result.output
