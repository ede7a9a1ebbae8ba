"""
Tests for the command line interface.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from passmint.__main__ import cli
from passmint.charsets import DIGITS, LOWERCASE, SIMILAR_CHARS


class TestCLI:
    """Test CLI commands against an isolated config file."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def config_file(self, tmp_path):
        return str(tmp_path / "config.json")

    def invoke(self, runner, config_file, *args):
        return runner.invoke(cli, ["--config", config_file, *args])

    def test_cli_help(self, runner):
        """Test that CLI help works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "constrained password generator" in result.output

    def test_generate_default(self, runner, config_file):
        """Test generating with default settings."""
        result = self.invoke(runner, config_file, "generate")

        assert result.exit_code == 0
        assert len(result.output.strip()) == 16

    def test_generate_count_and_length(self, runner, config_file):
        """Test multiple passwords of a custom length."""
        result = self.invoke(runner, config_file, "generate", "--length", "12", "--count", "3")

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 3
        assert all(len(line) == 12 for line in lines)

    def test_generate_seed_is_reproducible(self, runner, config_file):
        """Test that the same seed produces the same password."""
        first = self.invoke(runner, config_file, "generate", "--seed", "11")
        second = self.invoke(runner, config_file, "generate", "--seed", "11")

        assert first.exit_code == 0
        assert first.output == second.output

    def test_generate_class_options(self, runner, config_file):
        """Test per-class switches and bounds."""
        result = self.invoke(
            runner, config_file, "generate",
            "--length", "10", "--no-symbols", "--no-uppercase",
            "--digits-min", "4", "--digits-max", "4", "--digits-unique",
            "--exclude-similar", "--begin-with-letter",
        )

        assert result.exit_code == 0
        password = result.output.strip()
        digits = [c for c in password if c in DIGITS]
        assert len(password) == 10
        assert len(digits) == 4 and len(set(digits)) == 4
        assert all(c in DIGITS or c in LOWERCASE for c in password)
        assert not any(c in SIMILAR_CHARS for c in password)
        assert password[0] in LOWERCASE

    def test_generate_other_characters(self, runner, config_file):
        """Test the other class options."""
        result = self.invoke(
            runner, config_file, "generate",
            "--length", "6", "--no-symbols", "--no-digits", "--no-uppercase",
            "--lowercase-min", "0", "--include-other", "#", "--other-min", "2", "--other-max", "2",
        )

        assert result.exit_code == 0
        assert result.output.strip().count("#") == 2

    def test_generate_error(self, runner, config_file):
        """Test that generation errors exit with status 1."""
        result = self.invoke(
            runner, config_file, "generate",
            "--no-symbols", "--no-digits", "--no-lowercase", "--no-uppercase",
        )

        assert result.exit_code == 1
        assert "Error: You must select at least one character." in result.output

    @patch("passmint.__main__.clear_clipboard_after")
    @patch("passmint.__main__.copy_to_clipboard", return_value=True)
    def test_generate_copy(self, mock_copy, mock_clear, runner, config_file):
        """Test that --copy sends the password to the clipboard and clears it before exiting."""
        result = self.invoke(runner, config_file, "generate", "--copy", "--seed", "3")

        assert result.exit_code == 0
        assert "copied to clipboard" in result.output
        assert "cleared in 60 seconds" in result.output
        password = mock_copy.call_args.args[0]
        assert len(password) == 16
        assert password not in result.output

        # The clear must run in the foreground, not on a daemon thread
        assert mock_copy.call_args.kwargs["clear_after"] == 0
        mock_clear.assert_called_once_with(60)

    @patch("passmint.__main__.clear_clipboard_after")
    @patch("passmint.__main__.copy_to_clipboard", return_value=True)
    def test_generate_copy_keep(self, mock_copy, mock_clear, runner, config_file):
        """Test that --clear-after 0 leaves the clipboard alone."""
        result = self.invoke(runner, config_file, "generate", "--copy", "--clear-after", "0")

        assert result.exit_code == 0
        assert "cleared in" not in result.output
        mock_clear.assert_not_called()

    @patch("passmint.__main__.clear_clipboard_after")
    @patch("passmint.__main__.copy_to_clipboard", return_value=False)
    def test_generate_copy_unavailable(self, mock_copy, mock_clear, runner, config_file):
        """Test the fallback when no clipboard is available."""
        result = self.invoke(runner, config_file, "generate", "--copy")

        assert result.exit_code == 0
        assert "Generated password: " in result.output
        mock_clear.assert_not_called()

    @patch("passmint.__main__.copy_to_clipboard")
    def test_generate_copy_rejects_count(self, mock_copy, runner, config_file):
        """Test that --copy cannot be combined with several passwords."""
        result = self.invoke(runner, config_file, "generate", "--copy", "--count", "3")

        assert result.exit_code == 1
        assert "Error: --copy can only be used with a single password" in result.output
        mock_copy.assert_not_called()

    def test_config_section_wrong_type(self, runner, config_file):
        """Test that a class section that is not an object is reported, not a traceback."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump({"classes": {"digits": 5}}, f)

        result = self.invoke(runner, config_file, "generate")
        assert result.exit_code == 1
        assert "'classes.digits' must be a JSON object" in result.output

    def test_config_section_null(self, runner, config_file):
        """Test that a null section is reported even when an option overrides inside it."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump({"other": None}, f)

        result = self.invoke(runner, config_file, "generate", "--other-max", "2")
        assert result.exit_code == 1
        assert "'other' must be a JSON object" in result.output

    def test_classes_command(self, runner, config_file):
        """Test the effective class listing."""
        result = self.invoke(runner, config_file, "classes", "--exclude-similar")

        assert result.exit_code == 0
        assert "lowercase: 23 chars" in result.output
        assert "digits: 8 chars" in result.output
        assert "Settings are feasible" in result.output

    def test_classes_reports_infeasible(self, runner, config_file):
        """Test that classes shows the failing check without exiting non-zero."""
        result = self.invoke(runner, config_file, "classes", "--length", "3")

        assert result.exit_code == 0
        assert "MinSumTooHigh" in result.output

    def test_config_file_is_used(self, runner, config_file):
        """Test that saved settings apply and options override them."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump({"length": 9}, f)

        result = self.invoke(runner, config_file, "generate")
        assert len(result.output.strip()) == 9

        result = self.invoke(runner, config_file, "generate", "--length", "11")
        assert len(result.output.strip()) == 11

    def test_broken_config_file(self, runner, config_file):
        """Test that a broken config file is reported."""
        with open(config_file, "w", encoding="utf-8") as f:
            f.write("{oops")

        result = self.invoke(runner, config_file, "generate")
        assert result.exit_code == 1
        assert "Error: Could not read config file" in result.output

    def test_config_init_and_show(self, runner, config_file):
        """Test writing and printing the default settings."""
        result = self.invoke(runner, config_file, "config", "init")
        assert result.exit_code == 0
        assert "Wrote default settings" in result.output

        result = self.invoke(runner, config_file, "config", "show")
        assert result.exit_code == 0
        assert json.loads(result.output)["length"] == 16

    def test_config_init_refuses_overwrite(self, runner, config_file):
        """Test that init keeps an existing file unless forced."""
        self.invoke(runner, config_file, "config", "init")

        result = self.invoke(runner, config_file, "config", "init")
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = self.invoke(runner, config_file, "config", "init", "--force")
        assert result.exit_code == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
