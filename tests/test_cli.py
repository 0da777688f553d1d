"""
Tests for CLI Commands
======================
Tests for the typogly command-line interface in typogly/cli.py.
"""

import pytest
import sys
import subprocess
from io import StringIO
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from typogly import __version__, scramble
from typogly.cli import main


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "typogly", "--version"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "typogly" in result.stdout.lower()
        assert __version__ in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = subprocess.run(
            [sys.executable, "-m", "typogly", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "scramble" in result.stdout.lower()
        assert "presets" in result.stdout.lower()

    def test_scramble_help(self):
        """Test scramble --help."""
        result = subprocess.run(
            [sys.executable, "-m", "typogly", "scramble", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "--seed" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIScramble:
    """Tests for the scramble command."""

    def test_text_arguments(self, capsys):
        assert main(["scramble", "hello", "world", "--seed", "42"]) == 0
        assert capsys.readouterr().out == scramble("hello world", seed=42) + "\n"

    def test_alias(self, capsys):
        assert main(["s", "hello", "--seed", "42"]) == 0
        assert capsys.readouterr().out == "hlleo\n"

    def test_options(self, capsys):
        text = "Hello wonderful World"
        main(["scramble", text, "-s", "3", "-m", "6", "--no-preserve-case"])
        expected = scramble(text, seed=3, min_length=6, preserve_case=False)
        assert capsys.readouterr().out == expected + "\n"

    def test_probability_zero(self, capsys):
        main(["scramble", "hello wonderful world", "-p", "0"])
        assert capsys.readouterr().out == "hello wonderful world\n"

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", StringIO("hello world\nsecond line\n"))
        assert main(["scramble", "--seed", "42"]) == 0
        out = capsys.readouterr().out
        assert out == scramble("hello world\nsecond line\n", seed=42)

    def test_file(self, capsys, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("According to research\n", encoding="utf-8")
        assert main(["scramble", "--file", str(path), "--seed", "1"]) == 0
        assert capsys.readouterr().out == scramble("According to research\n", seed=1)

    def test_missing_file(self, capsys, tmp_path):
        assert main(["scramble", "--file", str(tmp_path / "missing.txt")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_preset(self, capsys):
        main(["scramble", "hello world", "--preset", "long_words", "--seed", "42"])
        assert capsys.readouterr().out == "hello world\n"

    def test_flags_override_preset(self, capsys):
        main(["scramble", "hello world", "--preset", "long_words", "-m", "4", "--seed", "42"])
        assert capsys.readouterr().out == scramble("hello world", seed=42) + "\n"

    def test_unknown_preset(self, capsys):
        assert main(["scramble", "hello", "--preset", "bogus"]) == 1
        assert "Unknown preset" in capsys.readouterr().err

    def test_quiet_still_prints_result(self, capsys):
        assert main(["--quiet", "scramble", "hello", "--seed", "42"]) == 0
        assert capsys.readouterr().out == "hlleo\n"

    def test_subprocess_stdin(self):
        result = subprocess.run(
            [sys.executable, "-m", "typogly", "scramble", "--seed", "42"],
            input="hello world",
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert result.stdout == scramble("hello world", seed=42) + "\n"


class TestCLIPresets:
    """Tests for the presets command."""

    def test_lists_presets(self, capsys):
        assert main(["presets"]) == 0
        out = capsys.readouterr().out
        assert "Preset" in out
        assert "light" in out
        assert "scramble_probability=0.25" in out
        assert "(defaults)" in out

    def test_quiet(self, capsys):
        assert main(["-q", "presets"]) == 0
        assert capsys.readouterr().out == ""

    def test_empty(self, capsys, app_config):
        app_config("presets: {}\n")
        assert main(["ls"]) == 0
        assert "No presets configured" in capsys.readouterr().out
