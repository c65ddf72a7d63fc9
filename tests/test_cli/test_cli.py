"""Tests for the icss command line."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from icss import __version__
from icss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCheckCommand:
    def test_valid_file(self, runner):
        result = runner.invoke(cli, ["check", str(FIXTURES / "level3.icss")])
        assert result.exit_code == 0
        assert "OK: level3.icss is valid" in result.output

    def test_invalid_file(self, runner):
        result = runner.invoke(cli, ["check", str(FIXTURES / "invalid.icss")])
        assert result.exit_code == 1
        assert "property 'margin' is not allowed" in result.output
        assert "Summary: 5 error(s)" in result.output

    def test_syntax_error(self, runner):
        result = runner.invoke(cli, ["check", str(FIXTURES / "syntax_error.icss")])
        assert result.exit_code == 1

    def test_missing_file(self, runner):
        result = runner.invoke(cli, ["check", "does-not-exist.icss"])
        assert result.exit_code != 0


class TestCompileCommand:
    def test_stdout(self, runner):
        result = runner.invoke(cli, ["compile", str(FIXTURES / "level3.icss")])
        assert result.exit_code == 0
        assert result.output == (FIXTURES / "level3.css").read_text()

    def test_output_file(self, runner, tmp_path):
        out = tmp_path / "out.css"
        result = runner.invoke(cli, ["compile", str(FIXTURES / "level0.icss"), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text().startswith("p {\n  background-color: #ffffff;")

    def test_indent_option(self, runner):
        result = runner.invoke(cli, ["compile", str(FIXTURES / "level1.icss"), "--indent", "4"])
        assert result.exit_code == 0
        assert "    width: 500px;" in result.output

    def test_diagnostics_fail(self, runner):
        result = runner.invoke(cli, ["compile", str(FIXTURES / "invalid.icss")])
        assert result.exit_code == 1
        assert "Compilation failed: 5 error(s)" in result.output

    def test_no_strict_renders(self, runner):
        result = runner.invoke(cli, ["compile", "--no-strict", str(FIXTURES / "invalid.icss")])
        assert result.exit_code == 0
        assert "width: 0;" in result.output

    def test_verbose_configures_logging(self, runner, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ["-v", "compile", str(FIXTURES / "level0.icss")])
        assert result.exit_code == 0
        assert calls[0]["level"] == logging.DEBUG
