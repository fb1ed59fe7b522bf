# tests/unit/test_cli.py
"""
Tests for the navm CLI.

All commands are driven through typer's CliRunner; the REPL reads its
command lines from the runner's stdin.
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from navm.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """The REPL attaches a handler to the runner's stderr; drop it afterwards."""
    yield
    logger = logging.getLogger("navm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def json_lines(output: str):
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


# =============================================================================
# Smoke
# =============================================================================


def test_root_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "parse" in result.output


def test_all_commands_have_help():
    for cmd in app.registered_commands:
        result = runner.invoke(app, [cmd.name, "--help"])
        assert result.exit_code == 0, f"Help failed for '{cmd.name}'"


# =============================================================================
# parse
# =============================================================================


class TestParse:
    def test_canonical_form(self):
        result = runner.invoke(app, ["parse", "sav  memory ./mem.nal"])
        assert result.exit_code == 0
        assert result.output.strip() == "SAV memory ./mem.nal"

    def test_narsese(self):
        result = runner.invoke(app, ["parse", "nse <A-->B>."])
        assert result.exit_code == 0
        assert result.output.strip() == "NSE <A --> B>."

    def test_custom_head(self):
        result = runner.invoke(app, ["parse", "FOO bar baz"])
        assert result.exit_code == 0
        assert result.output.strip() == "FOO bar baz"

    def test_parse_error(self):
        result = runner.invoke(app, ["parse", "CYC abc"])
        assert result.exit_code == 1
        assert "abc" in result.output

    def test_empty_line(self):
        result = runner.invoke(app, ["parse", "   "])
        assert result.exit_code == 1


# =============================================================================
# decode
# =============================================================================


class TestDecode:
    def test_single_object_from_stdin(self):
        result = runner.invoke(app, ["decode"], input='{"type": "ANSWER", "content": "yes", "term": "<A --> B>."}')
        assert result.exit_code == 0
        assert "ANSWER" in result.output

    def test_array_from_file(self, tmp_path):
        path = tmp_path / "outputs.json"
        path.write_text('[{"type": "INFO", "content": "ready"}, {"type": "EXE", "content": "go", "operation": ["left"]}]')

        result = runner.invoke(app, ["decode", str(path)])

        assert result.exit_code == 0
        assert "INFO" in result.output
        assert "EXE" in result.output

    def test_empty_array(self):
        result = runner.invoke(app, ["decode"], input="[]")
        assert result.exit_code == 0
        assert "No outputs" in result.output

    def test_decode_error(self):
        result = runner.invoke(app, ["decode"], input='{"type": "EXE", "content": "x", "operation": []}')
        assert result.exit_code == 1
        assert "operator" in result.output

    def test_deeply_nested_term(self):
        result = runner.invoke(app, ["decode"], input=json.dumps({"type": "OUT", "content": "x", "term": "(&&," * 600}))
        assert result.exit_code == 1
        assert "Invalid term" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["decode", str(tmp_path / "nope.json")])
        assert result.exit_code == 1


# =============================================================================
# launchers
# =============================================================================


def test_launchers_lists_echo(fresh_registry):
    result = runner.invoke(app, ["launchers"])
    assert result.exit_code == 0
    assert "echo" in result.output


# =============================================================================
# repl
# =============================================================================


class TestRepl:
    def test_json_outputs(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["repl"], input="NSE <A --> B>.\nVOL 3\n")

        assert result.exit_code == 0
        assert json_lines(result.output) == [
            {"type": "IN", "content": "<A --> B>.", "term": "$$ <A --> B>."},
            {"type": "COMMENT", "content": "volume set to 3"},
        ]

    def test_text_outputs(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["repl", "--text"], input="VOL 3\nCYC 1\n")

        assert result.exit_code == 0
        assert "COMMENT: volume set to 3" in result.output
        assert "ERROR: unsupported command: CYC 1" in result.output

    def test_bad_line_does_not_stop_the_loop(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["repl", "--text"], input="CYC abc\n\nVOL 7\n")

        assert result.exit_code == 0
        assert "abc" in result.output
        assert "COMMENT: volume set to 7" in result.output

    def test_deeply_nested_line_does_not_stop_the_loop(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        line = "NSE " + "<" * 600 + "A --> B."
        result = runner.invoke(app, ["repl", "--text"], input=f"{line}\nVOL 2\n")

        assert result.exit_code == 0
        assert "COMMENT: volume set to 2" in result.output

    def test_exit_stops_the_loop(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["repl", "--text"], input="EXI bye\nVOL 1\n")

        assert result.exit_code == 0
        assert "TERMINATED: bye" in result.output
        assert "volume set to 1" not in result.output

    def test_config_file(self, fresh_registry, tmp_path):
        config = tmp_path / "navm.yaml"
        config.write_text("runtime:\n  launcher: echo\n  options:\n    echo_prefix: 'Input: '\nrepl:\n  output_format: text\n")

        result = runner.invoke(app, ["repl", "--config", str(config)], input="NSE <A --> B>.\n")

        assert result.exit_code == 0
        assert "IN: Input: <A --> B>." in result.output

    def test_unknown_launcher(self, fresh_registry, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["repl", "--launcher", "nars"], input="")

        assert result.exit_code == 1
        assert "nars" in result.output

    def test_invalid_config(self, fresh_registry, tmp_path):
        config = tmp_path / "navm.yaml"
        config.write_text("bogus: true\n")

        result = runner.invoke(app, ["repl", "--config", str(config)], input="")

        assert result.exit_code == 1
