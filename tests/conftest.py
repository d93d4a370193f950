"""Shared test fixtures and helpers for flatscript tests.

Provides:
- C# parse helpers: parse_csharp(), flatten_text()
- CliRunner fixtures: cli_runner, invoke_cli()
- File factory: make_files()
- JSON validation helpers: parse_json_output(), assert_json_envelope()
"""

from __future__ import annotations

import json
import os

import pytest
from click.testing import CliRunner

# ===========================================================================
# Isolation
# ===========================================================================


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch):
    """Keep a developer's FLATSCRIPT_CONFIG from leaking into tests."""
    monkeypatch.delenv("FLATSCRIPT_CONFIG", raising=False)


# ===========================================================================
# Parse helpers
# ===========================================================================


def parse_csharp(source_text: str):
    """Parse C# text into a SyntaxRoot using tree-sitter."""
    from flatscript.build.documents import SourceDocument

    return SourceDocument.from_text(source_text).parse()


def flatten_text(source_text: str, **config_fields):
    """Run the synchronous pipeline over C# text and return the FlattenResult."""
    from flatscript.build.generator import ScriptGenerator
    from flatscript.config import FlattenConfig

    return ScriptGenerator(FlattenConfig(**config_fields)).flatten(parse_csharp(source_text))


def make_files(tmp_path, file_dict):
    """Create files in tmp_path from a {relative_path: content} dict.

    Returns the project directory path.
    """
    proj = tmp_path / "proj"
    proj.mkdir(exist_ok=True)
    for rel, content in file_dict.items():
        fp = proj / rel
        fp.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            fp.write_bytes(content)
        else:
            fp.write_text(content, encoding="utf-8")
    return proj


# ===========================================================================
# CliRunner helpers
# ===========================================================================


@pytest.fixture
def cli_runner():
    """Provide a Click CliRunner for in-process CLI testing."""
    return CliRunner()


def invoke_cli(runner, args, cwd=None, json_mode=False, input=None):
    """Invoke the flatscript CLI via CliRunner.

    Args:
        runner: CliRunner instance
        args: list of CLI arguments (e.g. ["generate", "Program.cs"])
        cwd: directory to run in
        json_mode: if True, prepend --json flag
        input: optional stdin content
    Returns:
        click.testing.Result
    """
    from flatscript.cli import cli

    full_args = []
    if json_mode:
        full_args.append("--json")
    full_args.extend(args)

    old_cwd = os.getcwd()
    try:
        if cwd:
            os.chdir(str(cwd))
        result = runner.invoke(cli, full_args, input=input, catch_exceptions=False)
    finally:
        os.chdir(old_cwd)

    return result


# ===========================================================================
# JSON validation helpers
# ===========================================================================


def parse_json_output(result, command=None):
    """Parse JSON from a CliRunner result's stdout."""
    assert result.exit_code == 0, f"Command {command or '?'} failed (exit {result.exit_code}):\n{result.output}"
    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        pytest.fail(f"Invalid JSON from {command or '?'}: {e}\nOutput was:\n{result.stdout[:500]}")


def assert_json_envelope(data, command=None):
    """Validate that a parsed JSON dict follows the flatscript envelope contract."""
    assert isinstance(data, dict), f"Expected dict, got {type(data)}"
    assert data.get("schema") == "flatscript-envelope-v1"
    assert "command" in data, "Missing 'command' key in envelope"
    assert "version" in data, "Missing 'version' key in envelope"
    assert "summary" in data, "Missing 'summary' key in envelope"
    assert "timestamp" in data.get("_meta", {}), "Missing 'timestamp' in _meta"
    if command:
        assert data["command"] == command, f"Expected command={command}, got {data['command']}"
    assert isinstance(data["summary"], dict)
